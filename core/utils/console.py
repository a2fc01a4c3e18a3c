from rich.console import Console

from core.config import Config

console = Console(stderr=True)

def info(msg): console.print(f"ℹ️  {msg}", style="blue")
def success(msg): console.print(f"✅ {msg}", style="green")
def error(msg): console.print(f"❌ {msg}", style="red")

def debug(msg):
    if Config.DEBUG:
        console.print(f"🔍 {msg}", style="dim")
