"""
Sealbox Command Line Interface - Main entry point.
"""
import typer
from rich import print
from importlib.metadata import PackageNotFoundError, version as package_version

from cli.commands import config, file, key

app = typer.Typer(
    name="sealbox",
    help="Compress and encrypt files into self-describing containers",
    no_args_is_help=True
)

# Register command modules
app.add_typer(file.app, name="file", help="Encrypt and decrypt files")
app.add_typer(key.app, name="key", help="Manage cipher keys")
app.add_typer(config.app, name="config", help="Configure Sealbox settings")


@app.command("version")
def version():
    """
    Show Sealbox version information.
    """
    try:
        current = package_version("sealbox")
    except PackageNotFoundError:
        current = "development"

    print(f"[blue]🔐 Sealbox[/blue] version [green]{current}[/green]")

if __name__ == "__main__":
    app()
