# cli\commands\config.py
import typer
from rich import print
from core.config import Config, save_setting
from pathlib import Path

app = typer.Typer()


@app.command("show")
def show_config():
    """
    Display the current configuration.
    """
    print("[blue]Current Configuration:[/blue]")
    print(f"[green]Environment:[/green] {Config.ENVIRONMENT}")
    print(f"[green]App Directory:[/green] {Config.APP_PATH}")
    print(f"[green]Target Directory:[/green] {Config.TARGET_DIR}")
    print(f"[green]Compression Level:[/green] {Config.COMPRESSION_LEVEL}")
    print(f"[green]Cipher Key:[/green] {'Set' if Config.CIPHER_KEY else 'Not Set'}")


@app.command("set")
def set_config(
    key: str = typer.Argument(
        ..., help="Configuration key to set (e.g., SEALBOX_TARGET_DIR)"
    ),
    value: str = typer.Argument(..., help="Value to set for the configuration key"),
    global_: bool = typer.Option(
        False, "--global", "-g", help="Write to the app directory .env instead of ./.env"
    ),
):
    """
    Set a configuration value in a .env file.
    """
    env_file = Config.APP_PATH / ".env" if global_ else Path(".env")
    save_setting(key, value, env_file)

    print(f"[green]✅ Successfully set {key} in {env_file}[/green]")
    print(
        "[yellow]Note: You need to restart the application for changes to take effect.[/yellow]"
    )
