import typer
from rich import print

from core.config import Config, save_setting
from core.encryption.key import generate_key
from core.utils import console

app = typer.Typer()


@app.command("generate")
def generate(
    save: bool = typer.Option(
        False, "--save", help="Store the key as SEALBOX_CIPHER_KEY in the app .env file"
    ),
):
    """
    Generate a new random cipher key.
    """
    key = generate_key()
    print(str(key))

    if save:
        env_file = save_setting("SEALBOX_CIPHER_KEY", str(key), Config.APP_PATH / ".env")
        console.success(f"Cipher key saved to {env_file}")
        console.info("Keep this key safe: containers cannot be decrypted without it.")
