"""
File Commands - Encrypt a file into a container, or decrypt one back.
"""
import typer
from pathlib import Path
from typing import Optional

from core.config import Config
from core.encryption.key import parse_key
from core.errors import SealboxError
from core.runner import Direction, run
from core.utils import console

app = typer.Typer(help="Commands for interfacing with system files")


def _resolve_key(key: Optional[str]):
    value = key or Config.CIPHER_KEY
    if not value:
        raise typer.BadParameter(
            "No cipher key given. Pass --key or set SEALBOX_CIPHER_KEY.",
            param_hint="--key",
        )
    try:
        return parse_key(value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--key")


def _run(direction: Direction, source: Path, target: Optional[Path], key: Optional[str]):
    cipher_key = _resolve_key(key)
    target_dir = target or Path(Config.TARGET_DIR)

    try:
        return run(direction, cipher_key, source, target_dir)
    except SealboxError as e:
        console.error(f"{direction.value.capitalize()} failed: {str(e)}")
        raise typer.Exit(code=1)


@app.command("encrypt")
def encrypt_file(
    source: Path = typer.Option(..., "--source", "-s", help="File to encrypt"),
    target: Optional[Path] = typer.Option(
        None, "--target", "-t", help="Output directory (defaults to SEALBOX_TARGET_DIR)"
    ),
    key: Optional[str] = typer.Option(
        None, "--key", "-k", help="Encryption key. Configurable with SEALBOX_CIPHER_KEY."
    ),
):
    """
    Encrypt a file and output the result to the specified directory.
    """
    return _run(Direction.ENCRYPT, source, target, key)


@app.command("decrypt")
def decrypt_file(
    source: Path = typer.Option(..., "--source", "-s", help="File to decrypt"),
    target: Optional[Path] = typer.Option(
        None, "--target", "-t", help="Output directory (defaults to SEALBOX_TARGET_DIR)"
    ),
    key: Optional[str] = typer.Option(
        None, "--key", "-k", help="Encryption key. Configurable with SEALBOX_CIPHER_KEY."
    ),
):
    """
    Decrypt an encrypted file and output the result to the specified directory.
    """
    return _run(Direction.DECRYPT, source, target, key)
