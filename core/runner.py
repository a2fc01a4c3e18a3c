"""
File Runner - Encrypt a file into a container, or restore a file from one.
"""

from enum import Enum
from pathlib import Path

from core.config import Config
from core.container.codec import read_container, write_container
from core.container.model import EncryptedContainer
from core.encryption import pipeline
from core.encryption.key import CipherKey
from core.errors import NotFoundError, StorageError
from core.utils import console


class Direction(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


def _prepare_target(target: Path) -> Path:
    target = Path(target).expanduser()
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Cannot create target directory {target}: {e}") from e
    return target


def _read_source(source: Path) -> bytes:
    if not source.is_file():
        raise NotFoundError(f"Source file not found: {source}")
    try:
        return source.read_bytes()
    except OSError as e:
        raise StorageError(f"Cannot read source file {source}: {e}") from e


def _encrypt(key: CipherKey, source: Path, target: Path) -> Path:
    data = _read_source(source)
    console.debug(f"Read {len(data)} bytes from {source}")

    vector, payload = pipeline.encrypt(key, data, level=Config.COMPRESSION_LEVEL)
    container = EncryptedContainer.from_source(source, len(data), vector, payload)

    result = write_container(container, target)
    console.debug(f"Container {container.id} holds {len(payload)} payload bytes")
    console.success(f"{source.name} encrypted to {result}")
    return result


def _decrypt(key: CipherKey, source: Path, target: Path) -> Path:
    container = read_container(source)
    plaintext = pipeline.decrypt(key, container.vector, container.data)

    result = target / container.full_name
    try:
        result.write_bytes(plaintext)
    except OSError as e:
        raise StorageError(f"Cannot write decrypted file {result}: {e}") from e

    console.debug(f"Restored {len(plaintext)} bytes from container {container.id}")
    console.success(f"{source.name} decrypted to {result}")
    return result


def run(direction: Direction, key: CipherKey, source: Path, target: Path) -> Path:
    """
    Run the file pipeline in the given direction.

    The target directory is created first and is left in place if the
    run fails afterwards.

    Args:
        direction (Direction): ENCRYPT or DECRYPT
        key: 128-bit cipher key
        source (Path): Plain file to encrypt, or container to decrypt
        target (Path): Output directory

    Returns:
        Path: The container written, or the restored file
    """
    direction = Direction(direction)
    source = Path(source).expanduser()
    target = _prepare_target(target)

    if direction is Direction.ENCRYPT:
        return _encrypt(key, source, target)
    return _decrypt(key, source, target)


def encrypt_file(key: CipherKey, source: Path, target: Path) -> Path:
    """Encrypt `source` into "<name>.encrypted.json" inside `target`."""
    return run(Direction.ENCRYPT, key, source, target)


def decrypt_file(key: CipherKey, source: Path, target: Path) -> Path:
    """Decrypt the container `source` into `target`, under its original file name."""
    return run(Direction.DECRYPT, key, source, target)
