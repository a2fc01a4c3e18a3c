"""
Container Codec - Read and write encrypted containers as JSON documents.
"""

import json
from pathlib import Path

from core.container.model import EncryptedContainer
from core.errors import DecodeError, NotFoundError, StorageError


def write_container(container: EncryptedContainer, target_dir: Path) -> Path:
    """
    Serialize a container into the target directory.

    The file is named "<name>.encrypted.json" and an existing file with
    that name is overwritten. The directory is created if absent.

    Args:
        container (EncryptedContainer): The container to persist
        target_dir (Path): Directory receiving the container file

    Returns:
        Path: Path of the written container file

    Raises:
        StorageError: If the directory or the file cannot be written
    """
    target_dir = Path(target_dir)
    path = target_dir / container.file_name

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(container.to_document(), indent=2), encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Cannot write container {path}: {e}") from e

    return path


def read_container(path: Path) -> EncryptedContainer:
    """
    Load a container from its JSON document.

    Args:
        path (Path): Path to a "*.encrypted.json" file

    Returns:
        EncryptedContainer: The decoded container

    Raises:
        NotFoundError: If the file does not exist or is not a regular file
        DecodeError: If the document is malformed or incomplete
        StorageError: If the file exists but cannot be read
    """
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(f"Container file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Container {path} is not UTF-8 text") from e
    except OSError as e:
        raise StorageError(f"Cannot read container {path}: {e}") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Container {path} is not valid JSON: {e}") from e

    return EncryptedContainer.from_document(document)
