"""
Encrypted Container - The persisted unit holding ciphertext and file metadata.
"""

import base64
import binascii
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from core.errors import DecodeError
from core.utils.identifiers import uuid7

CONTAINER_SUFFIX = ".encrypted.json"

REQUIRED_FIELDS = ("name", "extension", "size", "vector", "data")


@dataclass(frozen=True)
class EncryptedContainer:
    name: str
    extension: str
    size: int
    vector: bytes
    data: bytes
    id: uuid.UUID = field(default_factory=uuid7)

    def __post_init__(self):
        if len(self.data) < len(self.vector):
            raise DecodeError("Container data is shorter than its vector")

    @property
    def full_name(self) -> str:
        return f"{self.name}{self.extension}"

    @property
    def file_name(self) -> str:
        return f"{self.name}{CONTAINER_SUFFIX}"

    @classmethod
    def from_source(cls, source: Path, size: int, vector: bytes, data: bytes):
        """
        Build a container for an encrypted source file.

        The name is everything before the last suffix, so "report.v2.txt"
        gives name "report.v2" and extension ".txt".
        """
        source = Path(source)
        return cls(
            name=source.stem,
            extension=source.suffix,
            size=size,
            vector=vector,
            data=data,
        )

    def to_document(self) -> Dict[str, Any]:
        """Map the container onto its JSON document schema."""
        return {
            "id": str(self.id),
            "name": self.name,
            "extension": self.extension,
            "size": self.size,
            "fullName": self.full_name,
            "fileName": self.file_name,
            "vector": base64.b64encode(self.vector).decode("ascii"),
            "data": base64.b64encode(self.data).decode("ascii"),
        }

    @classmethod
    def from_document(cls, document: Any) -> "EncryptedContainer":
        """
        Build a container from its JSON document.

        Property names match case-insensitively. "fullName" and "fileName"
        are derived and ignored. A missing "id" reads as the nil UUID.

        Raises:
            DecodeError: If a required field is missing or malformed
        """
        if not isinstance(document, dict):
            raise DecodeError("Container document must be a JSON object")

        fields = {str(key).lower(): value for key, value in document.items()}

        missing = [name for name in REQUIRED_FIELDS if name not in fields]
        if missing:
            raise DecodeError(f"Container is missing required fields: {', '.join(missing)}")

        name = _text(fields, "name")
        extension = _text(fields, "extension")
        _check_file_name(name + extension)

        size = fields["size"]
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise DecodeError(f"Invalid container size: {size!r}")

        identifier = fields.get("id")
        if identifier is None:
            identifier = uuid.UUID(int=0)
        else:
            try:
                identifier = uuid.UUID(str(identifier))
            except ValueError as e:
                raise DecodeError(f"Invalid container id: {identifier!r}") from e

        return cls(
            id=identifier,
            name=name,
            extension=extension,
            size=size,
            vector=_binary(fields, "vector"),
            data=_binary(fields, "data"),
        )


def _text(fields: Dict[str, Any], key: str) -> str:
    value = fields[key]
    if not isinstance(value, str):
        raise DecodeError(f"Container field '{key}' must be a string")
    return value


def _binary(fields: Dict[str, Any], key: str) -> bytes:
    value = _text(fields, key)
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Container field '{key}' is not valid base64") from e


def _check_file_name(full_name: str) -> None:
    # Decrypted files are written as target / full_name
    if (
        not full_name
        or full_name in (".", "..")
        or "/" in full_name
        or "\\" in full_name
        or "\x00" in full_name
    ):
        raise DecodeError(f"Container holds an unsafe file name: {full_name!r}")
