"""
Cipher keys - 128-bit UUID values used directly as AES-128 key material.

No key derivation function is applied: the 16 bytes of the UUID are the
AES key. This keeps containers written by earlier releases readable, and
it means the key must be kept as secret as a random AES key would be.
"""

import uuid
from typing import Union

KEY_SIZE = 16

CipherKey = Union[uuid.UUID, bytes, bytearray]


def key_bytes(key: CipherKey) -> bytes:
    """
    Return the raw AES key bytes for a cipher key.

    UUIDs are laid out with their first three fields little-endian, the
    byte order of .NET's Guid.ToByteArray, so keys stay interchangeable
    with containers written by the original tool.

    Args:
        key: A UUID, or 16 raw key bytes

    Returns:
        bytes: The 16 byte AES key

    Raises:
        ValueError: If raw bytes are not exactly 16 bytes long
    """
    if isinstance(key, uuid.UUID):
        return key.bytes_le

    if len(key) != KEY_SIZE:
        raise ValueError(f"Cipher key must be {KEY_SIZE} bytes, got {len(key)}")
    return bytes(key)


def parse_key(value: str) -> uuid.UUID:
    """
    Parse the textual form of a cipher key.

    Args:
        value (str): UUID string, with or without hyphens or braces

    Raises:
        ValueError: If the value is not a valid UUID
    """
    try:
        return uuid.UUID(value.strip())
    except (AttributeError, ValueError) as e:
        raise ValueError(f"Invalid cipher key: {value!r}") from e


def generate_key() -> uuid.UUID:
    """Generate a new random cipher key."""
    return uuid.uuid4()
