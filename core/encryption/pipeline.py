"""
Cipher Pipeline - Compress then encrypt file content, and the reverse.

Payload layout: the 16 byte initialization vector, followed by the
AES-128-CBC (PKCS7 padded) encryption of the zlib-compressed plaintext.
"""

import os
import zlib
from typing import Tuple

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from core.encryption.key import CipherKey, key_bytes
from core.errors import CipherError

BLOCK_SIZE = algorithms.AES.block_size // 8
DEFAULT_COMPRESSION_LEVEL = 9


def _cipher(key: CipherKey, vector: bytes) -> Cipher:
    try:
        return Cipher(algorithms.AES(key_bytes(key)), modes.CBC(vector))
    except ValueError as e:
        raise CipherError(f"Invalid cipher parameters: {e}") from e


def _compression_level(level) -> int:
    try:
        level = int(level)
    except (TypeError, ValueError) as e:
        raise CipherError(f"Invalid compression level: {level!r}") from e
    if not -1 <= level <= 9:
        raise CipherError(f"Compression level must be between -1 and 9, got {level}")
    return level


def encrypt(
    key: CipherKey, data: bytes, level: int = DEFAULT_COMPRESSION_LEVEL
) -> Tuple[bytes, bytes]:
    """
    Compress and encrypt raw bytes.

    Args:
        key: 128-bit cipher key
        data (bytes): Plaintext to protect
        level (int): zlib compression level, -1 to 9

    Returns:
        Tuple[bytes, bytes]: The generated vector and the payload
        (vector followed by ciphertext)

    Raises:
        CipherError: If the compression level is out of range
    """
    level = _compression_level(level)
    vector = os.urandom(BLOCK_SIZE)

    compressed = zlib.compress(data, level=level)

    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(compressed) + padder.finalize()

    encryptor = _cipher(key, vector).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()

    return vector, vector + ciphertext


def decrypt(key: CipherKey, vector: bytes, payload: bytes) -> bytes:
    """
    Decrypt and decompress a payload produced by `encrypt`.

    The vector passed in is the authoritative one; the copy stored at the
    start of the payload must match it.

    Args:
        key: 128-bit cipher key
        vector (bytes): Initialization vector stored beside the payload
        payload (bytes): Vector prefix followed by ciphertext

    Returns:
        bytes: The original plaintext

    Raises:
        CipherError: On a vector mismatch, a wrong key, or a corrupt or
            truncated ciphertext
    """
    if len(payload) < len(vector):
        raise CipherError("Payload is shorter than its initialization vector")
    if payload[: len(vector)] != vector:
        raise CipherError("Payload does not start with its initialization vector")

    body = payload[len(vector) :]
    if not body or len(body) % BLOCK_SIZE:
        raise CipherError("Ciphertext is truncated or not block aligned")

    decryptor = _cipher(key, vector).decryptor()
    padded = decryptor.update(body) + decryptor.finalize()

    try:
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        compressed = unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        raise CipherError("Invalid padding: wrong key or corrupt ciphertext") from e

    decompressor = zlib.decompressobj()
    try:
        data = decompressor.decompress(compressed) + decompressor.flush()
    except zlib.error as e:
        raise CipherError(f"Corrupt compressed stream: {e}") from e

    if not decompressor.eof or decompressor.unused_data:
        raise CipherError("Compressed stream is truncated or has trailing data")

    return data
