"""
Errors - Typed failures raised by the sealbox core.
"""


class SealboxError(Exception):
    """Base exception for every failure surfaced by the core."""


class NotFoundError(SealboxError, FileNotFoundError):
    """Raised when a source file or container file does not exist."""


class DecodeError(SealboxError, ValueError):
    """Raised when a container document is malformed or incomplete."""


class CipherError(SealboxError, ValueError):
    """Raised when decryption fails: wrong key, corrupt or truncated ciphertext."""


class StorageError(SealboxError, OSError):
    """Raised when reading or writing the filesystem fails."""
