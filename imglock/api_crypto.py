"""Single-buffer key derivation and encode/decode wrappers."""

from .main import imglock


def derive_key(password: str | bytes, kdf: str | None = None):
    return imglock.derive_key(password, kdf)


def password_hash(password: str | bytes):
    return imglock.password_hash(password)


def encode(plaintext: bytes, password: str | bytes, kdf: str | None = None):
    return imglock.encode(plaintext, password, kdf)


def decode(buffer: bytes, password: str | bytes, kdf: str | None = None):
    return imglock.decode(buffer, password, kdf)


__all__ = [
    "decode",
    "derive_key",
    "encode",
    "password_hash",
]
