"""AES-CBC encryption with PKCS#5 padding, using the key itself as the IV."""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_BLOCK_SIZE = 16
_KEY_SIZES = (16, 24, 32)


def _key_bytes(key: bytes | str | None) -> bytes:
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key or b"")
    if len(data) not in _KEY_SIZES:
        raise ValueError(f"crypto/aes: invalid key size {len(data)}")
    return data


def _cipher(key: bytes) -> Cipher:
    return Cipher(algorithms.AES(key), modes.CBC(key[:_BLOCK_SIZE]))


def _pad(data: bytes) -> bytes:
    padding = _BLOCK_SIZE - len(data) % _BLOCK_SIZE
    return data + bytes([padding]) * padding


def _unpad(data: bytes) -> bytes:
    if not data:
        raise ValueError("cannot unpad empty data")
    padding = data[-1]
    if padding > len(data):
        raise ValueError("invalid padding")
    return data[: len(data) - padding]


def encrypt(origin_data: bytes, key: bytes | str | None) -> bytes:
    """Encrypt ``origin_data`` with ``key`` (bytes or text)."""
    raw_key = _key_bytes(key)
    encryptor = _cipher(raw_key).encryptor()
    return encryptor.update(_pad(bytes(origin_data))) + encryptor.finalize()


def encrypt_string(text: str, key: bytes | str | None) -> bytes:
    """Encrypt the UTF-8 form of ``text`` with ``key``."""
    return encrypt(text.encode("utf-8"), key)


def decrypt(encrypted: bytes, key: bytes | str | None) -> bytes:
    """Decrypt ``encrypted`` with ``key`` and remove the padding."""
    raw_key = _key_bytes(key)
    if len(encrypted) % _BLOCK_SIZE:
        raise ValueError("crypto/cipher: input not full blocks")
    decryptor = _cipher(raw_key).decryptor()
    plain = decryptor.update(bytes(encrypted)) + decryptor.finalize()
    return _unpad(plain)