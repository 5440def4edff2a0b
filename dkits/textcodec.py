"""Ascii85, base32 and base64 encoding helpers."""

from __future__ import annotations

import base64
import binascii


def ascii85_encode(src: bytes) -> bytes:
    """Encode ``src`` as Ascii85 without delimiters; four zero bytes become ``z``."""
    return base64.a85encode(bytes(src))


def ascii85_decode(src: bytes) -> bytes:
    """Decode Ascii85 data, ignoring whitespace."""
    return base64.a85decode(bytes(src))


def ascii85_max_encoded_len(n: int) -> int:
    """Return the longest encoding of ``n`` source bytes."""
    return (n + 3) // 4 * 5


def base32_encode(src: bytes) -> str:
    """Encode with the standard base32 alphabet and padding."""
    return base64.b32encode(bytes(src)).decode("ascii")


def base32_decode(src: str) -> bytes:
    """Decode standard padded base32."""
    return base64.b32decode(src)


def base32hex_encode(src: bytes) -> str:
    """Encode with the extended-hex base32 alphabet and padding."""
    return base64.b32hexencode(bytes(src)).decode("ascii")


def base32hex_decode(src: str) -> bytes:
    """Decode padded extended-hex base32."""
    return base64.b32hexdecode(src)


def base64_encode(src: bytes) -> str:
    """Encode with the standard padded base64 alphabet."""
    return base64.b64encode(bytes(src)).decode("ascii")


def base64_decode(src: str) -> bytes:
    """Decode standard padded base64, rejecting foreign characters."""
    return base64.b64decode(src, validate=True)


def base64_url_encode(src: bytes) -> str:
    """Encode with the URL-safe padded base64 alphabet."""
    return base64.urlsafe_b64encode(bytes(src)).decode("ascii")


def base64_url_decode(src: str) -> bytes:
    """Decode URL-safe padded base64, rejecting foreign characters."""
    return base64.b64decode(src, altchars=b"-_", validate=True)


def base64_raw_encode(src: bytes) -> str:
    """Encode with the standard base64 alphabet and no padding."""
    return base64_encode(src).rstrip("=")


def base64_raw_decode(src: str) -> bytes:
    """Decode unpadded standard base64."""
    if "=" in src:
        raise binascii.Error("illegal padding in unpadded base64")
    return base64.b64decode(src + "=" * (-len(src) % 4), validate=True)