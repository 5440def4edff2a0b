"""Hex digests of text."""

from __future__ import annotations

import hashlib


def md5_hex(text: str) -> str:
    """Return the MD5 hex digest of ``text``."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def sha1_hex(text: str) -> str:
    """Return the SHA-1 hex digest of ``text``."""
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


def sha256_hex(text: str) -> str:
    """Return the SHA-256 hex digest of ``text``."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def sha512_hex(text: str) -> str:
    """Return the SHA-512 hex digest of ``text``."""
    return hashlib.sha512(text.encode("utf-8")).hexdigest()