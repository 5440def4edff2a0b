"""String checks, conversions and stripping helpers."""

from __future__ import annotations

import math
import re

from dkits.defaults import (
    default_complex_if_error,
    default_float_if_error,
    default_if_error,
    default_int_if_error,
    default_uint64_if_error,
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_LIMIT = 2**64
_BLANK_CHARS = " \n\t"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def trim(text: str) -> str:
    """Remove leading and trailing spaces (only the space character)."""
    return text.strip(" ")


def empty(text: str) -> bool:
    """Return True for an empty string, a lone newline or tab, or spaces only."""
    return text in ("\n", "\t", "") or len(trim(text)) == 0


def not_empty(text: str) -> bool:
    """Return True when ``text`` is not empty."""
    return not empty(text)


def any_empty(*args: str) -> bool:
    """Return True when no strings are given or any of them is empty."""
    if not args:
        return True
    return any(empty(one) for one in args)


def none_empty(*args: str) -> bool:
    """Return True when strings are given and none of them is empty."""
    return not any_empty(*args)


def default_if_empty(text: str, default: str) -> str:
    """Return ``default`` when ``text`` is empty, else ``text``."""
    return default if empty(text) else text


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value


def to_int(text: str) -> int:
    """Parse a signed decimal integer; 0 when empty or invalid."""
    if empty(text):
        return 0
    try:
        value = _parse_int(text)
    except ValueError as exc:
        return default_int_if_error(exc, 0, 0)
    return value


def _parse_float(text: str) -> float:
    if "_" in text and not text.lstrip("+-").lower().startswith("0x"):
        raise ValueError(f"invalid syntax: {text!r}")
    sign = -1.0 if text.startswith("-") else 1.0
    rest = text[1:] if text[:1] in "+-" else text
    lowered = rest.lower()
    if lowered in ("inf", "infinity"):
        return sign * math.inf
    if lowered == "nan":
        return math.nan
    if lowered.startswith("0x"):
        if any(ch.isspace() for ch in text):
            raise ValueError(f"invalid syntax: {text!r}")
        value = float.fromhex(text.replace("_", ""))
    else:
        if not _FLOAT_RE.fullmatch(text):
            raise ValueError(f"invalid syntax: {text!r}")
        value = float(text)
    if math.isinf(value):
        raise ValueError(f"value out of range: {text!r}")
    return value


def to_float(text: str) -> float:
    """Parse a floating point number; 0.0 when empty or invalid."""
    if empty(text):
        return 0.0
    try:
        value = _parse_float(text)
    except ValueError as exc:
        return default_float_if_error(exc, 0.0, 0.0)
    return value


def to_bool(text: str) -> bool:
    """Parse 1/t/T/TRUE/true/True or 0/f/F/FALSE/false/False; False otherwise."""
    if empty(text):
        return False
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    return default_if_error(False, ValueError(f"invalid syntax: {text!r}"))


def _parse_complex(text: str) -> complex:
    body = text
    if len(body) >= 2 and body.startswith("(") and body.endswith(")"):
        body = body[1:-1]
    if (
        not body
        or "j" in body.lower()
        or "_" in body
        or any(ch.isspace() for ch in body)
    ):
        raise ValueError(f"invalid syntax: {text!r}")
    if body.endswith("i") and not body.lower().endswith("infi") is False:
        pass
    if body.endswith("i"):
        body = body[:-1] + "j"
    return complex(body)


def to_complex(text: str) -> complex:
    """Parse a complex number written as ``a+bi``; 0 when empty or invalid."""
    if empty(text):
        return 0j
    try:
        value = _parse_complex(text)
    except ValueError as exc:
        return default_complex_if_error(exc, 0j, 0j)
    return value


def _strip_underscores(digits: str, prefixed: bool) -> str:
    if "_" not in digits:
        return digits
    if digits.endswith("_") or "__" in digits or (digits.startswith("_") and not prefixed):
        raise ValueError("misplaced underscore")
    return digits.replace("_", "")


def _parse_uint(text: str, base: int) -> int:
    if base < 0 or base == 1 or base > 36:
        raise ValueError(f"invalid base {base}")
    digits = text
    if base == 0:
        base = 10
        prefixed = False
        lowered = digits.lower()
        for prefix, prefix_base in (("0x", 16), ("0b", 2), ("0o", 8)):
            if lowered.startswith(prefix):
                base, digits, prefixed = prefix_base, digits[2:], True
                break
        else:
            if len(digits) > 1 and digits[0] == "0":
                base, digits, prefixed = 8, digits[1:], True
        digits = _strip_underscores(digits, prefixed)
    allowed = _DIGITS[:base]
    if not digits or any(ch.lower() not in allowed for ch in digits):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(digits, base)
    if value >= _UINT64_LIMIT:
        raise ValueError(f"value out of range: {text!r}")
    return value


def to_uint(text: str, base: int) -> int:
    """Parse an unsigned 64-bit integer in ``base``; 0 when empty or invalid.

    With base 0 the prefix picks the base: 0b binary, 0 or 0o octal,
    0x hexadecimal, otherwise decimal.
    """
    if empty(text):
        return 0
    try:
        value = _parse_uint(text, base)
    except ValueError as exc:
        return default_uint64_if_error(exc, 0, 0)
    return value


def to_bytes(text: str) -> bytes | None:
    """Encode ``text`` as UTF-8, or return None when it is empty."""
    if empty(text):
        return None
    return text.encode("utf-8")


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every ``old`` with ``new``; unchanged if any of the three is empty."""
    if any_empty(text, old, new):
        return text
    return text.replace(old, new)


def _chars_to_strip(strip_chars: str) -> str:
    return _BLANK_CHARS if empty(strip_chars) else strip_chars


def strip_start(text: str, strip_chars: str) -> str:
    """Remove leading characters found in ``strip_chars`` (whitespace if blank)."""
    if empty(text):
        return text
    return text.lstrip(_chars_to_strip(strip_chars))


def strip_end(text: str, strip_chars: str) -> str:
    """Remove trailing characters found in ``strip_chars`` (whitespace if blank)."""
    if empty(text):
        return text
    return text.rstrip(_chars_to_strip(strip_chars))


def strip(text: str, strip_chars: str) -> str:
    """Remove characters in ``strip_chars`` from both ends (whitespace if blank)."""
    if empty(text):
        return text
    return strip_end(strip_start(text, strip_chars), strip_chars)


def strip_blank(text: str) -> str:
    """Remove spaces, tabs and newlines from both ends."""
    return strip(text, "")