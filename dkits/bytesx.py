"""Byte buffer filling and 16-bit integer packing helpers."""

from __future__ import annotations


def set_all(buffer: bytearray, value: int) -> None:
    """Set every byte of ``buffer`` to ``value`` in place."""
    buffer[:] = bytes([value]) * len(buffer)


def zero_all(buffer: bytearray) -> None:
    """Set every byte of ``buffer`` to zero in place."""
    set_all(buffer, 0)


def from_uint16_le(value: int) -> bytes:
    """Pack an unsigned 16-bit integer as two little-endian bytes."""
    return value.to_bytes(2, "little")


def to_uint16_le(data: bytes | None) -> int:
    """Read a little-endian 16-bit integer from the first bytes of ``data``.

    An empty input gives 0 and a single byte is taken as the value.
    """
    if not data:
        return 0
    if len(data) == 1:
        return data[0]
    return data[0] | data[1] << 8


def from_uint16_be(value: int) -> bytes:
    """Pack an unsigned 16-bit integer as two big-endian bytes."""
    return value.to_bytes(2, "big")


def to_uint16_be(data: bytes | None) -> int:
    """Read a big-endian 16-bit integer from the first bytes of ``data``.

    An empty input gives 0 and a single byte is taken as the value.
    """
    if not data:
        return 0
    if len(data) == 1:
        return data[0]
    return data[0] << 8 | data[1]