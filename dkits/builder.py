"""A byte-oriented string builder with bulk append helpers."""

from __future__ import annotations


class Builder:
    """Accumulates text and bytes; its length is counted in bytes."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_string(self, text: str) -> int:
        """Append ``text`` as UTF-8 and return the number of bytes written."""
        data = text.encode("utf-8")
        self._buffer += data
        return len(data)

    def write_byte(self, value: int) -> None:
        """Append a single byte (0-255)."""
        if not 0 <= value <= 255:
            raise ValueError(f"byte value out of range: {value}")
        self._buffer.append(value)

    def join_string(self, *args: str) -> int:
        """Append every string and return the total number of bytes written."""
        return sum(self.write_string(text) for text in args)

    def join_byte(self, *args: int) -> int:
        """Append every byte and return how many were written."""
        total = 0
        for value in args:
            self.write_byte(value)
            total += 1
        return total

    def __len__(self) -> int:
        return len(self._buffer)

    def __str__(self) -> str:
        return self._buffer.decode("utf-8", errors="replace")