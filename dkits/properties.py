"""Loading ``key=value`` property files."""

from __future__ import annotations

from os import PathLike

from dkits.stringsx import empty


class DuplicateKeyError(ValueError):
    """Raised when a property key appears more than once."""


class Properties:
    """A set of string properties read from ``key=value`` lines."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def load(self, path: str | PathLike[str]) -> None:
        """Read properties from the file at ``path``.

        Lines without ``=`` and lines whose key or value is blank are skipped.
        Raises DuplicateKeyError when a key is repeated.
        """
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                key, sep, value = line.strip().partition("=")
                if not sep:
                    continue
                key = key.strip()
                value = value.strip()
                if not key or not value:
                    continue
                self._put(key, value)

    def _put(self, key: str, value: str) -> None:
        if empty(key):
            return
        if key in self._values:
            raise DuplicateKeyError(f"key repeat: {key!r}")
        self._values[key] = value

    def get(self, key: str) -> str | None:
        """Return the value for ``key``, or None when it is absent."""
        return self._values.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)