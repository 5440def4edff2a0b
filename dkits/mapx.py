"""Key-value maps that keep their own entry count, including a multi-value map."""

from __future__ import annotations

from typing import Any, Hashable

from dkits.arraylist import ArrayList


class Map:
    """A key-value map; a key mapped to None counts as absent."""

    def __init__(self, capacity: int = 0) -> None:
        self._size = 0
        self._kv: dict[Hashable, Any] = {}

    def contains_key(self, key: Hashable) -> bool:
        """Return True when ``key`` maps to a value other than None."""
        return self._kv.get(key) is not None

    def put(self, key: Hashable, value: Any) -> bool:
        """Map ``key`` to ``value``; always returns True."""
        if not self.contains_key(key):
            self._size += 1
        self._kv[key] = value
        return True

    def get(self, key: Hashable) -> Any:
        """Return the value for ``key``, or None."""
        return self._kv.get(key)

    def value(self, key: Hashable) -> Any:
        """Return the value for ``key``, or None."""
        return self._kv.get(key)

    def remove(self, key: Hashable) -> bool:
        """Remove ``key`` and decrement the entry count; always returns True."""
        self._kv.pop(key, None)
        self._size -= 1
        return True

    def empty(self) -> bool:
        """Return True when the entry count is zero."""
        return self._size == 0

    def size(self) -> int:
        """Return the entry count."""
        return self._size


class MultiValueMap:
    """Maps each key to an :class:`ArrayList` of values."""

    def __init__(self, capacity: int = 0) -> None:
        self._size = 0
        self._kvs: dict[Hashable, ArrayList] = {}

    def contains_key(self, key: Hashable) -> bool:
        """Return True when ``key`` has a value list."""
        return self._kvs.get(key) is not None

    def put(self, key: Hashable, *args: Any) -> bool:
        """Append values to the list of ``key``, creating it when missing or empty."""
        values = self.values(key)
        if values is None or values.empty():
            self._kvs[key] = ArrayList(*args)
            self._size += 1
        else:
            values.add(*args)
        return True

    def get(self, key: Hashable) -> ArrayList | None:
        """Return the value list for ``key``, or None."""
        return self.values(key)

    def values(self, key: Hashable) -> ArrayList | None:
        """Return the value list for ``key``, or None."""
        return self._kvs.get(key)

    def remove(self, key: Hashable) -> bool:
        """Remove ``key`` and decrement the entry count; always returns True."""
        self._kvs.pop(key, None)
        self._size -= 1
        return True

    def empty(self) -> bool:
        """Return True when the entry count is zero."""
        return self._size == 0

    def size(self) -> int:
        """Return the entry count."""
        return self._size