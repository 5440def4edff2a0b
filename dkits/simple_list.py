"""A linked list with value-based search and removal."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable


class SimpleList:
    """An ordered list; lookups compare by equality, empty ends yield None."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        self._items.append(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        self._items.appendleft(value)

    def remove(self, value: Any) -> None:
        """Remove the first element equal to ``value``, if any."""
        try:
            self._items.remove(value)
        except ValueError:
            pass

    def front(self) -> Any:
        """Return the head element, or None when empty."""
        return self._items[0] if self._items else None

    def back(self) -> Any:
        """Return the tail element, or None when empty."""
        return self._items[-1] if self._items else None

    def pop_front(self) -> Any:
        """Remove and return the head element, or None when empty."""
        return self._items.popleft() if self._items else None

    def pop_back(self) -> Any:
        """Remove and return the tail element, or None when empty."""
        return self._items.pop() if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def foreach(self, fn: Callable[[Any], bool]) -> None:
        """Call ``fn`` on each element from head; stop when it returns False."""
        for value in self._items:
            if not fn(value):
                return

    def find(self, value: Any) -> bool:
        """Return True when an element equal to ``value`` is present."""
        return any(value == current for current in self._items)