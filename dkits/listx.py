"""A doubly ended list with emptiness checks and iteration helpers."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterable, Iterator, Sized


class Listx:
    """An ordered list supporting pushes at both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(values)

    def push_back(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        self._items.append(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        self._items.appendleft(value)

    def empty(self) -> bool:
        """Return True when the list holds nothing."""
        return len(self._items) == 0

    def not_empty(self) -> bool:
        """Return True when the list holds something."""
        return not self.empty()

    def for_each(self, fn: Callable[[Any], Any] | None) -> None:
        """Call ``fn`` on each element from head to tail; nothing if ``fn`` is None."""
        if fn is None:
            return
        for value in self._items:
            fn(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


def empty(lst: Sized) -> bool:
    """Return True when ``lst`` has no elements."""
    return len(lst) == 0


def not_empty(lst: Sized) -> bool:
    """Return True when ``lst`` has elements."""
    return not empty(lst)