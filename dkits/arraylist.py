"""A growable list with index-based access that answers out-of-range calls with None."""

from __future__ import annotations

from typing import Any, Iterator


class ArrayList:
    """An ordered collection of arbitrary elements."""

    def __init__(self, *args: Any) -> None:
        self._elements: list[Any] = list(args)

    def add(self, *args: Any) -> None:
        """Append every given element in order."""
        self._elements.extend(args)

    def remove_at_index(self, index: int) -> Any:
        """Remove and return the element at ``index``; None when out of range."""
        if not 0 <= index < len(self._elements):
            return None
        return self._elements.pop(index)

    def remove(self, element: Any) -> bool:
        """Remove the first occurrence of ``element``.

        Returns True when the removed value equals ``element``.
        """
        return self.remove_at_index(self.index_of(element)) == element

    def get(self, index: int) -> Any:
        """Return the element at ``index``; None when out of range."""
        if not 0 <= index < len(self._elements):
            return None
        return self._elements[index]

    def index_of(self, element: Any) -> int:
        """Return the index of the first equal element, or -1."""
        return self.contains(element)[1]

    def empty(self) -> bool:
        """Return True when the list holds no elements."""
        return not self._elements

    def size(self) -> int:
        """Return the number of elements."""
        return len(self._elements)

    def contains(self, element: Any) -> tuple[bool, int]:
        """Return whether ``element`` is present and its first index (-1 if absent)."""
        for index, current in enumerate(self._elements):
            if current == element:
                return True, index
        return False, -1

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayList):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._elements))})"


class List(ArrayList):
    """Shortcut name for :class:`ArrayList`."""