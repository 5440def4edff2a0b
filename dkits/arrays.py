"""Emptiness checks for variadic argument lists."""

from __future__ import annotations

from typing import Any


def empty(*args: Any) -> bool:
    """Return True when no arguments were given."""
    return len(args) == 0


def not_empty(*args: Any) -> bool:
    """Return True when at least one argument was given."""
    return not empty(*args)