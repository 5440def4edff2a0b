"""Fall back to a default value when an operation reported an error."""

from __future__ import annotations

import logging
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _choose(err: BaseException | None, value: T, default_value: T) -> T:
    if err is not None:
        logger.error("%s", err)
        return default_value
    return value


def default_if_error(value: bool, err: BaseException | None) -> bool:
    """Return ``value``, or False when ``err`` is set."""
    return _choose(err, value, False)


def default_complex_if_error(
    err: BaseException | None, value: complex, default_value: complex
) -> complex:
    """Return ``value``, or ``default_value`` when ``err`` is set."""
    return _choose(err, value, default_value)


def default_float_if_error(
    err: BaseException | None, value: float, default_value: float
) -> float:
    """Return ``value``, or ``default_value`` when ``err`` is set."""
    return _choose(err, value, default_value)


def default_int_if_error(
    err: BaseException | None, value: int, default_value: int
) -> int:
    """Return ``value``, or ``default_value`` when ``err`` is set."""
    return _choose(err, value, default_value)


def default_uint64_if_error(
    err: BaseException | None, value: int, default_value: int
) -> int:
    """Return ``value``, or ``default_value`` when ``err`` is set."""
    return _choose(err, value, default_value)