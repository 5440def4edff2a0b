"""Small helpers for creating and logging errors."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_error(err: BaseException | None) -> BaseException | None:
    """Log ``err`` if it is set and hand it back unchanged."""
    if err is not None:
        logger.error("%s", err)
    return err


def err(message: str) -> Exception:
    """Create an error carrying ``message``."""
    return Exception(message)