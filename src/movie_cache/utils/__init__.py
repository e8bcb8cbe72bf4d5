"""Utility modules for movie cache."""

from .locking import DEFAULT_LOCK_TIMEOUT, guarded

__all__ = [
    "DEFAULT_LOCK_TIMEOUT",
    "guarded",
]
