"""Bounded lock acquisition."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from movie_cache.exceptions import ResourceBusyError

# Matches threading.Lock.acquire: a negative timeout waits forever
DEFAULT_LOCK_TIMEOUT = 5.0


@contextmanager
def guarded(lock: threading.Lock, resource: str, timeout: float = DEFAULT_LOCK_TIMEOUT) -> Iterator[None]:
    """Hold ``lock`` for the duration of the block.

    Args:
        lock: The lock to acquire
        resource: Name used in the error message
        timeout: Seconds to wait, negative for no limit

    Raises:
        ResourceBusyError: If the lock is not acquired in time
    """
    if not lock.acquire(timeout=timeout if timeout >= 0 else -1):
        raise ResourceBusyError(resource, timeout)
    try:
        yield
    finally:
        lock.release()
