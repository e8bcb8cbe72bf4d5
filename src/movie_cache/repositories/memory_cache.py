"""In-memory implementation of MovieCache."""

import threading

from movie_cache.entities import MovieEntity
from movie_cache.utils import DEFAULT_LOCK_TIMEOUT, guarded


class InMemoryMovieCache:
    """Unbounded dictionary cache with its own lock.

    The lock is never shared with a store, so cache hits do not
    contend with store writes.
    """

    backend_name = "memory"

    def __init__(self, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> None:
        """Initialize an empty cache.

        Args:
            lock_timeout: Seconds to wait for the cache lock, negative for no limit
        """
        self._entries: dict[str, MovieEntity] = {}
        self._lock = threading.Lock()
        self._lock_timeout = lock_timeout

    def get(self, movie_id: str) -> MovieEntity | None:
        """Look up a cached movie.

        Args:
            movie_id: The movie identifier

        Returns:
            The cached movie, or None on a cache miss
        """
        with guarded(self._lock, "cache", self._lock_timeout):
            return self._entries.get(movie_id)

    def put(self, movie_id: str, movie: MovieEntity) -> None:
        """Insert or overwrite a cache entry.

        Args:
            movie_id: The movie identifier
            movie: The movie to cache
        """
        with guarded(self._lock, "cache", self._lock_timeout):
            self._entries[movie_id] = movie

    def invalidate(self, movie_id: str) -> bool:
        """Remove a single entry.

        Args:
            movie_id: The movie identifier

        Returns:
            True if an entry was removed, False otherwise
        """
        with guarded(self._lock, "cache", self._lock_timeout):
            return self._entries.pop(movie_id, None) is not None

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed
        """
        with guarded(self._lock, "cache", self._lock_timeout):
            count = len(self._entries)
            self._entries.clear()
            return count

    def count(self) -> int:
        """Count cached entries."""
        with guarded(self._lock, "cache", self._lock_timeout):
            return len(self._entries)

    def health_check(self) -> bool:
        """An in-process dictionary is always reachable."""
        return True

    def __contains__(self, movie_id: object) -> bool:
        with guarded(self._lock, "cache", self._lock_timeout):
            return movie_id in self._entries
