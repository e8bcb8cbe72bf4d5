"""Cache-aside service for core business logic.

This service orchestrates reads and writes by coordinating the
authoritative store and the auxiliary cache.
"""

import logging
import threading

from movie_cache.config import settings
from movie_cache.entities import CacheStats, MovieEntity
from movie_cache.exceptions import MovieNotFoundError
from movie_cache.protocols import MovieCache, MovieStore
from movie_cache.utils import DEFAULT_LOCK_TIMEOUT, guarded

logger = logging.getLogger(__name__)


class CacheAsideService:
    """Read-through, write-through orchestration over a store and a cache.

    This service depends on PROTOCOLS, not concrete implementations:
    - MovieStore: the source of truth (in-memory dict, a database client, ...)
    - MovieCache: an optional speed-up (in-memory dict, Redis, ...)

    Locking:
        The store and the cache each guard themselves. On top of that the
        service holds ``_write_lock`` across every sequence that writes the
        cache from a store value: the store write plus cache overwrite in
        ``create_or_replace``, and the store read plus cache fill on a miss
        in ``fetch``. Cache hits never touch ``_write_lock``. A fill can
        therefore never install a value older than a completed write, and a
        write drops the cached entry before touching the store so a failed
        cache update leaves the id uncached rather than stale.

    Example:
        ```python
        from movie_cache.repositories import InMemoryMovieCache, InMemoryMovieStore
        from movie_cache.services import CacheAsideService

        service = CacheAsideService.create(
            store=InMemoryMovieStore.create(),
            cache=InMemoryMovieCache(),
        )
        movie = service.fetch("1")
        ```
    """

    def __init__(
        self,
        store: MovieStore,
        cache: MovieCache,
        lock_timeout: float = DEFAULT_LOCK_TIMEOUT,
    ) -> None:
        """Initialize the service.

        Args:
            store: Authoritative backend (required).
            cache: Cache backend (required).
            lock_timeout: Seconds to wait for the write-sequencing lock, negative for no limit.
        """
        self._store = store
        self._cache = cache
        self._lock_timeout = lock_timeout
        self._write_lock = threading.Lock()
        self._stats = CacheStats()

    @classmethod
    def create(
        cls,
        store: MovieStore,
        cache: MovieCache,
        lock_timeout: float | None = None,
    ) -> "CacheAsideService":
        """Factory method to create CacheAsideService with settings defaults.

        Args:
            store: Authoritative backend (required).
            cache: Cache backend (required).
            lock_timeout: Lock wait in seconds. If None, uses settings.

        Returns:
            Configured CacheAsideService instance
        """
        if lock_timeout is None:
            lock_timeout = settings.lock_timeout
        return cls(store=store, cache=cache, lock_timeout=lock_timeout)

    def fetch(self, movie_id: str) -> MovieEntity:
        """Get a movie, consulting the cache first.

        Business logic:
        1. Query the cache; on a hit return it without touching the store
        2. On a miss query the store; if absent raise MovieNotFoundError
        3. Populate the cache with the store value and return it

        Args:
            movie_id: The movie identifier

        Returns:
            The movie

        Raises:
            MovieNotFoundError: If the id is in neither cache nor store
        """
        movie = self._cache.get(movie_id)
        if movie is not None:
            self._stats.record_hit()
            logger.debug("Cache hit for movie %s", movie_id)
            return movie

        with guarded(self._write_lock, "write-sequencing", self._lock_timeout):
            movie = self._store.get(movie_id)
            if movie is not None:
                self._cache.put(movie_id, movie)

        if movie is None:
            self._stats.record_not_found()
            logger.debug("Movie %s not found", movie_id)
            raise MovieNotFoundError(movie_id)

        self._stats.record_miss()
        logger.debug("Cache miss for movie %s, filled from store", movie_id)
        return movie

    def create_or_replace(self, movie: MovieEntity) -> MovieEntity:
        """Upsert a movie into the store and keep the cache in step.

        An existing id is overwritten wholesale; there is no conflict error.

        Business logic:
        1. Invalidate the cached entry; if that fails the store is untouched
        2. Upsert into the store
        3. Overwrite the cache with the new value

        If step 3 fails the id is simply uncached, so the next fetch reads
        the store. The cache never keeps a value older than the store.

        Args:
            movie: The movie to store

        Returns:
            The stored movie

        Raises:
            InvalidMovieError: If the movie is malformed
        """
        movie.validate()

        with guarded(self._write_lock, "write-sequencing", self._lock_timeout):
            self._cache.invalidate(movie.id)
            previous = self._store.put(movie)
            self._cache.put(movie.id, movie)

        self._stats.record_write()
        logger.info("%s movie %s", "Replaced" if previous is not None else "Created", movie.id)
        return movie

    def invalidate(self, movie_id: str) -> bool:
        """Drop one cache entry; the next fetch re-reads the store.

        Returns:
            True if an entry was removed
        """
        return self._cache.invalidate(movie_id)

    def clear_cache(self) -> int:
        """Drop every cache entry.

        Returns:
            Number of entries removed
        """
        count = self._cache.clear()
        logger.info("Cleared %d cache entries", count)
        return count

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with counters and entry counts
        """
        stats: dict = self._stats.to_dict()
        stats["store_entries"] = self._store.count()
        stats["cache_entries"] = self._cache.count()
        stats["cache_backend"] = self._cache.backend_name
        return stats

    def reset_stats(self) -> None:
        """Zero the hit/miss/write counters."""
        self._stats.reset()

    def health_status(self) -> dict[str, bool]:
        """Check each backend.

        Returns:
            Dictionary with ``store_healthy`` and ``cache_healthy`` flags
        """
        return {
            "store_healthy": self._store.health_check(),
            "cache_healthy": self._cache.health_check(),
        }

    def is_healthy(self) -> bool:
        """Check if both backends are healthy."""
        return all(self.health_status().values())

    @property
    def store(self) -> MovieStore:
        """Get the underlying store (for testing)."""
        return self._store

    @property
    def cache(self) -> MovieCache:
        """Get the underlying cache (for testing)."""
        return self._cache
