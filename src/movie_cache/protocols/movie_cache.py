"""Movie cache protocol.

Defines the interface for the auxiliary, non-authoritative cache that sits
in front of a MovieStore. Dropping every entry must never change what a
fetch returns, only how fast it returns.

Implementations can include:
- In-process dictionary (default)
- Redis
- Memcached
"""

from typing import Protocol, runtime_checkable

from movie_cache.entities import MovieEntity


@runtime_checkable
class MovieCache(Protocol):
    """Protocol for cache backends."""

    @property
    def backend_name(self) -> str:
        """Short backend identifier for stats (e.g. "memory", "redis")."""
        ...

    def get(self, movie_id: str) -> MovieEntity | None:
        """Look up a cached movie.

        Returns:
            The cached movie, or None on a cache miss
        """
        ...

    def put(self, movie_id: str, movie: MovieEntity) -> None:
        """Insert or overwrite a cache entry."""
        ...

    def invalidate(self, movie_id: str) -> bool:
        """Remove a single entry.

        Returns:
            True if an entry was removed, False otherwise
        """
        ...

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed
        """
        ...

    def count(self) -> int:
        """Count cached entries."""
        ...

    def health_check(self) -> bool:
        """Check if the cache backend is accessible."""
        ...
