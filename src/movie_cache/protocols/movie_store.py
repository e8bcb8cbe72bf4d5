"""Movie store protocol.

Defines the interface for the authoritative movie backend. The store owns
every record and never evicts.

Implementations can include:
- In-process dictionary (default)
- PostgreSQL, SQLite or any other database client
"""

from typing import Protocol, runtime_checkable

from movie_cache.entities import MovieEntity


@runtime_checkable
class MovieStore(Protocol):
    """Protocol for the source of truth.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def get(self, movie_id: str) -> MovieEntity | None:
        """Look up a movie by id.

        Args:
            movie_id: The movie identifier

        Returns:
            The movie, or None if absent
        """
        ...

    def put(self, movie: MovieEntity) -> MovieEntity | None:
        """Insert or fully replace the movie stored at ``movie.id``.

        Args:
            movie: The movie to store

        Returns:
            The previous value, or None if the id was new
        """
        ...

    def count(self) -> int:
        """Count stored movies."""
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible."""
        ...
