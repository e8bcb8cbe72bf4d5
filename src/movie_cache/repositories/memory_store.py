"""In-memory implementation of MovieStore.

A dictionary guarded by its own lock. This is the default source of truth;
data lives for the lifetime of the process.
"""

import threading
from collections.abc import Iterable

from movie_cache.entities import MovieEntity
from movie_cache.utils import DEFAULT_LOCK_TIMEOUT, guarded

SEED_MOVIES: tuple[MovieEntity, ...] = (
    MovieEntity(id="1", name="Movie", year=2000, was_good=True),
)


class InMemoryMovieStore:
    """Dictionary-backed store.

    Satisfies the MovieStore protocol through structural typing.
    """

    def __init__(
        self,
        seed: Iterable[MovieEntity] | None = None,
        lock_timeout: float = DEFAULT_LOCK_TIMEOUT,
    ) -> None:
        """Initialize the store.

        Args:
            seed: Movies to preload
            lock_timeout: Seconds to wait for the store lock, negative for no limit
        """
        self._movies: dict[str, MovieEntity] = {movie.id: movie for movie in seed or ()}
        self._lock = threading.Lock()
        self._lock_timeout = lock_timeout

    @classmethod
    def create(cls, seed_data: bool = True, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> "InMemoryMovieStore":
        """Factory method that optionally preloads SEED_MOVIES."""
        return cls(seed=SEED_MOVIES if seed_data else None, lock_timeout=lock_timeout)

    def get(self, movie_id: str) -> MovieEntity | None:
        """Look up a movie by id.

        Args:
            movie_id: The movie identifier

        Returns:
            The movie, or None if absent
        """
        with guarded(self._lock, "store", self._lock_timeout):
            return self._movies.get(movie_id)

    def put(self, movie: MovieEntity) -> MovieEntity | None:
        """Insert or fully replace the movie stored at ``movie.id``.

        Args:
            movie: The movie to store

        Returns:
            The previous value, or None if the id was new
        """
        with guarded(self._lock, "store", self._lock_timeout):
            previous = self._movies.get(movie.id)
            self._movies[movie.id] = movie
            return previous

    def count(self) -> int:
        """Count stored movies."""
        with guarded(self._lock, "store", self._lock_timeout):
            return len(self._movies)

    def health_check(self) -> bool:
        """An in-process dictionary is always reachable."""
        return True
