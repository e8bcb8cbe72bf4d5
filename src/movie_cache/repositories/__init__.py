"""Repository layer for data access.

This layer puts concrete backends (dictionaries, Redis) behind the
protocol-based interfaces. This enables:
- Easy swapping of implementations (in-memory → Redis, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from movie_cache.protocols import MovieCache, MovieStore

from .memory_cache import InMemoryMovieCache
from .memory_store import SEED_MOVIES, InMemoryMovieStore
from .redis_cache import RedisMovieCache

__all__ = [
    "MovieCache",
    "MovieStore",
    "InMemoryMovieCache",
    "InMemoryMovieStore",
    "RedisMovieCache",
    "SEED_MOVIES",
]
