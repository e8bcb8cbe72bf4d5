"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (in-memory → Redis, dict → database, etc.)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from movie_cache.protocols import MovieCache, MovieStore

    store: MovieStore = InMemoryMovieStore()
    cache: MovieCache = RedisMovieCache.create()
    ```
"""

from .movie_cache import MovieCache
from .movie_store import MovieStore

__all__ = [
    "MovieCache",
    "MovieStore",
]
