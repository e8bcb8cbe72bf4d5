"""Movie Cache - a movie lookup service with a read-through cache.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (MovieStore, MovieCache)
    - repositories: Backend implementations (in-memory, Redis)
    - services: Cache-aside orchestration
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from movie_cache.repositories import InMemoryMovieCache, InMemoryMovieStore
    from movie_cache.services import CacheAsideService

    service = CacheAsideService.create(
        store=InMemoryMovieStore.create(),
        cache=InMemoryMovieCache(),
    )
    ```

For HTTP API:
    ```python
    from movie_cache.api.app import app
    ```
"""

from movie_cache.config import get_redis_client, settings
from movie_cache.dto import MovieRequest, MovieResponse
from movie_cache.entities import CacheStats, MovieEntity
from movie_cache.exceptions import (
    BackendError,
    CacheBackendError,
    InvalidMovieError,
    MovieCacheError,
    MovieNotFoundError,
    ResourceBusyError,
    StoreBackendError,
)
from movie_cache.handlers import MovieHandler
from movie_cache.protocols import MovieCache, MovieStore
from movie_cache.repositories import InMemoryMovieCache, InMemoryMovieStore, RedisMovieCache
from movie_cache.services import CacheAsideService

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "MovieStore",
    "MovieCache",
    # Services (business logic)
    "CacheAsideService",
    # Handlers (HTTP)
    "MovieHandler",
    # Repositories (data access)
    "InMemoryMovieStore",
    "InMemoryMovieCache",
    "RedisMovieCache",
    # Entities (domain models)
    "MovieEntity",
    "CacheStats",
    # DTOs (API contracts)
    "MovieRequest",
    "MovieResponse",
    # Errors
    "MovieCacheError",
    "MovieNotFoundError",
    "InvalidMovieError",
    "ResourceBusyError",
    "BackendError",
    "StoreBackendError",
    "CacheBackendError",
]
