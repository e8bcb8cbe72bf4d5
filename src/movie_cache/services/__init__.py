"""Service layer for business logic.

This layer contains the cache-aside orchestration. Services depend on
protocols (interfaces), not concrete implementations, making them
testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from movie_cache.services import CacheAsideService

    # Using factory method (recommended)
    service = CacheAsideService.create(store=store, cache=cache)

    # Or manual creation
    service = CacheAsideService(store=store, cache=cache, lock_timeout=1.0)
    ```
"""

from .cache_aside_service import CacheAsideService

__all__ = [
    "CacheAsideService",
]
