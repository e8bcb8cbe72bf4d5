"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Backends and services built once during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from movie_cache.config import Settings, get_redis_client, settings
from movie_cache.handlers import MovieHandler
from movie_cache.protocols import MovieCache
from movie_cache.repositories import InMemoryMovieCache, InMemoryMovieStore, RedisMovieCache
from movie_cache.services import CacheAsideService

logger = logging.getLogger(__name__)


def build_cache(config: Settings) -> MovieCache:
    """Create the cache backend selected by CACHE_BACKEND."""
    if config.uses_redis:
        return RedisMovieCache(redis_client=get_redis_client(config), key_prefix=config.cache_key_prefix)
    return InMemoryMovieCache(lock_timeout=config.lock_timeout)


def build_service(config: Settings) -> CacheAsideService:
    """Create the store, the cache and the service that owns them."""
    store = InMemoryMovieStore.create(seed_data=config.seed_data, lock_timeout=config.lock_timeout)
    return CacheAsideService.create(
        store=store,
        cache=build_cache(config),
        lock_timeout=config.lock_timeout,
    )


def get_handler(request: Request) -> MovieHandler:
    """Dependency injection for MovieHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "movie_handler", None)
    if handler is None:
        raise RuntimeError("MovieHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Store and cache (data access)
    2. Service (business logic) - stored in app.state.movie_service
    3. Handler (HTTP endpoints) - stored in app.state.movie_handler

    A service already placed on app.state (e.g. by tests) is reused.
    Nothing is persisted; every restart begins from the seed data.
    """
    service = getattr(app.state, "movie_service", None)
    owns_service = service is None
    if owns_service:
        service = build_service(settings)
        app.state.movie_service = service
    app.state.movie_handler = MovieHandler(service=service)

    stats = service.get_stats()
    logger.info(
        "Movie service started (cache=%s, store entries=%d, healthy=%s)",
        stats["cache_backend"],
        stats["store_entries"],
        service.is_healthy(),
    )

    yield

    del app.state.movie_handler
    # An injected service outlives the lifespan; only drop one built here
    if owns_service:
        del app.state.movie_service
    logger.info("Movie service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[MovieHandler, Depends(get_handler)]
