"""HTTP handlers for movie operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and error translation.
"""

import logging

from fastapi import HTTPException, status

from movie_cache.dto import (
    CacheClearResponse,
    CacheInvalidateResponse,
    CacheStatsResponse,
    HealthCheckResponse,
    MovieRequest,
    MovieResponse,
)
from movie_cache.exceptions import (
    BackendError,
    InvalidMovieError,
    MovieNotFoundError,
    ResourceBusyError,
)
from movie_cache.services import CacheAsideService

logger = logging.getLogger(__name__)


def _server_error(operation: str, e: Exception) -> HTTPException:
    if isinstance(e, ResourceBusyError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Failed to {operation}: {e}",
        )
    if isinstance(e, BackendError):
        logger.error("Backend failure while trying to %s: %s", operation, e)
    else:
        logger.exception("Unexpected error while trying to %s", operation)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {operation}: {e}",
    )


class MovieHandler:
    """HTTP handlers for movie and cache operations.

    This handler delegates business logic to CacheAsideService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Mapping domain errors to status codes

    Example:
        ```python
        handler = MovieHandler(service=service)

        @app.get("/movie/{movie_id}", response_model=MovieResponse)
        def get_movie(movie_id: str):
            return handler.get_movie(movie_id)
        ```
    """

    def __init__(self, service: CacheAsideService) -> None:
        """Initialize the movie handler.

        Args:
            service: The cache-aside service for business logic (required).
        """
        self._service = service

    def get_movie(self, movie_id: str) -> MovieResponse:
        """Handle GET /movie/{movie_id} requests.

        Raises:
            HTTPException: 404 if the movie does not exist, 5xx on backend failure
        """
        try:
            movie = self._service.fetch(movie_id)
        except MovieNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
        except Exception as e:
            raise _server_error("fetch movie", e) from e

        return MovieResponse.from_entity(movie)

    def create_movie(self, request: MovieRequest) -> None:
        """Handle POST /movie requests.

        Raises:
            HTTPException: 400 if the movie is invalid, 5xx on backend failure
        """
        try:
            self._service.create_or_replace(request.to_entity())
        except InvalidMovieError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except Exception as e:
            raise _server_error("store movie", e) from e

    def invalidate_movie(self, movie_id: str) -> CacheInvalidateResponse:
        """Handle DELETE /movie/{movie_id}/cache requests."""
        try:
            removed = self._service.invalidate(movie_id)
        except Exception as e:
            raise _server_error("invalidate cache entry", e) from e

        return CacheInvalidateResponse(id=movie_id, invalidated=removed)

    def clear_cache(self) -> CacheClearResponse:
        """Handle DELETE /cache requests."""
        try:
            count = self._service.clear_cache()
        except Exception as e:
            raise _server_error("clear cache", e) from e

        return CacheClearResponse(
            success=True,
            deleted_count=count,
            message="Cache cleared successfully",
        )

    def get_stats(self) -> CacheStatsResponse:
        """Handle GET /stats requests."""
        try:
            stats = self._service.get_stats()
        except Exception as e:
            raise _server_error("get stats", e) from e

        return CacheStatsResponse(
            hits=stats["hits"],
            misses=stats["misses"],
            not_found=stats["not_found"],
            writes=stats["writes"],
            hit_rate=stats["hit_rate"],
            store_entries=stats["store_entries"],
            cache_entries=stats["cache_entries"],
            cache_backend=stats["cache_backend"],
        )

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Raises:
            HTTPException: 503 if either backend is unreachable
        """
        flags = self._service.health_status()

        if not all(flags.values()):
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail={"status": "unhealthy", **flags},
            )

        return HealthCheckResponse(status="healthy", store_healthy=True, cache_healthy=True)
