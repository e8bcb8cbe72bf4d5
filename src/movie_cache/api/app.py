from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from movie_cache import __version__
from movie_cache.api.dependencies import HandlerDep, lifespan
from movie_cache.config import configure_logging, settings
from movie_cache.dto import (
    CacheClearResponse,
    CacheInvalidateResponse,
    CacheStatsResponse,
    HealthCheckResponse,
    MovieRequest,
    MovieResponse,
)
from movie_cache.services import CacheAsideService


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed requests as 400 rather than FastAPI's default 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(service: CacheAsideService | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        service: Pre-built service to serve. If None, the lifespan builds
            one from settings.

    Returns:
        The configured application
    """
    app = FastAPI(
        title="Movie Cache API",
        description="Movie lookup service with a read-through cache in front of the store",
        version=__version__,
        lifespan=lifespan,
    )
    if service is not None:
        app.state.movie_service = service

    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]

    @app.get("/")
    def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Movie Cache API",
            "version": __version__,
            "endpoints": {
                "movie": "/movie/{id}",
                "cache": "/cache",
                "stats": "/stats",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/movie/{movie_id}", response_model=MovieResponse)
    def get_movie(movie_id: str, handler: HandlerDep) -> MovieResponse:
        """Fetch a movie, from the cache when possible."""
        return handler.get_movie(movie_id)

    @app.post("/movie", status_code=status.HTTP_201_CREATED, response_class=Response)
    def create_movie(request: MovieRequest, handler: HandlerDep) -> Response:
        """Create a movie or replace the one with the same id."""
        handler.create_movie(request)
        return Response(status_code=status.HTTP_201_CREATED)

    @app.delete("/movie/{movie_id}/cache", response_model=CacheInvalidateResponse)
    def invalidate_movie(movie_id: str, handler: HandlerDep) -> CacheInvalidateResponse:
        """Drop one movie from the cache (the store is untouched)."""
        return handler.invalidate_movie(movie_id)

    @app.delete("/cache", response_model=CacheClearResponse)
    def clear_cache(handler: HandlerDep) -> CacheClearResponse:
        """Clear all entries from the cache."""
        return handler.clear_cache()

    @app.get("/stats", response_model=CacheStatsResponse)
    def get_stats(handler: HandlerDep) -> CacheStatsResponse:
        """Get cache statistics."""
        return handler.get_stats()

    @app.get("/health", response_model=HealthCheckResponse)
    def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return handler.health_check()

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "movie_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
