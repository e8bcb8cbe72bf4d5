"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from movie_cache.entities import MovieEntity


class MovieResponse(BaseModel):
    """Response DTO for a single movie."""

    id: str = Field(..., description="Unique movie identifier")
    name: str = Field(..., description="Movie name")
    year: int = Field(..., description="Release year", ge=0)
    was_good: bool = Field(..., description="Whether the movie was any good")

    @classmethod
    def from_entity(cls, movie: MovieEntity) -> "MovieResponse":
        """Build the wire representation of a domain entity."""
        return cls(id=movie.id, name=movie.name, year=movie.year, was_good=movie.was_good)


class CacheStatsResponse(BaseModel):
    """Response DTO for cache statistics."""

    hits: int = Field(..., description="Fetches served from the cache", ge=0)
    misses: int = Field(..., description="Fetches served from the store and cached", ge=0)
    not_found: int = Field(..., description="Fetches for unknown ids", ge=0)
    writes: int = Field(..., description="Successful create-or-replace calls", ge=0)
    hit_rate: float = Field(..., description="hits / total reads", ge=0.0, le=1.0)
    store_entries: int = Field(..., description="Movies in the store", ge=0)
    cache_entries: int = Field(..., description="Movies in the cache", ge=0)
    cache_backend: str = Field(..., description="Cache backend name")


class CacheClearResponse(BaseModel):
    """Response DTO for clearing the cache."""

    success: bool = Field(..., description="Whether the operation succeeded")
    deleted_count: int = Field(..., description="Number of cache entries removed", ge=0)
    message: str = Field(..., description="Human-readable status message")


class CacheInvalidateResponse(BaseModel):
    """Response DTO for invalidating one cache entry."""

    id: str = Field(..., description="The movie identifier")
    invalidated: bool = Field(..., description="Whether a cache entry was removed")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_healthy: bool = Field(..., description="Whether the store is reachable")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
