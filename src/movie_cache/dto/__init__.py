"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import MovieRequest
from .responses import (
    CacheClearResponse,
    CacheInvalidateResponse,
    CacheStatsResponse,
    HealthCheckResponse,
    MovieResponse,
)

__all__ = [
    "MovieRequest",
    "MovieResponse",
    "CacheClearResponse",
    "CacheInvalidateResponse",
    "CacheStatsResponse",
    "HealthCheckResponse",
]
