"""Domain entities for internal representation.

These are pure dataclasses used internally by services and repositories.
They are NOT used for API contracts - use DTOs from the dto package for that.

Entities should have:
- No Pydantic validation
- No external dependencies
"""

from .cache_stats import CacheStats
from .movie import MAX_YEAR, MovieEntity

__all__ = ["CacheStats", "MovieEntity", "MAX_YEAR"]
