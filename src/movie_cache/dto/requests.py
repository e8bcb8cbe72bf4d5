"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from movie_cache.entities import MAX_YEAR, MovieEntity


class MovieRequest(BaseModel):
    """Request DTO for creating or replacing a movie.

    Every field is required and strictly typed: ``"2000"`` is not a year
    and ``"true"`` is not a boolean.
    """

    model_config = ConfigDict(strict=True)

    id: str = Field(..., description="Unique movie identifier", min_length=1, pattern=r"\S")
    name: str = Field(..., description="Movie name")
    year: int = Field(..., description="Release year", ge=0, le=MAX_YEAR)
    was_good: bool = Field(..., description="Whether the movie was any good")

    def to_entity(self) -> MovieEntity:
        """Convert to the internal domain entity."""
        return MovieEntity(id=self.id, name=self.name, year=self.year, was_good=self.was_good)
