"""Movie domain entity."""

from dataclasses import asdict, dataclass
from typing import Any

from movie_cache.exceptions import InvalidMovieError

# Years are stored as unsigned 16-bit integers
MAX_YEAR = 65535

_FIELD_TYPES: dict[str, type] = {
    "id": str,
    "name": str,
    "year": int,
    "was_good": bool,
}


@dataclass(frozen=True)
class MovieEntity:
    """Domain entity for a stored movie.

    Instances are immutable, so the store and the cache may hold the same
    object without sharing mutable state. A write replaces the whole record.

    Attributes:
        id: Unique, non-empty identifier
        name: Display name
        year: Release year (0-65535)
        was_good: Whether the movie was any good
    """

    id: str
    name: str
    year: int
    was_good: bool

    def validate(self) -> None:
        """Check the entity is well-formed.

        Raises:
            InvalidMovieError: If a field has the wrong type, the id is blank,
                or the year is out of range
        """
        for name, expected in _FIELD_TYPES.items():
            value = getattr(self, name)
            # bool is a subclass of int; a year of True is still malformed
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise InvalidMovieError(
                    f"Field '{name}' must be {expected.__name__}, got {type(value).__name__}"
                )

        if not self.id.strip():
            raise InvalidMovieError("Field 'id' must not be empty")

        if not 0 <= self.year <= MAX_YEAR:
            raise InvalidMovieError(f"Field 'year' must be between 0 and {MAX_YEAR}, got {self.year}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MovieEntity":
        """Build a validated entity from a plain dictionary.

        Raises:
            InvalidMovieError: If a field is missing or malformed
        """
        missing = [name for name in _FIELD_TYPES if name not in data]
        if missing:
            raise InvalidMovieError(f"Missing required fields: {', '.join(missing)}")

        movie = cls(**{name: data[name] for name in _FIELD_TYPES})
        movie.validate()
        return movie
