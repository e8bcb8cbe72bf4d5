"""Domain exceptions.

Services and repositories raise these; handlers translate them into
HTTP responses. Nothing below imports FastAPI.
"""


class MovieCacheError(Exception):
    """Base class for all movie cache errors."""


class MovieNotFoundError(MovieCacheError):
    """Raised when a movie is absent from both the cache and the store."""

    def __init__(self, movie_id: str) -> None:
        self.movie_id = movie_id
        super().__init__(f"Movie with id {movie_id} not found")


class InvalidMovieError(MovieCacheError):
    """Raised when a movie is malformed or missing a required field."""


class ResourceBusyError(MovieCacheError):
    """Raised when a lock could not be acquired within the configured timeout."""

    def __init__(self, resource: str, timeout: float) -> None:
        self.resource = resource
        self.timeout = timeout
        super().__init__(f"Timed out after {timeout}s waiting for {resource} lock")


class BackendError(MovieCacheError):
    """Raised when a storage backend fails internally."""


class StoreBackendError(BackendError):
    """The authoritative store failed."""


class CacheBackendError(BackendError):
    """The cache backend failed."""
