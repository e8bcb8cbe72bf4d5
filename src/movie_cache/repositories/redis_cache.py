"""Redis implementation of MovieCache.

Movies are stored as JSON strings under ``{key_prefix}:{movie_id}``.
Redis serializes commands itself, so this class keeps no client-side lock.
"""

import json
import logging

import redis

from movie_cache.config import get_redis_client, settings
from movie_cache.entities import MovieEntity
from movie_cache.exceptions import CacheBackendError, InvalidMovieError

logger = logging.getLogger(__name__)


class RedisMovieCache:
    """Redis-backed cache.

    This class satisfies the MovieCache protocol through structural
    typing - no explicit inheritance needed. Entries never expire; the
    authoritative copy always lives in the store.
    """

    backend_name = "redis"

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis cache.

        Args:
            redis_client: Redis client instance. If None, creates default.
            key_prefix: Namespace for cache keys. If None, uses settings.
        """
        self._client = redis_client or get_redis_client()
        self._prefix = key_prefix or settings.cache_key_prefix

    @classmethod
    def create(cls, key_prefix: str | None = None) -> "RedisMovieCache":
        """Factory method to create RedisMovieCache with defaults.

        Args:
            key_prefix: Redis key prefix. If None, uses settings.

        Returns:
            Configured RedisMovieCache
        """
        return cls(key_prefix=key_prefix)

    def _key(self, movie_id: str) -> str:
        return f"{self._prefix}:{movie_id}"

    def get(self, movie_id: str) -> MovieEntity | None:
        """Look up and decode a cached movie.

        Args:
            movie_id: The movie identifier

        Returns:
            The cached movie, or None on a cache miss

        Raises:
            CacheBackendError: If Redis fails or the entry is corrupt
        """
        try:
            raw = self._client.get(self._key(movie_id))
        except redis.RedisError as e:
            raise CacheBackendError(f"Redis GET failed for {movie_id}: {e}") from e

        if raw is None:
            return None

        try:
            return MovieEntity.from_dict(json.loads(raw))
        except (json.JSONDecodeError, TypeError, InvalidMovieError) as e:
            raise CacheBackendError(f"Corrupt cache entry for {movie_id}: {e}") from e

    def put(self, movie_id: str, movie: MovieEntity) -> None:
        """Store a movie as JSON, overwriting any previous entry.

        Args:
            movie_id: The movie identifier
            movie: The movie to cache
        """
        try:
            self._client.set(self._key(movie_id), json.dumps(movie.to_dict()))
        except redis.RedisError as e:
            raise CacheBackendError(f"Redis SET failed for {movie_id}: {e}") from e

    def invalidate(self, movie_id: str) -> bool:
        """Delete a single key.

        Returns:
            True if the key existed, False otherwise
        """
        try:
            result: int = self._client.delete(self._key(movie_id))  # type: ignore[assignment]
        except redis.RedisError as e:
            raise CacheBackendError(f"Redis DEL failed for {movie_id}: {e}") from e
        return result > 0

    def clear(self) -> int:
        """Delete every key under the prefix.

        Returns:
            Number of entries deleted
        """
        try:
            keys = list(self._client.scan_iter(match=f"{self._prefix}:*"))
            if not keys:
                return 0
            deleted: int = self._client.delete(*keys)  # type: ignore[assignment]
        except redis.RedisError as e:
            raise CacheBackendError(f"Redis clear failed: {e}") from e

        logger.info("Cleared %d entries under %s:*", deleted, self._prefix)
        return deleted

    def count(self) -> int:
        """Count keys under the prefix."""
        try:
            return sum(1 for _ in self._client.scan_iter(match=f"{self._prefix}:*"))
        except redis.RedisError as e:
            raise CacheBackendError(f"Redis SCAN failed: {e}") from e

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
