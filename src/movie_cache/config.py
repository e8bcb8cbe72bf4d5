import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

CACHE_BACKENDS = ("memory", "redis")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _env(name: str, default: str | None = None):
    return field(default_factory=lambda: os.getenv(name, default))


def _env_bool(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default).lower() == "true")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # API
    api_host: str = _env("API_HOST", "0.0.0.0")
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "3000")))
    api_reload: bool = _env_bool("API_RELOAD", "false")

    # Cache
    cache_backend: str = _env("CACHE_BACKEND", "memory")
    cache_key_prefix: str = _env("CACHE_KEY_PREFIX", "movie_cache")

    # Redis (only used when CACHE_BACKEND=redis)
    redis_url: str = _env("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = _env("REDIS_PASSWORD")

    # Seconds to wait on a store/cache lock, -1 waits forever
    lock_timeout: float = field(default_factory=lambda: float(os.getenv("LOCK_TIMEOUT", "5.0")))

    seed_data: bool = _env_bool("SEED_DATA", "true")
    log_level: str = _env("LOG_LEVEL", "INFO")

    @property
    def uses_redis(self) -> bool:
        """Check if the cache layer should be backed by Redis."""
        return self.cache_backend == "redis"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_backend not in CACHE_BACKENDS:
            raise ValueError(f"CACHE_BACKEND must be one of {list(CACHE_BACKENDS)}, got {self.cache_backend!r}")

        if not 0 < self.api_port < 65536:
            raise ValueError(f"API_PORT must be between 1 and 65535, got {self.api_port}")

        if self.lock_timeout < 0 and self.lock_timeout != -1:
            raise ValueError("LOCK_TIMEOUT must be non-negative or -1 for no limit")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"LOG_LEVEL {self.log_level!r} is not a logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)


def get_redis_client(config: Settings | None = None) -> redis.Redis:
    """Create a Redis client instance."""
    config = config or settings
    return redis.from_url(
        config.redis_url,
        password=config.redis_password,
        decode_responses=True,
    )
