"""
Tests for environment-driven settings.
"""

import pytest

from movie_cache.api.dependencies import build_cache, build_service
from movie_cache.config import Settings
from movie_cache.repositories import InMemoryMovieCache, RedisMovieCache


def test_defaults(monkeypatch):
    for name in ("API_PORT", "CACHE_BACKEND", "LOCK_TIMEOUT", "SEED_DATA", "API_RELOAD"):
        monkeypatch.delenv(name, raising=False)

    config = Settings()
    assert config.api_port == 3000
    assert config.cache_backend == "memory"
    assert config.lock_timeout == 5.0
    assert config.seed_data is True
    assert config.api_reload is False
    assert config.uses_redis is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("API_PORT", "8080")
    monkeypatch.setenv("CACHE_BACKEND", "redis")
    monkeypatch.setenv("LOCK_TIMEOUT", "-1")
    monkeypatch.setenv("SEED_DATA", "false")

    config = Settings()
    assert config.api_port == 8080
    assert config.uses_redis is True
    assert config.lock_timeout == -1
    assert config.seed_data is False


@pytest.mark.parametrize(
    "name, value",
    [
        ("CACHE_BACKEND", "memcached"),
        ("API_PORT", "0"),
        ("LOCK_TIMEOUT", "-2"),
        ("LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_settings_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        Settings()


def test_build_cache_selects_backend(monkeypatch):
    monkeypatch.setenv("CACHE_BACKEND", "memory")
    assert isinstance(build_cache(Settings()), InMemoryMovieCache)

    monkeypatch.setenv("CACHE_BACKEND", "redis")
    # redis-py connects lazily, so no server is needed to build the client
    assert isinstance(build_cache(Settings()), RedisMovieCache)


def test_build_service_honours_seed_flag(monkeypatch):
    monkeypatch.setenv("CACHE_BACKEND", "memory")
    monkeypatch.setenv("SEED_DATA", "false")
    service = build_service(Settings())
    assert service.store.count() == 0
