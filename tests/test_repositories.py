"""
Tests for the in-memory and Redis backends.
"""

import json
import threading

import pytest
import redis

from movie_cache.entities import MovieEntity
from movie_cache.exceptions import CacheBackendError, ResourceBusyError
from movie_cache.protocols import MovieCache, MovieStore
from movie_cache.repositories import SEED_MOVIES, InMemoryMovieCache, InMemoryMovieStore, RedisMovieCache
from movie_cache.utils import guarded

MOVIE = MovieEntity(id="7", name="Seven", year=1995, was_good=True)


def test_backends_satisfy_protocols(fake_redis):
    assert isinstance(InMemoryMovieStore(), MovieStore)
    assert isinstance(InMemoryMovieCache(), MovieCache)
    assert isinstance(RedisMovieCache(redis_client=fake_redis, key_prefix="t"), MovieCache)


def test_store_create_loads_seed_data():
    store = InMemoryMovieStore.create(seed_data=True)
    assert store.get("1") == SEED_MOVIES[0]
    assert store.count() == 1


def test_store_create_without_seed_data_is_empty():
    store = InMemoryMovieStore.create(seed_data=False)
    assert store.get("1") is None
    assert store.count() == 0


def test_store_put_returns_previous_value():
    store = InMemoryMovieStore()
    replacement = MovieEntity(id="7", name="Se7en", year=1995, was_good=True)

    assert store.put(MOVIE) is None
    assert store.put(replacement) == MOVIE
    assert store.get("7") == replacement
    assert store.count() == 1


def test_store_put_is_idempotent():
    store = InMemoryMovieStore()
    store.put(MOVIE)
    store.put(MOVIE)
    assert store.get("7") == MOVIE
    assert store.count() == 1


def test_memory_cache_get_put_invalidate():
    cache = InMemoryMovieCache()
    assert cache.get("7") is None

    cache.put("7", MOVIE)
    assert cache.get("7") == MOVIE
    assert "7" in cache

    assert cache.invalidate("7") is True
    assert cache.invalidate("7") is False
    assert cache.get("7") is None


def test_memory_cache_clear_returns_count():
    cache = InMemoryMovieCache()
    cache.put("1", MOVIE)
    cache.put("2", MOVIE)

    assert cache.clear() == 2
    assert cache.count() == 0
    assert cache.clear() == 0


def test_store_and_cache_locks_are_independent():
    store = InMemoryMovieStore(seed=[MOVIE])
    cache = InMemoryMovieCache(lock_timeout=0.05)
    cache.put("7", MOVIE)

    # A held store lock must not block cache reads
    with guarded(store._lock, "store"):
        assert cache.get("7") == MOVIE


def test_store_lock_timeout_raises_resource_busy():
    store = InMemoryMovieStore(lock_timeout=0.01)
    with guarded(store._lock, "store"):
        with pytest.raises(ResourceBusyError, match="store"):
            store.get("1")


def test_guarded_releases_lock_on_error():
    lock = threading.Lock()
    with pytest.raises(RuntimeError):
        with guarded(lock, "test"):
            raise RuntimeError("boom")
    assert not lock.locked()


def test_redis_cache_round_trips_movies(fake_redis):
    cache = RedisMovieCache(redis_client=fake_redis, key_prefix="movies")
    cache.put("7", MOVIE)

    assert json.loads(fake_redis.data["movies:7"]) == MOVIE.to_dict()
    assert cache.get("7") == MOVIE
    assert cache.get("8") is None


def test_redis_cache_invalidate_and_clear(fake_redis):
    cache = RedisMovieCache(redis_client=fake_redis, key_prefix="movies")
    fake_redis.data["other:1"] = "untouched"
    cache.put("1", MOVIE)
    cache.put("2", MOVIE)

    assert cache.invalidate("1") is True
    assert cache.invalidate("1") is False
    assert cache.count() == 1
    assert cache.clear() == 1
    assert cache.clear() == 0
    assert fake_redis.data == {"other:1": "untouched"}


def test_redis_cache_rejects_corrupt_entries(fake_redis):
    cache = RedisMovieCache(redis_client=fake_redis, key_prefix="movies")
    fake_redis.data["movies:1"] = "{not json"
    fake_redis.data["movies:2"] = json.dumps({"id": "2"})

    with pytest.raises(CacheBackendError, match="Corrupt"):
        cache.get("1")
    with pytest.raises(CacheBackendError, match="Corrupt"):
        cache.get("2")


def test_redis_cache_wraps_redis_errors(fake_redis, monkeypatch):
    def refuse(*args, **kwargs):
        raise redis.ConnectionError("connection refused")

    monkeypatch.setattr(fake_redis, "get", refuse)
    monkeypatch.setattr(fake_redis, "set", refuse)
    cache = RedisMovieCache(redis_client=fake_redis, key_prefix="movies")

    with pytest.raises(CacheBackendError, match="connection refused"):
        cache.get("1")
    with pytest.raises(CacheBackendError, match="connection refused"):
        cache.put("1", MOVIE)


def test_redis_cache_health_check(fake_redis):
    cache = RedisMovieCache(redis_client=fake_redis, key_prefix="movies")
    assert cache.health_check() is True

    fake_redis.healthy = False
    assert cache.health_check() is False


def test_redis_cache_create_uses_settings_client():
    # redis-py connects lazily, so building the client needs no server
    cache = RedisMovieCache.create(key_prefix="movies")
    assert isinstance(cache.client, redis.Redis)
    assert cache._key("7") == "movies:7"
