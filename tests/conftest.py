"""
Shared fixtures for the movie cache tests.
"""

import fnmatch

import pytest
import redis
from fastapi.testclient import TestClient

from movie_cache.api.app import create_app
from movie_cache.entities import MovieEntity
from movie_cache.repositories import InMemoryMovieCache, InMemoryMovieStore
from movie_cache.services import CacheAsideService

SEED_MOVIE = MovieEntity(id="1", name="Movie", year=2000, was_good=True)


class FakeRedis:
    """Just enough of the redis.Redis API for RedisMovieCache."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.healthy = True

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
        return True

    def delete(self, *keys):
        return sum(1 for key in keys if self.data.pop(key, None) is not None)

    def scan_iter(self, match=None):
        return [key for key in list(self.data) if match is None or fnmatch.fnmatchcase(key, match)]

    def ping(self):
        if not self.healthy:
            raise redis.ConnectionError("connection refused")
        return True


@pytest.fixture
def store():
    """Store preloaded with the seed movie."""
    return InMemoryMovieStore(seed=[SEED_MOVIE])


@pytest.fixture
def cache():
    """Empty in-memory cache."""
    return InMemoryMovieCache()


@pytest.fixture
def service(store, cache):
    """Service over the seeded store and an empty cache."""
    return CacheAsideService(store=store, cache=cache, lock_timeout=1.0)


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def client(service):
    """Create a test client bound to the service fixture."""
    with TestClient(create_app(service=service)) as test_client:
        yield test_client
