"""
Tests for the movie entity and cache statistics.
"""

import pytest

from movie_cache.entities import MAX_YEAR, CacheStats, MovieEntity
from movie_cache.exceptions import InvalidMovieError


def test_movie_is_immutable():
    movie = MovieEntity(id="1", name="Movie", year=2000, was_good=True)
    with pytest.raises(AttributeError):
        movie.name = "Other"  # type: ignore[misc]


def test_movies_compare_by_value():
    assert MovieEntity("1", "Movie", 2000, True) == MovieEntity("1", "Movie", 2000, True)
    assert MovieEntity("1", "Movie", 2000, True) != MovieEntity("1", "Movie", 2000, False)


@pytest.mark.parametrize(
    "movie",
    [
        MovieEntity(id="", name="Movie", year=2000, was_good=True),
        MovieEntity(id="   ", name="Movie", year=2000, was_good=True),
        MovieEntity(id="1", name="Movie", year=-1, was_good=True),
        MovieEntity(id="1", name="Movie", year=MAX_YEAR + 1, was_good=True),
        MovieEntity(id="1", name="Movie", year="2000", was_good=True),  # type: ignore[arg-type]
        MovieEntity(id="1", name="Movie", year=True, was_good=True),
        MovieEntity(id="1", name=None, year=2000, was_good=True),  # type: ignore[arg-type]
        MovieEntity(id="1", name="Movie", year=2000, was_good="yes"),  # type: ignore[arg-type]
    ],
)
def test_validate_rejects_malformed_movies(movie):
    with pytest.raises(InvalidMovieError):
        movie.validate()


def test_validate_accepts_year_bounds():
    MovieEntity(id="a", name="", year=0, was_good=False).validate()
    MovieEntity(id="b", name="", year=MAX_YEAR, was_good=False).validate()


def test_from_dict_reports_missing_fields():
    with pytest.raises(InvalidMovieError, match="year, was_good"):
        MovieEntity.from_dict({"id": "1", "name": "Movie"})


def test_from_dict_ignores_unknown_keys():
    movie = MovieEntity.from_dict({"id": "1", "name": "Movie", "year": 2000, "was_good": True, "extra": 1})
    assert movie == MovieEntity("1", "Movie", 2000, True)


def test_to_dict_uses_wire_field_names():
    assert MovieEntity("7", "Seven", 1995, True).to_dict() == {
        "id": "7",
        "name": "Seven",
        "year": 1995,
        "was_good": True,
    }


def test_cache_stats_hit_rate():
    stats = CacheStats()
    assert stats.hit_rate == 0.0

    stats.record_hit()
    stats.record_hit()
    stats.record_hit()
    stats.record_miss()
    stats.record_write()

    snapshot = stats.to_dict()
    assert snapshot["hits"] == 3
    assert snapshot["misses"] == 1
    assert snapshot["writes"] == 1
    assert snapshot["total_reads"] == 4
    assert snapshot["hit_rate"] == 0.75


def test_cache_stats_reset():
    stats = CacheStats()
    stats.record_hit()
    stats.record_not_found()
    stats.reset()
    assert stats.to_dict()["total_reads"] == 0
