#!/usr/bin/env python3
"""
Demo script for the movie cache.

Walks through the cache-aside read path and the write-through update path
against in-memory backends, printing hit/miss counters along the way.
"""

from movie_cache import CacheAsideService, InMemoryMovieCache, InMemoryMovieStore, MovieEntity
from movie_cache.exceptions import MovieNotFoundError


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_read_through(service: CacheAsideService) -> None:
    """Demonstrate miss-then-hit on the seeded movie."""
    print_section("Read-through")

    print(f"Cached before fetch: {service.cache.get('1')}")
    movie = service.fetch("1")
    print(f"First fetch:  {movie}")
    print(f"Cached after fetch:  {service.cache.get('1')}")
    service.fetch("1")
    print(f"Stats: {service.get_stats()}")


def demo_write_through(service: CacheAsideService) -> None:
    """Demonstrate that an overwrite is visible immediately."""
    print_section("Write-through")

    service.create_or_replace(MovieEntity(id="1", name="Movie (Director's Cut)", year=2001, was_good=False))
    print(f"Fetch after replace: {service.fetch('1')}")

    service.create_or_replace(MovieEntity(id="42", name="The Answer", year=1979, was_good=True))
    print(f"Fetch new movie:     {service.fetch('42')}")


def demo_not_found(service: CacheAsideService) -> None:
    """Demonstrate the miss path."""
    print_section("Not found")

    try:
        service.fetch("nonexistent")
    except MovieNotFoundError as e:
        print(f"Error: {e}")


def main() -> None:
    service = CacheAsideService(
        store=InMemoryMovieStore.create(seed_data=True),
        cache=InMemoryMovieCache(),
    )
    demo_read_through(service)
    demo_write_through(service)
    demo_not_found(service)

    print_section("Final stats")
    for key, value in service.get_stats().items():
        print(f"  {key:>14}: {value}")


if __name__ == "__main__":
    main()
