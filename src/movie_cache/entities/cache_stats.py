"""Cache statistics."""

import threading
from dataclasses import dataclass, field


@dataclass
class CacheStats:
    """Track hit/miss counters for cache-aside reads.

    Counters are updated from concurrent request threads, so every
    mutation goes through ``_lock``.
    """

    hits: int = 0
    misses: int = 0
    not_found: int = 0
    writes: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def total_reads(self) -> int:
        """Total fetches, found or not."""
        return self.hits + self.misses + self.not_found

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.total_reads == 0:
            return 0.0
        return self.hits / self.total_reads

    def record_hit(self) -> None:
        """Record a fetch served from the cache."""
        with self._lock:
            self.hits += 1

    def record_miss(self) -> None:
        """Record a cache miss that was served from the store."""
        with self._lock:
            self.misses += 1

    def record_not_found(self) -> None:
        """Record a fetch that missed both cache and store."""
        with self._lock:
            self.not_found += 1

    def record_write(self) -> None:
        """Record a successful create-or-replace."""
        with self._lock:
            self.writes += 1

    def reset(self) -> None:
        """Zero every counter."""
        with self._lock:
            self.hits = 0
            self.misses = 0
            self.not_found = 0
            self.writes = 0

    def to_dict(self) -> dict[str, float | int]:
        """Convert counters to a dictionary snapshot.

        Returns:
            Dictionary with raw counters, total reads and hit rate
        """
        with self._lock:
            return {
                "hits": self.hits,
                "misses": self.misses,
                "not_found": self.not_found,
                "writes": self.writes,
                "total_reads": self.total_reads,
                "hit_rate": self.hit_rate,
            }
