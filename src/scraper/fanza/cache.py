"""In-memory summary cache with lazy TTL expiry.

Entries are keyed by the raw movie ID exactly as requested, so
negative results ('no summary') are cached too. Stale entries
are never evicted; they read as misses and are overwritten by
the next put(). The cache has no size bound and grows with the
number of distinct IDs requested during the process lifetime.
"""

from collections.abc import Callable
from datetime import datetime, timedelta

from src.scraper.types import CacheEntry

CACHE_TTL = timedelta(hours=24)


class SummaryCache:
    """TTL keyed store of summary outcomes.

    Not thread-safe; meant to be used from a single event loop.
    """

    def __init__(
        self,
        ttl: timedelta = CACHE_TTL,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize cache.

        Args:
            ttl: Validity window of an entry.
            clock: Current time source.
        """
        self._entries: dict[str, CacheEntry] = {}
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        """Return entry validity window."""
        return self._ttl

    def now(self) -> datetime:
        """Return current time from the cache clock."""
        return self._clock()

    def get(self, key: str) -> CacheEntry | None:
        """Return a fresh entry, or None on miss or expiry.

        Args:
            key: Raw movie ID.

        Returns:
            Cached entry if younger than the TTL.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.timestamp >= self._ttl:
            return None
        return entry

    def put(self, key: str, entry: CacheEntry) -> None:
        """Store an entry, replacing any previous one for key."""
        self._entries[key] = entry

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
