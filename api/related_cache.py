"""
Time-bounded caching of related document rankings
"""
import logging
import time
from typing import Callable, Dict, Optional, Sequence

from value_objects import CacheEntry

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60
DEFAULT_SWEEP_THRESHOLD = 100


class RelatedCache:
    """TTL cache for related document rankings, keyed by normalized document path.

    Entries expire lazily: get() drops an expired entry when it sees one,
    and set() sweeps every expired entry once the cache grows past
    sweep_threshold. There is no size cap beyond that sweep.

    Constructed explicitly and injected into the RelevanceEngine, so tests
    get isolated instances and the application owns its lifecycle.
    """

    def __init__(self, default_ttl: float = DEFAULT_TTL_SECONDS,
                 sweep_threshold: int = DEFAULT_SWEEP_THRESHOLD,
                 clock: Callable[[], float] = time.monotonic):
        self.default_ttl = default_ttl
        self.sweep_threshold = sweep_threshold
        self.clock = clock
        self.entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[list]:
        """Get cached ranking if present and not expired"""
        entry = self.entries.get(key)
        if entry is None:
            return None

        if entry.is_expired(self.clock()):
            logger.debug(f"Cache expired for {key}")
            del self.entries[key]
            return None

        return list(entry.data)

    def set(self, key: str, data: Sequence, ttl: Optional[float] = None):
        """Store a ranking, replacing any existing entry for key"""
        ttl = self.default_ttl if ttl is None else ttl
        self.entries[key] = CacheEntry(data=tuple(data), timestamp=self.clock(), ttl=ttl)
        logger.debug(f"Cached {len(data)} documents for {key}, TTL: {ttl}s")

        if len(self.entries) > self.sweep_threshold:
            self.sweep()

    def sweep(self) -> int:
        """Remove all expired entries, returning how many were removed"""
        now = self.clock()
        expired = [key for key, entry in self.entries.items() if entry.is_expired(now)]
        for key in expired:
            del self.entries[key]

        logger.debug(
            f"Cache cleanup: removed {len(expired)} expired entries, "
            f"remaining: {len(self.entries)}"
        )
        return len(expired)

    def clear(self):
        """Clear all cached rankings"""
        self.entries.clear()

    def dispose(self):
        """Release cached data at application shutdown"""
        count = len(self.entries)
        self.clear()
        logger.info(f"Related cache disposed ({count} entries dropped)")

    def __len__(self) -> int:
        return len(self.entries)
