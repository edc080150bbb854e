"""
Read-through staleness cache for upstream resources.
"""
import threading
import logging
import time
from typing import Dict, Callable, Any, Optional

from .core import CacheEntry, CacheSource, UpstreamResource

logger = logging.getLogger("cache.manager")


class StalenessCache:
    """
    Holds one entry per upstream resource and serves it while fresh.

    - An entry younger than the TTL is returned without calling upstream
    - Otherwise fetch_fn is called; its result replaces the entry
    - A failing fetch_fn propagates and leaves the previous entry untouched

    The lock only guards the entries and counters. Fetches run outside it, so
    two callers may refresh the same resource concurrently; the last write wins.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Initialize the cache.

        Args:
            clock: Monotonic time source in seconds (injectable for tests)
        """
        self._entries: Dict[UpstreamResource, CacheEntry] = {}
        self._last_source: Dict[UpstreamResource, CacheSource] = {}
        self._lock = threading.Lock()
        self._clock = clock

        # Stats tracking
        self._stats = {
            "hits_fresh": 0,
            "misses": 0,
            "failed_refreshes": 0,
        }

    def get_or_refresh(
        self,
        resource: UpstreamResource,
        fetch_fn: Callable[[], Any],
        ttl_seconds: float,
    ) -> Any:
        """
        Return the cached payload for a resource, refreshing it when stale.

        Args:
            resource: Resource key
            fetch_fn: Function performing the upstream call
            ttl_seconds: Freshness window

        Returns:
            The cached or freshly fetched payload

        Raises:
            Exception: Any error from fetch_fn is propagated
        """
        now = self._clock()
        entry = self.peek(resource)

        if entry is not None and entry.is_fresh(ttl_seconds, now):
            logger.debug(
                f"CACHE HIT (fresh): {resource.value} [age={entry.age_seconds(now):.1f}s]"
            )
            with self._lock:
                self._stats["hits_fresh"] += 1
                self._last_source[resource] = CacheSource.FRESH
            return entry.data

        if entry is None:
            logger.info(f"CACHE MISS: {resource.value}")
        else:
            logger.info(
                f"CACHE EXPIRED: {resource.value} [age={entry.age_seconds(now):.1f}s]"
            )

        try:
            data = fetch_fn()
        except Exception as e:
            with self._lock:
                self._stats["failed_refreshes"] += 1
            logger.warning(f"Refresh failed for {resource.value}: {e}")
            raise

        with self._lock:
            self._entries[resource] = CacheEntry(data=data, fetched_at=now)
            self._stats["misses"] += 1
            self._last_source[resource] = CacheSource.UPSTREAM
        return data

    def peek(self, resource: UpstreamResource) -> Optional[CacheEntry]:
        """Return the current entry for a resource without refreshing it."""
        with self._lock:
            return self._entries.get(resource)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        now = self._clock()
        with self._lock:
            total_requests = self._stats["hits_fresh"] + self._stats["misses"]
            hit_rate = (
                self._stats["hits_fresh"] / total_requests * 100
                if total_requests > 0 else 0
            )

            return {
                "entries": len(self._entries),
                "hits_fresh": self._stats["hits_fresh"],
                "misses": self._stats["misses"],
                "failed_refreshes": self._stats["failed_refreshes"],
                "hit_rate_percent": round(hit_rate, 1),
                "ages_seconds": {
                    resource.value: round(entry.age_seconds(now), 1)
                    for resource, entry in self._entries.items()
                },
                "last_source": {
                    resource.value: source.value
                    for resource, source in self._last_source.items()
                },
            }
