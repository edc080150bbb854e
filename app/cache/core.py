"""
Core cache data structures.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any


class UpstreamResource(Enum):
    """Upstream resources tracked by the cache, one entry each."""
    BOOTSTRAP_STATIC = "bootstrap-static"   # players, teams, element types
    FIXTURES_FUTURE = "fixtures-future"     # fixtures not yet played


class CacheSource(Enum):
    """Source of returned data."""
    FRESH = "fresh"       # Within TTL
    UPSTREAM = "upstream" # Fetched from API


@dataclass
class CacheEntry:
    """
    A cached payload and the clock reading of its last successful refresh.
    """
    data: Any
    fetched_at: float

    def age_seconds(self, now: float) -> float:
        """Seconds since data was fetched."""
        return now - self.fetched_at

    def is_fresh(self, ttl_seconds: float, now: float) -> bool:
        """Check if data is within the given TTL."""
        return self.age_seconds(now) < ttl_seconds
