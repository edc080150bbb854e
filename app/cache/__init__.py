"""
In-memory staleness cache for upstream FPL resources.
"""
from .core import CacheEntry, CacheSource, UpstreamResource
from .ttl_policies import TTL_CONFIG, get_ttl_for_resource
from .manager import StalenessCache

__all__ = [
    # Core types
    "CacheEntry",
    "CacheSource",
    "UpstreamResource",
    # TTL policies
    "TTL_CONFIG",
    "get_ttl_for_resource",
    # Cache
    "StalenessCache",
]
