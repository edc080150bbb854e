"""
TTL configuration per upstream resource.
"""
from typing import Dict

from config.settings import settings

from .core import UpstreamResource


# TTL Configuration by resource (in seconds)
TTL_CONFIG: Dict[UpstreamResource, int] = {
    UpstreamResource.BOOTSTRAP_STATIC: settings.bootstrap_cache_ttl_seconds,
    UpstreamResource.FIXTURES_FUTURE: settings.fixtures_cache_ttl_seconds,
}

DEFAULT_TTL_SECONDS = 60


def get_ttl_for_resource(resource: UpstreamResource) -> int:
    """
    Get the freshness window for an upstream resource.

    Args:
        resource: The upstream resource

    Returns:
        TTL in seconds
    """
    return TTL_CONFIG.get(resource, DEFAULT_TTL_SECONDS)
