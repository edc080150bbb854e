"""
Live API client for the Fantasy Premier League API
Bootstrap and fixtures data fetched directly from the API behind a short-lived cache
"""
import logging
from typing import Optional, List, Dict, Any

import requests

from app.cache import StalenessCache, UpstreamResource, get_ttl_for_resource
from app.errors import UpstreamUnavailable
from config.settings import settings

logger = logging.getLogger("api_client")

BOOTSTRAP_PATH = "bootstrap-static/"
FIXTURES_PATH = "fixtures/"


def _get_headers() -> dict:
    """Get request headers sent to the FPL API."""
    return {"User-Agent": settings.user_agent}


class FPLClient:
    """
    Upstream client that owns the cache for its two resources.

    One instance is built at startup and shared by all requests.

    Usage:
        client = FPLClient()
        bootstrap = client.get_bootstrap_static()
        fixtures = client.get_future_fixtures()
    """

    def __init__(
        self,
        base_url: str = settings.fpl_base_url,
        timeout: float = settings.request_timeout_seconds,
        cache: Optional[StalenessCache] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: FPL API root, without trailing slash
            timeout: Per-request timeout in seconds
            cache: Cache holding one entry per upstream resource
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.cache = cache or StalenessCache()

    def _make_request(self, path: str, params: Optional[dict] = None) -> Any:
        """
        Issue a GET against the FPL API and parse the JSON body.

        Raises:
            UpstreamUnavailable: Transport error, non-2xx status or non-JSON body
        """
        url = f"{self.base_url}/{path}"
        try:
            response = requests.get(
                url,
                headers=_get_headers(),
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"FPL request to {url} failed: {e}")
            raise UpstreamUnavailable(f"FPL API unreachable: {e}", cause=e) from e

        if not response.ok:
            logger.warning(f"FPL API error for {url}: {response.status_code}")
            raise UpstreamUnavailable(
                f"FPL API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"FPL API returned a non-JSON body for {url}")
            raise UpstreamUnavailable("FPL API returned invalid JSON", cause=e) from e

    def get_bootstrap_static(self) -> Dict[str, Any]:
        """Full dataset: elements (players), teams and element_types."""
        resource = UpstreamResource.BOOTSTRAP_STATIC
        return self.cache.get_or_refresh(
            resource,
            lambda: self._make_request(BOOTSTRAP_PATH),
            get_ttl_for_resource(resource),
        )

    def get_future_fixtures(self) -> List[Dict[str, Any]]:
        """Fixtures that have not been played yet."""
        resource = UpstreamResource.FIXTURES_FUTURE
        return self.cache.get_or_refresh(
            resource,
            lambda: self._make_request(FIXTURES_PATH, params={"future": 1}),
            get_ttl_for_resource(resource),
        )

    def get_cache_stats(self) -> Dict[str, Any]:
        """Get comprehensive cache statistics."""
        return self.cache.get_stats()
