"""
Key-authenticated client for the ad server's management API.

Only the zone link lookup is needed: it resolves a publisher/zone pair into
the VAST URL that serves creatives for that zone.
"""

from typing import TYPE_CHECKING, Optional

import httpx

from adserver_acceptance.errors import AdServerError, InvalidConfiguration
from adserver_acceptance.utils import get_logger

if TYPE_CHECKING:
    from adserver_acceptance.config import ApiConfig

logger = get_logger("api")

API_KEY_HEADER = "X-Integros-Key"
DEFAULT_API_URL = "https://api.integros.io"


class AdServerApi:
    """HTTP client for the ad server API."""

    def __init__(
        self,
        api_url: Optional[str],
        api_key: Optional[str],
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            api_url: Base URL of the API (e.g., "https://api.integros.io").
            api_key: Key sent in the X-Integros-Key header.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, used to stub the server in tests.
        """
        if not api_url or not api_url.strip():
            raise InvalidConfiguration("API URL can't be empty")
        if not api_key or not api_key.strip():
            raise InvalidConfiguration("API key can't be empty")

        self._api_url = api_url.strip().rstrip("/")
        self._api_key = api_key
        self._client = httpx.Client(
            timeout=timeout,
            headers={API_KEY_HEADER: api_key},
            transport=transport,
        )

    @classmethod
    def from_config(
        cls, config: "ApiConfig", transport: Optional[httpx.BaseTransport] = None
    ) -> "AdServerApi":
        return cls(config.api_url, config.api_key, timeout=config.timeout, transport=transport)

    @property
    def api_url(self) -> str:
        return self._api_url

    def zone_link(self, publisher: str, zone: str) -> str:
        """Resolve the creative (VAST) URL for a publisher's zone."""
        url = f"{self._api_url}/v1/adserver/publishers/{publisher}/zones/{zone}/link"
        try:
            response = self._client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Failed to resolve zone link for {publisher}/{zone}: {e}")
            raise AdServerError(f"Zone link lookup failed: {e}") from e
        except ValueError as e:
            logger.error(f"Zone link response for {publisher}/{zone} is not JSON: {e}")
            raise AdServerError(f"Zone link response is not JSON: {e}") from e

        result = payload.get("result") if isinstance(payload, dict) else None
        if not isinstance(result, str) or not result.strip():
            raise AdServerError(
                f"Zone link response for {publisher}/{zone} has no result: {payload!r}"
            )
        logger.debug(f"Resolved zone {publisher}/{zone} to {result}")
        return result.strip()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "AdServerApi":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
