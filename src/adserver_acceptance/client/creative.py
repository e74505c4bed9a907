"""Fetching VAST creatives and extracting the banner identifier from them."""

from typing import Mapping, Optional

import httpx
from bs4 import BeautifulSoup

from adserver_acceptance.errors import AdServerError
from adserver_acceptance.utils import get_logger

logger = get_logger("creative")

BANNER_ID_ELEMENT = "ClickThrough"


def extract_banner_id(document: str) -> str:
    """Return the stripped text of all ClickThrough elements in a VAST document."""
    soup = BeautifulSoup(document, "xml")
    return "".join(node.get_text() for node in soup.find_all(BANNER_ID_ELEMENT)).strip()


class CreativeFetcher:
    """Fetches creative documents with a fixed set of request headers."""

    def __init__(
        self,
        headers: Optional[Mapping[str, str]] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._headers = dict(headers or {})
        self._client = httpx.Client(timeout=timeout, transport=transport)

    @property
    def headers(self) -> Mapping[str, str]:
        return dict(self._headers)

    def fetch(self, url: str) -> str:
        try:
            response = self._client.get(url, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch creative from {url}: {e}")
            raise AdServerError(f"Creative fetch failed: {e}") from e
        return response.text

    def fetch_banner_id(self, url: str) -> str:
        return extract_banner_id(self.fetch(url))

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "CreativeFetcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
