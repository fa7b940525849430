"""Client for fetching print-edition index pages and cover images."""

import logging

import httpx

from .client import Client
from .exceptions import FetchFailure

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "print-covers/0.1"


class CoverClient(Client):
    """Fetches index page markup and cover image bytes.

    This is the only component that talks to the network. Page failures
    propagate to the caller; image failures are logged and reported as
    ``None`` so a single missing cover never stops a run.

    Example:
        config = {"base_url": "https://www.economist.com/printedition"}
        with CoverClient(config) as client:
            html = client.fetch_page(index_page_url(client.base_url, 2018, 76980))
    """

    @property
    def headers(self) -> dict[str, str]:
        headers = {"User-Agent": DEFAULT_USER_AGENT}
        headers.update(self._config.get("headers", {}))
        return headers

    def fetch_page(self, url: str) -> str:
        """Fetch an index page and return its markup.

        Raises:
            FetchFailure: On any transport or HTTP error
        """
        logger.debug(f"Fetching page {url}")
        try:
            response = self.get(url)
        except httpx.HTTPError as e:
            raise FetchFailure(f"Failed to fetch page {url}: {e}") from e
        return response.text

    def fetch_image(self, url: str) -> bytes | None:
        """Fetch image bytes, returning None on failure."""
        logger.debug(f"Fetching image {url}")
        try:
            response = self.get(url)
        except (FetchFailure, httpx.HTTPError) as e:
            logger.error(f"Error fetching image {url}: {e}")
            return None
        return response.content
