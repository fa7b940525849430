"""Base client for network requests."""

import logging
from abc import ABC, abstractmethod

import httpx

from .exceptions import (
    APIError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
)

logger = logging.getLogger(__name__)


class Client(ABC):
    """Base class for network clients.

    Provides lazy-initialized httpx.Client with context manager support,
    configurable timeout and headers via dict config. Each request is
    made once; connection failures are not retried.

    Config keys:
        base_url (required): Base URL for all requests
        timeout: Request timeout in seconds (default: 30)
        headers: Additional headers to include in requests
    """

    def __init__(self, config: dict):
        if "base_url" not in config:
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"])

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", 30))

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._config.get("headers", {}))

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        """Map HTTP errors to exceptions.

        Raises:
            NotFoundError: For 404 responses
            RateLimitError: For 429 responses
            APIError: For other non-2xx responses
        """
        if response.is_success:
            return response

        status_code = response.status_code

        if status_code == 404:
            raise NotFoundError(f"Resource not found: {response.url}")
        elif status_code == 429:
            raise RateLimitError(f"Rate limit exceeded: {response.url}")
        else:
            raise APIError(
                f"HTTP error {status_code}: {response.url}",
                status_code=status_code,
            )

    def _request(
        self,
        method: str,
        url: str,
        **kwargs,
    ) -> httpx.Response:
        """Make a single request.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Absolute URL, or path appended to base_url
            **kwargs: Additional arguments passed to httpx.request

        Returns:
            The HTTP response

        Raises:
            ConnectionError: If the request fails to connect or times out
            APIError: If the server returns a non-2xx response
        """
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.ConnectError as e:
            logger.warning(f"Connection error: {e}")
            raise ConnectionError(f"Connection failed: {url}") from e
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout: {e}")
            raise ConnectionError(f"Request timed out: {url}") from e

        return self._handle_response(response)

    def get(self, url: str, **kwargs) -> httpx.Response:
        """Convenience method for GET requests."""
        return self._request("GET", url, **kwargs)

    @abstractmethod
    def fetch_page(self, url: str) -> str:
        """Fetch page markup. Must be implemented by subclasses."""
        pass

    @abstractmethod
    def fetch_image(self, url: str) -> bytes | None:
        """Fetch image bytes. Must be implemented by subclasses."""
        pass
