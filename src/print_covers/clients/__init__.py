"""Network clients for the print-edition site."""

from .client import Client
from .cover_client import CoverClient
from .exceptions import (
    APIError,
    ConnectionError,
    FetchFailure,
    NotFoundError,
    RateLimitError,
)

__all__ = [
    "Client",
    "CoverClient",
    "FetchFailure",
    "ConnectionError",
    "APIError",
    "RateLimitError",
    "NotFoundError",
]
