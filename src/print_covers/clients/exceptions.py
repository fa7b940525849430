"""Custom exceptions for network clients."""


class FetchFailure(Exception):
    """Base exception for all failures retrieving a page or image."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConnectionError(FetchFailure):
    """Raised when a network connection fails or times out."""

    pass


class APIError(FetchFailure):
    """Raised when the server returns a non-2xx response."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)


class RateLimitError(APIError):
    """Raised when the server returns a 429 rate limit response."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)


class NotFoundError(APIError):
    """Raised when the server returns a 404 not found response."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)
