"""Tests for client exception classes."""


from print_covers.clients import (
    APIError,
    ConnectionError,
    FetchFailure,
    NotFoundError,
    RateLimitError,
)


class TestFetchFailure:
    """Tests for the base FetchFailure exception."""

    def test_instantiation_with_message(self):
        error = FetchFailure("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_inheritance(self):
        assert isinstance(FetchFailure("test"), Exception)


class TestConnectionError:
    """Tests for ConnectionError exception."""

    def test_inheritance(self):
        error = ConnectionError("Network unreachable")

        assert error.message == "Network unreachable"
        assert isinstance(error, FetchFailure)


class TestAPIError:
    """Tests for APIError and its subclasses."""

    def test_instantiation_with_status_code(self):
        error = APIError("Server error", status_code=500)

        assert error.message == "Server error"
        assert error.status_code == 500
        assert isinstance(error, FetchFailure)

    def test_rate_limit_defaults(self):
        error = RateLimitError()

        assert error.status_code == 429
        assert error.message == "Rate limit exceeded"
        assert isinstance(error, APIError)

    def test_not_found_defaults(self):
        error = NotFoundError()

        assert error.status_code == 404
        assert error.message == "Resource not found"
        assert isinstance(error, APIError)
