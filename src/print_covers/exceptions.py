"""Exceptions raised by the cover pipeline outside the network layer."""


class CoverError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class InvalidKind(CoverError):
    """Raised for an unknown cache resource kind or missing key parameters."""

    pass


class CorruptMetadata(CoverError):
    """Raised when a cached file's modification time is missing or invalid."""

    pass


class InvalidImageContent(CoverError):
    """Raised when an image response is empty or looks like an HTML page."""

    pass


class IndexParseError(CoverError):
    """Raised when an index page cannot be turned into issue descriptors."""

    pass


class RenderFailure(CoverError):
    """Raised when a single index template fails to render or be written."""

    def __init__(self, message: str, template_name: str, *args, **kwargs):
        self.template_name = template_name
        super().__init__(message, *args, **kwargs)
