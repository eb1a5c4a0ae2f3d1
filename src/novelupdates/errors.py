class NovelUpdatesError(Exception):
    """Base class for all errors raised by this package."""


class TransportError(NovelUpdatesError, ConnectionError):
    """The request failed or returned a non-successful HTTP status.

    Attributes:
        url: URL of the failed request.
        status: HTTP status code, or None when no response was received.
    """

    def __init__(self, message: str, *, url: str, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class ParseError(NovelUpdatesError):
    """The page could not be parsed or a required anchor is missing.

    Attributes:
        anchor: Description of the DOM anchor that was not found.
    """

    def __init__(self, message: str, *, anchor: str | None = None) -> None:
        super().__init__(message)
        self.anchor = anchor


class EncodingError(NovelUpdatesError, ValueError):
    """A record could not be rendered as JSON."""
