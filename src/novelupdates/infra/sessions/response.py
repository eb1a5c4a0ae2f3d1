"""
Backend-agnostic HTTP response wrapper returned by every session.
"""

from __future__ import annotations


class BaseResponse:
    """A lightweight, backend-agnostic HTTP response object.

    Args:
        content: Raw response body as bytes.
        status: HTTP status code.
        encoding: Text encoding used when decoding the response body.
        url: Final URL of the response after redirects.
    """

    __slots__ = ("content", "status", "encoding", "url")

    def __init__(
        self,
        *,
        content: bytes,
        status: int = 200,
        encoding: str = "utf-8",
        url: str = "",
    ) -> None:
        self.content = content
        self.status = status
        self.encoding = encoding
        self.url = url

    @property
    def text(self) -> str:
        """Returns the decoded response text.

        The declared encoding is tried first, then UTF-8. As a last resort the
        body is decoded as UTF-8 with invalid bytes replaced.
        """
        for enc in (self.encoding, "utf-8"):
            try:
                return self.content.decode(enc)
            except (UnicodeDecodeError, LookupError):
                continue
        return self.content.decode("utf-8", errors="replace")

    @property
    def ok(self) -> bool:
        """Indicates whether the status code is a 2xx success.

        Returns:
            bool: True if ``200 <= status < 300``.
        """
        return 200 <= self.status < 300

    def __repr__(self) -> str:
        return (
            f"<BaseResponse status={self.status} len={len(self.content)} "
            f"url={self.url!r}>"
        )
