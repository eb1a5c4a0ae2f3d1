"""
HTTP fetcher for NovelUpdates pages.

This module defines :class:`NovelUpdatesFetcher`, which owns the HTTP session,
builds the search and series URLs and returns page bodies as text.
"""

from __future__ import annotations

import logging
import types
from typing import Any, Self
from urllib.parse import quote_plus

from novelupdates.errors import TransportError
from novelupdates.infra.sessions import BaseSession, create_session
from novelupdates.schemas import FetcherConfig

logger = logging.getLogger(__name__)


class NovelUpdatesFetcher:
    """Fetches raw pages from NovelUpdates.

    Every request goes out with the browser header profile of the session.
    Responses outside the 2xx range are reported as :class:`TransportError`
    before any parsing happens. Requests are never retried.
    """

    site_key = "novelupdates"

    BASE_URL = "https://novelupdates.com"

    SEARCH_PATH = "/?s={keyword}"
    SERIES_PATH = "/series/{series_id}/"

    def __init__(
        self,
        config: FetcherConfig | None = None,
        *,
        session: BaseSession | None = None,
        **kwargs: Any,
    ) -> None:
        """Initializes a new fetcher instance.

        Args:
            config: Optional fetcher configuration. If omitted, a default
                :class:`FetcherConfig` instance is created.
            session: Optional preconfigured HTTP session. If omitted, a new
                session is created via :func:`create_session`.
            **kwargs: Additional keyword arguments forwarded to
                :func:`create_session` when ``session`` is not provided.
        """
        config = config or FetcherConfig()

        self._encode_query = config.encode_query
        self.session = session or create_session(
            backend=config.backend,
            cfg=config.session_cfg,
            **kwargs,
        )

    def init(self) -> None:
        """Initializes the underlying session."""
        self.session.init()

    def close(self) -> None:
        """Closes the underlying session and releases associated resources."""
        self.session.close()

    def search_url(self, keyword: str) -> str:
        """Builds the search URL for ``keyword``.

        The keyword is percent-encoded unless ``encode_query`` is disabled,
        in which case it is appended verbatim.
        """
        keyword = self._quote(keyword) if self._encode_query else keyword
        return self.BASE_URL + self.SEARCH_PATH.format(keyword=keyword)

    def series_url(self, series_id: str) -> str:
        """Builds the detail page URL for a series slug."""
        return self.BASE_URL + self.SERIES_PATH.format(series_id=series_id)

    def fetch_search_result(self, keyword: str, **kwargs: Any) -> str:
        """Fetches the search results page for a keyword.

        Args:
            keyword: Search query string.
            **kwargs: Additional parameters forwarded to :meth:`fetch_text`.

        Returns:
            The HTML of the search results page.
        """
        return self.fetch_text(self.search_url(keyword), **kwargs)

    def fetch_series_info(self, series_id: str, **kwargs: Any) -> str:
        """Fetches the detail page of a series.

        Args:
            series_id: Series slug, e.g. ``"mushoku-tensei"``.
            **kwargs: Additional parameters forwarded to :meth:`fetch_text`.

        Returns:
            The HTML of the series page.
        """
        return self.fetch_text(self.series_url(series_id), **kwargs)

    def fetch_text(
        self,
        url: str,
        encoding: str = "utf-8",
        **kwargs: Any,
    ) -> str:
        """Fetches and decodes textual content from the given URL.

        Args:
            url: Target URL to fetch.
            encoding: Fallback character encoding for the body text.
            **kwargs: Additional parameters forwarded to ``BaseSession.get``.

        Returns:
            The decoded textual content.

        Raises:
            RuntimeError: If the session is not initialized.
            TransportError: If the request fails, times out, or returns a
                non-successful HTTP status. After a redirect the error
                carries the URL that answered.
        """
        logger.debug("%s: GET %s", self.site_key, url)
        resp = self.session.get(url, encoding=encoding, **kwargs)
        final_url = resp.url or url
        if final_url != url:
            logger.debug("%s: %s redirected to %s", self.site_key, url, final_url)
        if not resp.ok:
            logger.warning(
                "%s: request to %s failed with status %s",
                self.site_key,
                final_url,
                resp.status,
            )
            raise TransportError(
                f"Request to {final_url} failed with status {resp.status}",
                url=final_url,
                status=resp.status,
            )
        return resp.text

    @staticmethod
    def _quote(q: str, encoding: str | None = None, errors: str | None = None) -> str:
        """URL-encode a query string safely."""
        return quote_plus(q, encoding=encoding, errors=errors)

    def __enter__(self) -> Self:
        self.init()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        self.close()
