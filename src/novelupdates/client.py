from __future__ import annotations

import logging
import types
from pathlib import Path
from typing import Any, Self

from novelupdates.fetcher import NovelUpdatesFetcher
from novelupdates.infra.config import load_client_config
from novelupdates.infra.sessions import BaseSession
from novelupdates.parsers import SearchParser, SeriesParser
from novelupdates.schemas import ClientConfig, SearchRecord, SeriesRecord
from novelupdates.serialization import to_json

logger = logging.getLogger(__name__)


class NovelUpdatesClient:
    """Search and series lookups against NovelUpdates.

    The client composes a :class:`NovelUpdatesFetcher` with the two page
    extractors. Use it as a context manager to reuse one HTTP session
    across several calls::

        with NovelUpdatesClient() as client:
            for hit in client.search("tensei"):
                print(client.fetch_series(hit.id).title)

    A session passed in by the caller is initialized on entry but never
    closed by the client.
    """

    site_key = "novelupdates"

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        session: BaseSession | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the client.

        Args:
            config: Client configuration. If not provided, a default
                `ClientConfig` instance is created.
            session: Optional session instance to use for network requests.
            **kwargs: Forwarded to the session factory when no session is
                given.
        """
        cfg = config or ClientConfig()

        self._owns_session = session is None
        self.fetcher = NovelUpdatesFetcher(cfg.fetcher_cfg, session=session, **kwargs)
        self.search_parser = SearchParser(cfg.parser_cfg)
        self.series_parser = SeriesParser(cfg.parser_cfg)

    @classmethod
    def from_settings(
        cls,
        config_path: str | Path | None = None,
        *,
        session: BaseSession | None = None,
        **kwargs: Any,
    ) -> Self:
        """Build a client from the settings file.

        The file is looked up like :func:`load_config` does: ``config_path``
        if given, else ``settings.toml`` or ``settings.json`` in the working
        directory, else the per-user settings file.

        Raises:
            FileNotFoundError: No settings file was found.
            ValueError: The settings file is invalid.
        """
        return cls(load_client_config(config_path), session=session, **kwargs)

    def init(self) -> None:
        """Initialize underlying resources."""
        self.fetcher.init()

    def close(self) -> None:
        """Close underlying resources owned by the client."""
        if self._owns_session:
            self.fetcher.close()

    def search(self, series_name: str) -> list[SearchRecord]:
        """Search series by keyword.

        Only the first results page is read.

        Args:
            series_name: Keyword to search for.

        Returns:
            Result records in page order; empty when nothing matched.

        Raises:
            TransportError: The request failed.
            ParseError: A result card is malformed.
        """
        raw_html = self.fetcher.fetch_search_result(series_name)
        results = self.search_parser.parse(raw_html)
        logger.debug(
            "%s: search %r returned %d results",
            self.site_key,
            series_name,
            len(results),
        )
        return results

    def search_json(self, series_name: str, indent: Any = None) -> bytes:
        """Search series by keyword and render the results as JSON."""
        return to_json(self.search(series_name), indent)

    def fetch_series(self, series_id: str) -> SeriesRecord:
        """Fetch the metadata of one series.

        Args:
            series_id: Series slug as found in ``SearchRecord.id``.

        Raises:
            TransportError: The request failed.
            ParseError: The page lacks a required anchor.
        """
        raw_html = self.fetcher.fetch_series_info(series_id)
        return self.series_parser.parse(raw_html)

    def fetch_series_json(self, series_id: str, indent: Any = None) -> bytes:
        """Fetch the metadata of one series and render it as JSON."""
        return to_json(self.fetch_series(series_id), indent)

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
