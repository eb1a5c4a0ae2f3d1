"""
Module-level entry points.

Each call opens a fresh client (and HTTP session), performs a single request
and closes it again, so no state is shared between calls.
"""

from __future__ import annotations

from typing import Any

from novelupdates.client import NovelUpdatesClient
from novelupdates.infra.sessions import BaseSession
from novelupdates.schemas import ClientConfig, SearchRecord, SeriesRecord
from novelupdates.serialization import to_json


def search(
    series_name: str,
    *,
    config: ClientConfig | None = None,
    session: BaseSession | None = None,
) -> list[SearchRecord]:
    """Search NovelUpdates for series matching ``series_name``."""
    with NovelUpdatesClient(config, session=session) as client:
        return client.search(series_name)


def search_json(
    series_name: str,
    indent: Any = None,
    *,
    config: ClientConfig | None = None,
    session: BaseSession | None = None,
) -> bytes:
    """Like :func:`search`, rendered as JSON (2-space indent by default)."""
    return to_json(search(series_name, config=config, session=session), indent)


def fetch_series(
    series_id: str,
    *,
    config: ClientConfig | None = None,
    session: BaseSession | None = None,
) -> SeriesRecord:
    """Fetch the series page identified by ``series_id``."""
    with NovelUpdatesClient(config, session=session) as client:
        return client.fetch_series(series_id)


def fetch_series_json(
    series_id: str,
    indent: Any = None,
    *,
    config: ClientConfig | None = None,
    session: BaseSession | None = None,
) -> bytes:
    """Like :func:`fetch_series`, rendered as JSON (2-space indent by default)."""
    return to_json(fetch_series(series_id, config=config, session=session), indent)
