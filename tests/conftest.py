from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from novelupdates.infra.sessions import BaseResponse, BaseSession

DATA_DIR = Path(__file__).parent / "data"


class FakeSession(BaseSession):
    """In-memory session serving canned pages keyed by URL.

    Unknown URLs answer with a 404; ``status`` overrides the status code of
    known pages. ``redirects`` maps a requested URL to the URL the response
    reports, as after following a redirect.
    """

    def __init__(
        self,
        pages: dict[str, str] | None = None,
        *,
        status: int = 200,
        redirects: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.pages = dict(pages or {})
        self.status = status
        self.redirects = dict(redirects or {})
        self.requests: list[str] = []
        self.init_calls = 0
        self.close_calls = 0

    def init(self, **kwargs: Any) -> None:
        self.init_calls += 1

    def close(self) -> None:
        self.close_calls += 1

    def get(
        self,
        url: str,
        *,
        allow_redirects: bool | None = None,
        verify: bool | None = None,
        encoding: str = "utf-8",
        **kwargs: Any,
    ) -> BaseResponse:
        self.requests.append(url)
        final_url = self.redirects.get(url, url)
        if url not in self.pages:
            return BaseResponse(content=b"<html></html>", status=404, url=final_url)
        return BaseResponse(
            content=self.pages[url].encode("utf-8"),
            status=self.status,
            encoding=encoding,
            url=final_url,
        )


@pytest.fixture
def load_html() -> Callable[[str], str]:
    """Return a loader reading an HTML page from ``tests/data``."""

    def _load(name: str) -> str:
        return (DATA_DIR / name).read_text(encoding="utf-8")

    return _load


@pytest.fixture
def make_session() -> Callable[..., FakeSession]:
    """Return a factory building a FakeSession from ``{url: html}``."""

    def _make(
        pages: dict[str, str] | None = None,
        status: int = 200,
        redirects: dict[str, str] | None = None,
    ) -> FakeSession:
        return FakeSession(pages, status=status, redirects=redirects)

    return _make
