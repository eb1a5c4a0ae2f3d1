"""
Abstract base class providing common behavior for the page extractors.
"""

from __future__ import annotations

import abc
from collections.abc import Iterable
from typing import Any

from lxml.html import HtmlElement

from novelupdates.errors import ParseError
from novelupdates.schemas import Link, ParserConfig

from .dom import attr, find_one, inner_text


class BaseParser(abc.ABC):
    """Base class for turning a raw NovelUpdates page into records.

    Subclasses implement :meth:`parse` for one page type. Shared helpers
    cover required-anchor lookups and link projection.
    """

    def __init__(self, config: ParserConfig | None = None, **kwargs: Any) -> None:
        """Initialize the parser with a configuration object.

        Args:
            config: ParserConfig controlling text cleaning behavior.
        """
        config = config or ParserConfig()

        self._compat_label_trim = config.compat_label_trim
        self._group_slug = config.group_slug

    @abc.abstractmethod
    def parse(self, raw_html: str) -> Any:
        """Parse one raw HTML page.

        Args:
            raw_html: Response body of the page.

        Returns:
            The extracted record(s).

        Raises:
            ParseError: The page is unparsable or a required anchor is missing.
        """
        ...

    @staticmethod
    def _require(node: HtmlElement, xpath: str, anchor: str) -> HtmlElement:
        """Return the first match of ``xpath`` or raise ``ParseError``.

        Args:
            node: Context element.
            xpath: Query locating the anchor.
            anchor: Human readable name of the anchor used in the error.
        """
        found = find_one(node, xpath)
        if found is None:
            raise ParseError(f"required anchor not found: {anchor}", anchor=anchor)
        return found

    @staticmethod
    def _link(node: HtmlElement | None) -> Link | None:
        """Project an anchor element into a :class:`Link`, or None."""
        if node is None:
            return None
        return Link(name=inner_text(node).strip(), url=attr(node, "href"))

    @classmethod
    def _links(cls, nodes: Iterable[HtmlElement]) -> tuple[Link, ...]:
        return tuple(
            Link(name=inner_text(a).strip(), url=attr(a, "href")) for a in nodes
        )
