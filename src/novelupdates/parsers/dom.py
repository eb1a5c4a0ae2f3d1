"""
Thin helpers around :mod:`lxml.html` used by the extractors.

Queries return ``None`` or empty lists instead of raising, so that optional
page fragments degrade gracefully; the extractors decide which anchors are
required.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from lxml import etree, html
from lxml.html import HtmlElement

from novelupdates.errors import ParseError


def parse_html(text: str) -> HtmlElement:
    """Parse an HTML document into its root element.

    Args:
        text: Raw HTML text.

    Returns:
        The ``<html>`` root element.

    Raises:
        ParseError: If the document is empty or cannot be parsed.
    """
    if not text or not text.strip():
        raise ParseError("empty HTML document", anchor="html")
    try:
        return html.document_fromstring(text)
    except (etree.ParserError, ValueError) as exc:
        raise ParseError(f"unparsable HTML document: {exc}", anchor="html") from exc


def find_one(node: HtmlElement | None, xpath: str) -> Any:
    """Return the first result of ``xpath`` evaluated on ``node``, or None."""
    if node is None:
        return None
    results = node.xpath(xpath)
    return results[0] if results else None


def find_all(node: HtmlElement | None, xpath: str) -> list[Any]:
    """Return every result of ``xpath`` evaluated on ``node``."""
    if node is None:
        return []
    return list(node.xpath(xpath))


def attr(node: HtmlElement | None, name: str, default: str = "") -> str:
    """Read an attribute, falling back to ``default`` when absent."""
    if node is None:
        return default
    value = node.get(name)
    return default if value is None else value


def inner_text(
    node: HtmlElement | str | None,
    exclude: Iterable[HtmlElement] = (),
) -> str:
    """Concatenate the text of ``node`` and its descendants.

    Subtrees listed in ``exclude`` contribute nothing, but the text that
    directly follows them (their tail) is kept, as if the excluded elements
    had been removed from the tree.

    Args:
        node: Element, text node, or None.
        exclude: Descendant elements whose content should be skipped.

    Returns:
        The collected text, or an empty string for None.
    """
    if node is None:
        return ""
    if isinstance(node, str):
        return str(node)

    skipped = list(exclude)
    if not skipped:
        return str(node.text_content())

    parts: list[str] = []
    _collect_text(node, skipped, parts)
    return "".join(parts)


def _collect_text(
    node: HtmlElement, skipped: list[HtmlElement], parts: list[str]
) -> None:
    if node.text:
        parts.append(node.text)
    for child in node:
        # comments and processing instructions carry no text of their own
        if isinstance(child.tag, str) and not any(child is s for s in skipped):
            _collect_text(child, skipped, parts)
        if child.tail:
            parts.append(child.tail)


def direct_texts(node: HtmlElement | None) -> list[str]:
    """Return the text nodes that are direct children of ``node``."""
    return [str(t) for t in find_all(node, "./text()")]


def child_nodes(node: HtmlElement) -> Iterator[HtmlElement | str]:
    """Iterate the children of ``node`` in document order, text nodes included.

    Text nodes are yielded as plain strings, elements as themselves.
    Comments and processing instructions are skipped but their tail text is
    still yielded.
    """
    if node.text is not None:
        yield node.text
    for child in node:
        if isinstance(child.tag, str):
            yield child
        if child.tail is not None:
            yield child.tail


def is_line_break(node: HtmlElement | str) -> bool:
    """Whether ``node`` is a bare ``<br>`` element (no attributes, no content)."""
    return (
        not isinstance(node, str)
        and node.tag == "br"
        and not node.attrib
        and len(node) == 0
        and not node.text
    )
