"""
Extractor for the series detail page (``/series/<slug>/``).
"""

from __future__ import annotations

import logging

from lxml.html import HtmlElement

from novelupdates.schemas import Link, Rating, SeriesRecord, Term

from .base import BaseParser
from .dom import (
    attr,
    child_nodes,
    find_all,
    find_one,
    inner_text,
    is_line_break,
    parse_html,
)
from .slug import group_url

logger = logging.getLogger(__name__)


class SeriesParser(BaseParser):
    """Turns a series page into a SeriesRecord.

    The page consists of a content container (``div.w-blog-content``) holding
    the title and a two-column row: the left column (``one-third``) carries
    the metadata, the right column (``two-thirds``) the description.
    """

    RATING_LABELS = ("5", "4", "3", "2", "1")

    def parse(self, raw_html: str) -> SeriesRecord:
        """Parse a series page.

        Raises:
            ParseError: If the content container, the title, the column row
                or the left column is missing.
        """
        tree = parse_html(raw_html)

        page = self._require(
            tree, "//div[@class='w-blog-content']", "div.w-blog-content"
        )
        title_node = self._require(
            page, ".//div[@class='seriestitlenu']", "div.seriestitlenu"
        )
        row = self._require(
            page,
            ".//div[@class='g-cols wpb_row offset_default']",
            "div.g-cols.wpb_row.offset_default",
        )
        ot = self._require(row, ".//div[@class='one-third']", "div.one-third")
        tt = find_one(row, ".//div[@class='two-thirds']")

        title = inner_text(title_node).strip()
        logger.debug("novelupdates: parsing series page %r", title)

        return SeriesRecord(
            title=title,
            image=attr(find_one(ot, ".//div[@class='seriesimg']//img"), "src"),
            type=self._parse_type(ot),
            genre=self._terms(find_all(ot, ".//div[@id='seriesgenre']//a")),
            tags=self._terms(find_all(ot, ".//div[@id='showtags']//a")),
            rating=self._parse_rating(tree),
            language=self._link(find_one(ot, ".//div[@id='showlang']//a")),
            authors=self._links(find_all(ot, ".//div[@id='showauthors']//a")),
            artists=self._links(find_all(ot, ".//div[@id='showartists']//a")),
            year=inner_text(find_one(ot, ".//div[@id='edityear']")).strip(),
            status=self._label_text(
                find_one(ot, ".//div[@id='editstatus']"), drop_newline=True
            ),
            licensed=self._label_text(find_one(ot, ".//div[@id='showlicensed']")),
            completely_translated=self._label_text(
                find_one(ot, ".//div[@id='showtranslated']")
            ),
            original_publisher=self._link(
                find_one(ot, ".//div[@id='showopublisher']//a")
            ),
            english_publisher=self._link(
                find_one(ot, ".//div[@id='showepublisher']//a")
            ),
            release_freq=self._parse_release_freq(ot),
            description=inner_text(
                find_one(tt, ".//div[@id='editdescription']")
            ).removesuffix("\n"),
            associated_names=self._parse_associated_names(tree),
            groups=self._parse_groups(tree),
        )

    def _parse_type(self, ot: HtmlElement) -> Link | None:
        """``<a>Light Novel</a> <span>JP</span>`` -> ``Light Novel JP``."""
        anchor = find_one(ot, ".//div[@id='showtype']//a")
        if anchor is None:
            return None

        name = inner_text(anchor).strip()
        origin = find_one(anchor, "following-sibling::span[1]")
        if origin is not None:
            name = f"{name} {inner_text(origin).strip()}"
        return Link(name=name, url=attr(anchor, "href"))

    @staticmethod
    def _terms(nodes: list[HtmlElement]) -> tuple[Term, ...]:
        return tuple(
            Term(
                name=inner_text(a).strip(),
                url=attr(a, "href"),
                description=attr(a, "title"),
            )
            for a in nodes
        )

    def _parse_rating(self, tree: HtmlElement) -> tuple[Rating, ...]:
        overall = inner_text(
            find_one(tree, "//h5[@class='seriesother']/span[@class='uvotes']")
        )
        ratings = [
            Rating(
                name="Overall",
                rating=overall.replace("(", "").replace(")", "").strip(),
            )
        ]

        rows = find_all(tree, "//table[@id='myrates']//tr")
        for label, tr in zip(self.RATING_LABELS, rows, strict=False):
            cells = find_all(tr, "./td")
            value = inner_text(cells[1]).strip() if len(cells) > 1 else ""
            ratings.append(Rating(name=label, rating=value))
        return tuple(ratings)

    def _label_text(
        self, node: HtmlElement | None, drop_newline: bool = False
    ) -> str:
        """Clean the value of a labelled metadata block.

        In compatibility mode one leading space is removed and then the next
        character is dropped unconditionally, which assumes the block starts
        with a line break. With ``drop_newline`` a trailing newline is also
        removed when the block's first text node ends with one.
        """
        if node is None:
            return ""

        text = inner_text(node)
        if not self._compat_label_trim:
            return text.strip()

        text = text.removeprefix(" ")[1:]
        if drop_newline and node.text is not None and node.text.endswith("\n"):
            text = text.removesuffix("\n")
        return text

    @staticmethod
    def _parse_release_freq(ot: HtmlElement) -> str:
        nodes = find_all(
            ot,
            ".//h5[@class='seriesother'][contains(text(),'Release Frequency')]"
            "/following-sibling::text()[1]",
        )
        return "".join(str(t).strip() for t in nodes)

    @staticmethod
    def _parse_associated_names(tree: HtmlElement) -> tuple[str, ...]:
        """Alternative titles, one per segment between ``<br>`` elements."""
        container = find_one(tree, "//div[@id='editassociated']")
        if container is None:
            return ()

        return tuple(
            inner_text(child)
            for child in child_nodes(container)
            if not is_line_break(child)
        )

    def _parse_groups(self, tree: HtmlElement) -> tuple[Link, ...]:
        """Translator groups in page order; nameless entries are dropped."""
        table = find_one(tree, "//ol[@class='sp_grouptable']")
        if table is None:
            return ()

        groups: list[Link] = []
        for li in find_all(table, ".//li"):
            name = attr(find_one(li, ".//span[@style='padding-left:20px;']"), "title")
            if not name:
                logger.warning("novelupdates: group entry without a name, skipped")
                continue
            groups.append(Link(name=name, url=group_url(name, self._group_slug)))
        return tuple(groups)
