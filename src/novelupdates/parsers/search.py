"""
Extractor for the search results page (``/?s=<keyword>``).
"""

from __future__ import annotations

import logging
import re

from lxml.html import HtmlElement

from novelupdates.errors import ParseError
from novelupdates.schemas import SearchRecord

from .base import BaseParser
from .dom import attr, direct_texts, find_all, find_one, inner_text, parse_html
from .slug import extract_series_id

logger = logging.getLogger(__name__)


class SearchParser(BaseParser):
    """Turns a search results page into an ordered list of SearchRecords."""

    PLACEHOLDER_IMAGE_SUFFIX = "noimagemid.jpg"

    # order of the ``span.ss_desk`` entries inside ``div.search_stats``
    STATS_FIELDS = (
        "releases",
        "update_freq",
        "nu_readers",
        "nu_reviews",
        "last_updated",
    )

    _RATING_JUNK_RE = re.compile(r"[\s()]")

    def parse(self, raw_html: str) -> list[SearchRecord]:
        """Parse every result card on the page.

        A page without result cards is valid and yields an empty list.

        Raises:
            ParseError: If a card lacks its body, title link, or any of the
                five stats entries.
        """
        tree = parse_html(raw_html)

        results = [
            self._parse_card(card, idx)
            for idx, card in enumerate(
                find_all(tree, "//div[@class='search_main_box_nu']")
            )
        ]
        logger.debug("novelupdates: parsed %d search results", len(results))
        return results

    def _parse_card(self, card: HtmlElement, idx: int) -> SearchRecord:
        body = find_one(card, ".//div[@class='search_body_nu']")
        if body is None:
            raise ParseError(
                f"search card {idx}: missing search_body_nu",
                anchor="search_body_nu",
            )
        image_body = find_one(card, ".//div[@class='search_img_nu']")

        title_link = find_one(body, ".//div[@class='search_title']/a")
        if title_link is None:
            raise ParseError(
                f"search card {idx}: missing search_title/a",
                anchor="search_title/a",
            )
        title = inner_text(title_link).strip()
        url = attr(title_link, "href")

        image = attr(find_one(image_body, ".//img"), "src")
        if image.endswith(self.PLACEHOLDER_IMAGE_SUFFIX):
            image = ""

        stats = self._parse_stats(body, idx)

        genres = self._links(find_all(body, ".//div[@class='search_genre']/a"))

        return SearchRecord(
            title=title,
            id=extract_series_id(url),
            url=url,
            image=image,
            search_rating=self._parse_rating(image_body),
            description=self._parse_description(body),
            releases=stats["releases"],
            update_freq=stats["update_freq"],
            nu_readers=stats["nu_readers"],
            nu_reviews=stats["nu_reviews"],
            last_updated=stats["last_updated"],
            genres=genres,
        )

    def _parse_rating(self, image_body: HtmlElement | None) -> str:
        """Rating overlay text without the star icon, e.g. ``(4.4)`` -> ``4.4``."""
        ratings = find_one(image_body, ".//div[@class='search_ratings']")
        if ratings is None:
            return ""

        star = find_one(ratings, ".//span")
        text = inner_text(ratings, exclude=[star] if star is not None else ())
        return self._RATING_JUNK_RE.sub("", text)

    @staticmethod
    def _parse_description(body: HtmlElement) -> str:
        """Join the visible blurb and the collapsed remainder.

        The collapsed part lives in ``span.testhide`` together with the
        "more" / "less" toggles and spacer paragraphs, which are left out.
        """
        short = next((s for t in direct_texts(body) if (s := t.strip())), "")

        long = ""
        more = find_one(body, ".//span[@class='testhide']")
        if more is not None:
            toggles = [
                *find_all(more, ".//span[@class='morelink list']"),
                *find_all(more, ".//p[@style='margin-top:-5px;']"),
                *find_all(more, ".//span[@class='moreurl list']"),
            ]
            long = inner_text(more, exclude=toggles).strip()

        return (short + "\n" + long).rstrip("\n")

    def _parse_stats(self, body: HtmlElement, idx: int) -> dict[str, str]:
        spans = find_all(body, ".//div[@class='search_stats']/span[@class='ss_desk']")

        stats: dict[str, str] = {}
        for i, field in enumerate(self.STATS_FIELDS):
            if i >= len(spans):
                anchor = f"search_stats/span.ss_desk[{i}]"
                raise ParseError(
                    f"search card {idx}: missing {anchor} ({field})",
                    anchor=anchor,
                )
            stats[field] = inner_text(spans[i]).strip()
        return stats
