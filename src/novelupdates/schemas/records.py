"""
Immutable record types produced by the NovelUpdates extractors.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Link:
    """A named hyperlink found on a page.

    Attributes:
        name: Visible text of the link.
        url: Target URL as written in the page.
    """

    name: str
    url: str


@dataclass(frozen=True, slots=True)
class Term:
    """A genre or tag entry of a series page.

    Attributes:
        name: Visible text of the term.
        url: URL of the term's listing page.
        description: Tooltip text explaining the term.
    """

    name: str
    url: str
    description: str


@dataclass(frozen=True, slots=True)
class Rating:
    """One row of the user ratings block.

    Attributes:
        name: ``"Overall"`` or the star bucket (``"5"`` down to ``"1"``).
        rating: Rating text as shown on the page.
    """

    name: str
    rating: str


@dataclass(frozen=True, slots=True)
class SearchRecord:
    """One result card of a search results page.

    Attributes:
        title: Series title.
        id: Series slug derived from ``url``.
        url: Absolute URL to the series page.
        image: Cover URL, or an empty string when the placeholder is shown.
        search_rating: Numeric rating without whitespace or parentheses.
        description: Short and long blurb joined by a newline.
        releases: Release count stat.
        update_freq: Update frequency stat.
        nu_readers: Reader count stat.
        nu_reviews: Review count stat.
        last_updated: Last update stat.
        genres: Genre links in page order.
    """

    title: str
    id: str
    url: str
    image: str
    search_rating: str
    description: str
    releases: str
    update_freq: str
    nu_readers: str
    nu_reviews: str
    last_updated: str
    genres: tuple[Link, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class SeriesRecord:
    """Metadata of a series detail page.

    Attributes:
        title: Series title.
        image: Cover URL.
        type: Novel type (e.g. "Light Novel JP"), or None if not shown.
        genre: Genre terms in page order.
        tags: Tag terms in page order.
        rating: Overall rating followed by the 5..1 star buckets.
        language: Original language link, or None if not shown.
        authors: Author links.
        artists: Artist links.
        year: Year of first publication.
        status: Status in country of origin.
        licensed: Whether the series is licensed in English.
        completely_translated: Whether the English translation is complete.
        original_publisher: Original publisher link, or None.
        english_publisher: English publisher link, or None.
        release_freq: Release frequency text.
        description: Long description.
        associated_names: Alternative titles.
        groups: Translator groups.
    """

    title: str
    image: str
    type: Link | None
    genre: tuple[Term, ...]
    tags: tuple[Term, ...]
    rating: tuple[Rating, ...]
    language: Link | None
    authors: tuple[Link, ...]
    artists: tuple[Link, ...]
    year: str
    status: str
    licensed: str
    completely_translated: str
    original_publisher: Link | None
    english_publisher: Link | None
    release_freq: str
    description: str
    associated_names: tuple[str, ...]
    groups: tuple[Link, ...]
