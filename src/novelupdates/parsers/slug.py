"""
Identifier helpers: series slugs and translator group URLs.
"""

import re

from novelupdates.schemas import GroupSlugMode

GROUP_BASE_URL = "https://www.novelupdates.com/group/"

_SERIES_ID_RE = re.compile(r"/series/([a-z0-9-]+)/$")
_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)
_NON_SLUG_RE = re.compile(r"[^\w\s-]", re.ASCII)
_SPACE_RE = re.compile(r"\s+")


def extract_series_id(url: str) -> str:
    """Return the series slug of a series URL.

    >>> extract_series_id("https://www.novelupdates.com/series/mushoku-tensei/")
    'mushoku-tensei'

    Args:
        url: Series page URL. Only URLs ending in ``/series/<slug>/`` match.

    Returns:
        The slug, or an empty string when the URL does not match.
    """
    m = _SERIES_ID_RE.search(url)
    return m.group(1) if m else ""


def group_slug(name: str, mode: GroupSlugMode = "compat") -> str:
    """Derive the URL slug of a translator group from its display name.

    ``"compat"`` keeps the site client's historical derivation, which deletes
    word separators (``"Fans Translations"`` -> ``"fanstranslations"``).
    This usually does not match the real group page.

    ``"hyphenated"`` joins words with hyphens
    (``"Fans Translations"`` -> ``"fans-translations"``).
    """
    if mode == "hyphenated":
        slug = _NON_SLUG_RE.sub("", name.lower()).strip()
        return _SPACE_RE.sub("-", slug)

    slug = name.replace(" ", "-").lower().replace("-", "")
    return _NON_WORD_RE.sub("", slug)


def group_url(name: str, mode: GroupSlugMode = "compat") -> str:
    """Build the group page URL for a translator group name."""
    return GROUP_BASE_URL + group_slug(name, mode)
