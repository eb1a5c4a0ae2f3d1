"""
HTML extractors for NovelUpdates pages.
"""

__all__ = [
    "BaseParser",
    "SearchParser",
    "SeriesParser",
    "extract_series_id",
    "group_url",
]

from .base import BaseParser
from .search import SearchParser
from .series import SeriesParser
from .slug import extract_series_id, group_url
