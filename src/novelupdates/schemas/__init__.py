"""
Data contracts and type definitions.
"""

__all__ = [
    "ClientConfig",
    "FetcherConfig",
    "GroupSlugMode",
    "ParserConfig",
    "SessionConfig",
    "Link",
    "Rating",
    "SearchRecord",
    "SeriesRecord",
    "Term",
]

from .config import (
    ClientConfig,
    FetcherConfig,
    GroupSlugMode,
    ParserConfig,
    SessionConfig,
)
from .records import (
    Link,
    Rating,
    SearchRecord,
    SeriesRecord,
    Term,
)
