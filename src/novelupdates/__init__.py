from .version import __version__ as __version__

__title__ = "novelupdates"
__description__ = "A scraping client for the NovelUpdates web catalog."
__license__ = "Apache-2.0"

__all__ = [
    "NovelUpdatesClient",
    "NovelUpdatesError",
    "EncodingError",
    "ParseError",
    "TransportError",
    "SearchRecord",
    "SeriesRecord",
    "fetch_series",
    "fetch_series_json",
    "search",
    "search_json",
    "to_json",
]

from .api import fetch_series, fetch_series_json, search, search_json
from .client import NovelUpdatesClient
from .errors import EncodingError, NovelUpdatesError, ParseError, TransportError
from .schemas import SearchRecord, SeriesRecord
from .serialization import to_json
