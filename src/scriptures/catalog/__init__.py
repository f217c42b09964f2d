from .fetch_json import FetchError, fetch_json, fetch_json_async, fetch_text, fetch_text_async
from .store import CatalogLoadError, CatalogNotLoadedError, CatalogStore, derive_volume_books
from .types import Book, Volume

__all__ = [
    "Book",
    "Volume",
    "CatalogStore",
    "CatalogLoadError",
    "CatalogNotLoadedError",
    "derive_volume_books",
    "FetchError",
    "fetch_json",
    "fetch_json_async",
    "fetch_text",
    "fetch_text_async",
]
