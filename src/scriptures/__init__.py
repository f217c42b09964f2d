from .catalog import Book, CatalogLoadError, CatalogNotLoadedError, CatalogStore, Volume
from .mapping import Geotag, MapWidget, Marker, ReadinessPoller, RetryState, setup_markers
from .navigation import NavigationState, next_chapter, parse_fragment, previous_chapter

__all__ = [
    "Book",
    "Volume",
    "CatalogStore",
    "CatalogLoadError",
    "CatalogNotLoadedError",
    "NavigationState",
    "parse_fragment",
    "next_chapter",
    "previous_chapter",
    "Geotag",
    "Marker",
    "MapWidget",
    "ReadinessPoller",
    "RetryState",
    "setup_markers",
]
