from .app import ScriptureBrowser
from .config import BrowserConfig, EndpointConfig, MapConfig, get_base_url
from .content import (
    BookEntry,
    ChapterPickerView,
    ChapterView,
    NavLink,
    ViewContent,
    VolumeEntry,
    VolumeGridView,
)
from .map_widget import LoggingMapWidget
from .render_text import render_text
from .router import Router

__all__ = [
    "ScriptureBrowser",
    "Router",
    "BrowserConfig",
    "EndpointConfig",
    "MapConfig",
    "get_base_url",
    "ViewContent",
    "VolumeGridView",
    "VolumeEntry",
    "BookEntry",
    "ChapterPickerView",
    "ChapterView",
    "NavLink",
    "LoggingMapWidget",
    "render_text",
]
