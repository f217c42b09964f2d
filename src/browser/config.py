"""Browser configuration: endpoints, map defaults, and polling limits."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass

from scriptures.mapping import RetryState, ViewportPolicy

DEFAULT_BASE_URL = "https://scriptures.byu.edu/mapscrip/"


@functools.cache
def get_base_url() -> str:
    """Return the scriptures service base URL.

    Resolution order:
    1. ``SCRIPTURES_BASE_URL`` environment variable
    2. ``DEFAULT_BASE_URL``
    """
    env = os.environ.get("SCRIPTURES_BASE_URL")
    if env is None:
        return DEFAULT_BASE_URL
    env = env.strip()
    if not env:
        raise ValueError("SCRIPTURES_BASE_URL is set but empty.")
    return env if env.endswith("/") else env + "/"


@dataclass
class EndpointConfig:
    base_url: str | None = None  # None → get_base_url()
    books_path: str = "model/books.php"
    volumes_path: str = "model/volumes.php"
    chapter_path: str = "mapgetscrip.php"
    verses_option: str = "verses"  # appended to chapter queries
    jst_option: str = ""           # e.g. "jst=JST" to include JST passages
    timeout: int = 30              # request timeout in seconds

    def __post_init__(self):
        if self.base_url is None:
            self.base_url = get_base_url()

    @property
    def books_url(self) -> str:
        return self.base_url + self.books_path

    @property
    def volumes_url(self) -> str:
        return self.base_url + self.volumes_path

    def chapter_url(self, book_id: int, chapter: int) -> str:
        url = f"{self.base_url}{self.chapter_path}?book={book_id}&chap={chapter}"
        if self.verses_option:
            url += f"&{self.verses_option}"
        if self.jst_option:
            url += f"&{self.jst_option}"
        return url


@dataclass
class MapConfig:
    """Map viewport and readiness polling settings."""

    viewport: ViewportPolicy | None = None
    retry: RetryState | None = None

    def __post_init__(self):
        if self.viewport is None:
            self.viewport = ViewportPolicy()
        if self.retry is None:
            self.retry = RetryState()


@dataclass
class BrowserConfig:
    """Top-level browser configuration.

    Composes endpoint and map configs.
    """

    endpoints: EndpointConfig | None = None
    map: MapConfig | None = None

    def __post_init__(self):
        if self.endpoints is None:
            self.endpoints = EndpointConfig()
        if self.map is None:
            self.map = MapConfig()
