"""ScriptureBrowser: the entry points a host page (or the CLI) drives.

- ``initialize(on_ready)``: load the catalog once
- ``handle_fragment_change()``: route the current fragment
- ``show_location(...)``: re-centre the map on a clicked geotag
"""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Callable

from scriptures.catalog import CatalogLoadError, CatalogStore, fetch_json_async
from scriptures.mapping import (
    MapWidget,
    ReadinessPoller,
    Scheduler,
    extract_geotags,
    setup_markers,
    zoom_for_altitude,
)
from scriptures.navigation import NavigationState

from .chapter import fetch_chapter_markup
from .config import BrowserConfig
from .content import ChapterView
from .router import ChapterFetcher, Renderer, Router

logger = logging.getLogger(__name__)


class ScriptureBrowser:
    def __init__(
        self,
        render: Renderer,
        map_widget: MapWidget,
        fragment_source: Callable[[], str],
        config: BrowserConfig | None = None,
        catalog: CatalogStore | None = None,
        fetch_chapter: ChapterFetcher | None = None,
        scheduler: Scheduler | None = None,
    ):
        self.config = config or BrowserConfig()
        endpoints = self.config.endpoints

        self.catalog = catalog or CatalogStore(
            endpoints.books_url,
            endpoints.volumes_url,
            fetch=functools.partial(fetch_json_async, timeout=endpoints.timeout),
        )
        self.map_widget = map_widget
        self._fragment_source = fragment_source
        self.markers = []

        self.poller = ReadinessPoller(
            map_widget.is_ready,
            scheduler or asyncio.get_running_loop,
            initial=self.config.map.retry,
        )
        self.router = Router(
            self.catalog,
            render,
            fetch_chapter or functools.partial(fetch_chapter_markup, endpoints),
            on_chapter_rendered=self._on_chapter_rendered,
        )

    async def initialize(
        self,
        on_ready: Callable[[], None] | None = None,
        on_error: Callable[[Exception], None] | None = None,
    ) -> bool:
        """Load the catalog, then call *on_ready*.

        On failure *on_error* receives the ``CatalogLoadError``; without an
        *on_error* the error propagates.
        """
        try:
            await self.catalog.load()
        except CatalogLoadError as exc:
            if on_error is None:
                raise
            on_error(exc)
            return False

        if on_ready is not None:
            on_ready()
        return True

    async def handle_fragment_change(self) -> NavigationState:
        # Markers queued for the previous view must not land on the new one
        self.poller.cancel()
        return await self.router.navigate(self._fragment_source())

    def _on_chapter_rendered(self, view: ChapterView) -> None:
        markup = view.markup

        def place():
            self.markers = setup_markers(
                self.map_widget, extract_geotags(markup), self.config.map.viewport,
            )
            logger.debug("Placed %d markers for %s", len(self.markers), view.title)

        self.poller.poll(place)

    def show_location(
        self,
        geotag_id,
        place_name: str,
        latitude: float,
        longitude: float,
        view_latitude: float,
        view_longitude: float,
        view_tilt: float,
        view_roll: float,
        view_altitude: float,
        view_heading: float,
    ) -> bool:
        """Centre the map on a clicked geotag. Ignored while the map is loading."""
        if not self.map_widget.is_ready():
            logger.debug("Map not ready; ignoring click on %s", place_name)
            return False

        zoom = zoom_for_altitude(
            float(view_altitude), self.config.map.viewport.single_marker_zoom,
        )
        self.map_widget.pan_to(float(latitude), float(longitude), zoom)
        return True
