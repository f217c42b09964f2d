"""A map widget that records and logs marker operations.

Stands in for a real mapping widget in the CLI. It can report "not ready"
for its first few checks to exercise the readiness poller.
"""

from __future__ import annotations

import logging

from scriptures.mapping import Marker

logger = logging.getLogger(__name__)


class LoggingMapWidget:
    def __init__(self, ready_after_checks: int = 0):
        self.ready_after_checks = ready_after_checks
        self.checks = 0
        self.markers: list[Marker] = []
        self.center: tuple[float, float] | None = None
        self.zoom: int | None = None
        self.fitted = False

    def is_ready(self) -> bool:
        self.checks += 1
        return self.checks > self.ready_after_checks

    def place_marker(self, marker: Marker) -> None:
        self.markers.append(marker)
        logger.info("Marker %s at (%s, %s)", marker.title, marker.latitude, marker.longitude)

    def clear_markers(self) -> None:
        self.markers = []
        self.fitted = False

    def fit_to_markers(self, markers: list[Marker]) -> None:
        lats = [m.latitude for m in markers]
        lons = [m.longitude for m in markers]
        self.center = ((min(lats) + max(lats)) / 2, (min(lons) + max(lons)) / 2)
        self.zoom = None
        self.fitted = True
        logger.info(
            "Fit bounds (%s, %s) to (%s, %s)", min(lats), min(lons), max(lats), max(lons)
        )

    def pan_to(self, latitude: float, longitude: float, zoom: int) -> None:
        self.center = (latitude, longitude)
        self.zoom = zoom
        self.fitted = False
        logger.info("Pan to (%s, %s) zoom %d", latitude, longitude, zoom)
