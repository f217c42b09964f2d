"""Merge geotags into markers and commit them to the map."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .types import Geotag, MapWidget, Marker, ViewportPolicy


def aggregate_markers(geotags: Iterable[Geotag]) -> list[Marker]:
    """One marker per distinct coordinate; names at a shared coordinate merge.

    Coordinates compare exactly (after float parsing). Marker order follows
    the first appearance of each coordinate.
    """
    by_coordinate: dict[tuple[float, float], Marker] = {}
    for geotag in geotags:
        key = (geotag.latitude, geotag.longitude)
        marker = by_coordinate.get(key)
        if marker is None:
            marker = Marker(latitude=geotag.latitude, longitude=geotag.longitude)
            by_coordinate[key] = marker
        marker.add_label(geotag.label)
    return list(by_coordinate.values())


# Approximate camera altitude (metres) that shows the whole earth at zoom 0
ZOOM_REFERENCE_ALTITUDE = 45_000_000
MIN_ZOOM = 1
MAX_ZOOM = 20


def zoom_for_altitude(altitude: float, fallback: int) -> int:
    """Map a geotag camera altitude to a map zoom level.

    Each zoom step halves the visible span, so zoom is log2 of the altitude
    ratio. Non-positive altitudes give *fallback*.
    """
    if not altitude > 0:
        return fallback
    zoom = round(math.log2(ZOOM_REFERENCE_ALTITUDE / altitude))
    return max(MIN_ZOOM, min(MAX_ZOOM, zoom))


def apply_viewport(
    widget: MapWidget, markers: list[Marker], policy: ViewportPolicy
) -> None:
    if not markers:
        widget.pan_to(policy.default_latitude, policy.default_longitude, policy.default_zoom)
    elif len(markers) == 1:
        widget.pan_to(markers[0].latitude, markers[0].longitude, policy.single_marker_zoom)
    else:
        widget.fit_to_markers(markers)


def setup_markers(
    widget: MapWidget,
    geotags: Iterable[Geotag],
    policy: ViewportPolicy | None = None,
) -> list[Marker]:
    """Replace every marker on *widget* with those for *geotags*.

    Returns the committed markers.
    """
    policy = policy or ViewportPolicy()
    widget.clear_markers()
    markers = aggregate_markers(geotags)
    for marker in markers:
        widget.place_marker(marker)
    apply_viewport(widget, markers, policy)
    return markers
