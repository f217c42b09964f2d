from .aggregate_markers import aggregate_markers, apply_viewport, setup_markers, zoom_for_altitude
from .extract_geotags import GEOTAG_PATTERN, extract_geotags, parse_geotag
from .readiness import CEILING_MS, INITIAL_DELAY_MS, ReadinessPoller, RetryState, Scheduler
from .types import Geotag, MapWidget, Marker, ViewportPolicy

__all__ = [
    "Geotag",
    "Marker",
    "MapWidget",
    "ViewportPolicy",
    "extract_geotags",
    "parse_geotag",
    "GEOTAG_PATTERN",
    "aggregate_markers",
    "apply_viewport",
    "setup_markers",
    "zoom_for_altitude",
    "ReadinessPoller",
    "RetryState",
    "Scheduler",
    "INITIAL_DELAY_MS",
    "CEILING_MS",
]
