"""Browse CLI configuration."""

from .common import BrowserConfig, EndpointConfig, MapConfig, RetryState, ViewportPolicy

# --- Browse-specific settings ---
INCLUDE_JST = False       # include Joseph Smith Translation passages
MAP_READY_AFTER = 2       # simulated map: readiness checks that fail before it loads

# --- Browser configuration (composable) ---
config = BrowserConfig(
    endpoints=EndpointConfig(
        # base_url="http://localhost:8000/mapscrip/",  # or set SCRIPTURES_BASE_URL
        jst_option="jst=JST" if INCLUDE_JST else "",
        timeout=30,
    ),
    map=MapConfig(
        viewport=ViewportPolicy(single_marker_zoom=10),
        retry=RetryState(delay_ms=500, ceiling_ms=5000),
    ),
)
