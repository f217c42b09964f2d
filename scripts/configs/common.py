"""Shared script configuration: path setup and small helpers."""

import sys
from pathlib import Path

# Add src/ to Python path (needed before importing browser.* dataclasses)
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "src"))

from browser import BrowserConfig, EndpointConfig, MapConfig  # noqa: E402, F401
from scriptures.mapping import RetryState, ViewportPolicy  # noqa: E402, F401

# --- Shared defaults ---
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def describe_fragment(fragment):
    """Normalise a fragment for display ("" → "#")."""
    if not fragment.startswith("#"):
        fragment = "#" + fragment
    return fragment
