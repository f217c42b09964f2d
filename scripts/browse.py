#!/usr/bin/env python3
"""Browse the scriptures from the terminal.

Loads the book and volume catalogs, then routes each fragment in turn and
prints the resulting view and the map markers placed for it.

Usage:
    uv run python scripts/browse.py                     # home: volumes and books
    uv run python scripts/browse.py -f "#1:105:3"       # a chapter
    uv run python scripts/browse.py -f "#2" -f "#2:140" # several fragments in order
    uv run python scripts/browse.py -f "#1:101:1" -v    # debug logging

Configuration:
    Edit scripts/configs/browse.py (endpoints, map defaults, polling limits).
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add src/ to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from configs.browse import MAP_READY_AFTER, config  # noqa: E402
from configs.common import LOG_DATEFMT, LOG_FORMAT, describe_fragment  # noqa: E402

from browser import LoggingMapWidget, ScriptureBrowser, render_text  # noqa: E402
from scriptures.navigation import ChapterState  # noqa: E402

parser = argparse.ArgumentParser(description="Scriptures browser: fragment to view")
parser.add_argument(
    "--fragment", "-f", action="append", default=None,
    help="URL fragment to navigate to, e.g. '#1:101:1' (repeatable; default: home)",
)
parser.add_argument(
    "--verbose", "-v", action="store_true",
    help="Enable debug logging",
)
args = parser.parse_args()

logging.basicConfig(
    level=logging.DEBUG if args.verbose else logging.INFO,
    format=LOG_FORMAT,
    datefmt=LOG_DATEFMT,
)
# requests/urllib3 connection chatter is not useful here
logging.getLogger("urllib3").setLevel(logging.WARNING)

fragments = args.fragment or ["#"]


async def main() -> int:
    current = {"fragment": ""}
    widget = LoggingMapWidget(ready_after_checks=MAP_READY_AFTER)

    def render(view):
        print(render_text(view))

    browser = ScriptureBrowser(
        render=render,
        map_widget=widget,
        fragment_source=lambda: current["fragment"],
        config=config,
    )

    print("=" * 60)
    print(f"Catalog: {config.endpoints.base_url}")
    print("=" * 60)

    def on_error(exc):
        print(f"ERROR: {exc}")

    if not await browser.initialize(on_error=on_error):
        return 1

    volumes = browser.catalog.volumes
    print(f"Loaded {len(volumes)} volumes, "
          f"{sum(len(v.books) for v in volumes)} books\n")

    for fragment in fragments:
        current["fragment"] = describe_fragment(fragment)
        print("=" * 60)
        print(f"Navigating to {current['fragment']}")
        print("=" * 60)

        state = await browser.handle_fragment_change()

        # Let the readiness poller run its retries before moving on
        while browser.poller.pending:
            await asyncio.sleep(0.1)

        if isinstance(state, ChapterState):
            print(f"Markers ({len(browser.markers)}):")
            for marker in browser.markers:
                print(f"  {marker.title} ({marker.latitude}, {marker.longitude})")
            print()

    return 0


sys.exit(asyncio.run(main()))
