"""Shared fixtures and path setup for the test suite."""

import sys
from pathlib import Path

import pytest

# Mirror the sys.path setup used by the scripts
_APP = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_APP / "src"))
sys.path.insert(0, str(_APP / "scripts"))

from scriptures.catalog import CatalogStore  # noqa: E402


def _book(book_id, name, chapters, toc=None):
    return {
        "id": book_id,
        "numChapters": chapters,
        "fullName": name,
        "tocName": toc or name,
        "gridName": (toc or name)[:5],
    }


# Ids jump between volumes (5 → 6 is contiguous, 7 → 10 is not) and include
# single-chapter and chapterless books.
BOOK_RECORDS = {
    "1": _book(1, "Genesis", 50, "Gen."),
    "2": _book(2, "Exodus", 40, "Ex."),
    "3": _book(3, "Obadiah", 1, "Obad."),
    "4": _book(4, "Title Page", 0, "Title"),
    "5": _book(5, "Deuteronomy", 10, "Deut."),
    "6": _book(6, "Matthew", 28, "Matt."),
    "7": _book(7, "Jude", 1, "Jude"),
    "10": _book(10, "Introduction", 0, "Intro."),
    "11": _book(11, "Sections", 3, "D&C"),
}

VOLUME_RECORDS = [
    {"id": 1, "minBookId": 1, "maxBookId": 5, "fullName": "The Old Testament"},
    {"id": 2, "minBookId": 6, "maxBookId": 7, "fullName": "The New Testament"},
    {"id": 3, "minBookId": 10, "maxBookId": 11, "fullName": "Doctrine and Covenants"},
]


@pytest.fixture
def catalog():
    """A loaded catalog built from the records above."""
    return CatalogStore.from_records(BOOK_RECORDS, VOLUME_RECORDS)


class FakeHandle:
    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Records call_later requests; ``run_next()`` fires the oldest one."""

    def __init__(self):
        self.calls = []  # [(delay_seconds, callback, args, handle)]

    def call_later(self, delay, callback, *args):
        handle = FakeHandle()
        self.calls.append((delay, callback, args, handle))
        return handle

    @property
    def delays_ms(self):
        return [round(delay * 1000) for delay, *_ in self.calls]

    def run_next(self):
        for delay, callback, args, handle in self.calls:
            if not handle.cancelled and not getattr(handle, "fired", False):
                handle.fired = True
                return callback(*args)
        raise AssertionError("No pending scheduled call")

    def run_all(self):
        while any(
            not h.cancelled and not getattr(h, "fired", False)
            for *_, h in self.calls
        ):
            self.run_next()


@pytest.fixture
def scheduler():
    return FakeScheduler()


class RecordingMapWidget:
    """MapWidget double that records every call in order."""

    def __init__(self, ready=True):
        self.ready = ready
        self.calls = []
        self.markers = []

    def is_ready(self):
        return self.ready

    def place_marker(self, marker):
        self.calls.append(("place", marker.coordinate))
        self.markers.append(marker)

    def clear_markers(self):
        self.calls.append(("clear",))
        self.markers = []

    def fit_to_markers(self, markers):
        self.calls.append(("fit", len(markers)))

    def pan_to(self, latitude, longitude, zoom):
        self.calls.append(("pan", latitude, longitude, zoom))


@pytest.fixture
def map_widget():
    return RecordingMapWidget()


def geotag_link(geotag_id, name, lat, lon, flag="", altitude=5000):
    """Markup for one geotag link as the chapter service emits it."""
    return (
        f'<a href="javascript:void(0);" onclick="showLocation({geotag_id},'
        f"'{name}',{lat},{lon},{lat},{lon},0.0,0.0,{altitude},0.0,'{flag}')\">{name}</a>"
    )


@pytest.fixture
def make_geotag_link():
    return geotag_link
