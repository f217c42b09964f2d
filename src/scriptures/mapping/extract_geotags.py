"""Pull geotag records out of chapter markup.

Geotag links carry their parameters positionally in an ``onclick``
attribute::

    showLocation(id,'Place',lat,lon,viewLat,viewLon,tilt,roll,altitude,heading,'flag')

Elements whose attribute does not fit that shape are skipped.
"""

from __future__ import annotations

import logging
import math
import re

from bs4 import BeautifulSoup

from .types import Geotag

logger = logging.getLogger(__name__)

_NUM = r"\s*([^,'()]*?)\s*"

GEOTAG_PATTERN = re.compile(
    r"showLocation\(" + _NUM + r",\s*'(.*)'\s*,"
    + ",".join([_NUM] * 8)
    + r",\s*'([^']*)'\s*\)"
)


def parse_geotag(call: str) -> Geotag | None:
    """Parse one ``showLocation(...)`` call; None if it is malformed."""
    match = GEOTAG_PATTERN.search(call)
    if match is None:
        return None

    geotag_id, place_name, *numbers, flag = match.groups()
    try:
        (lat, lon, view_lat, view_lon,
         tilt, roll, altitude, heading) = (float(n) for n in numbers)
    except ValueError:
        return None
    # Coordinates must be finite
    if not all(math.isfinite(v) for v in (lat, lon, view_lat, view_lon,
                                          tilt, roll, altitude, heading)):
        return None

    return Geotag(
        geotag_id=geotag_id,
        place_name=place_name,
        latitude=lat,
        longitude=lon,
        view_latitude=view_lat,
        view_longitude=view_lon,
        view_tilt=tilt,
        view_roll=roll,
        view_altitude=altitude,
        view_heading=heading,
        flag=flag,
    )


def extract_geotags(markup: str) -> list[Geotag]:
    """Return the geotags linked from *markup*, in document order."""
    soup = BeautifulSoup(markup, "html.parser")

    geotags: list[Geotag] = []
    for element in soup.find_all(onclick=True):
        onclick = element["onclick"]
        if "showLocation" not in onclick:
            continue
        geotag = parse_geotag(onclick)
        if geotag is None:
            logger.debug("Skipping malformed geotag link: %r", onclick[:120])
            continue
        geotags.append(geotag)
    return geotags
