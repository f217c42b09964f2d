"""Map-side dataclasses and the mapping widget interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class Geotag:
    """One place reference parsed from a chapter's geotag link."""

    geotag_id: str
    place_name: str
    latitude: float
    longitude: float
    view_latitude: float
    view_longitude: float
    view_tilt: float
    view_roll: float
    view_altitude: float
    view_heading: float
    flag: str = ""  # disambiguator, e.g. "(1)" for a second place of the same name

    @property
    def label(self) -> str:
        if self.flag:
            return f"{self.place_name} {self.flag}"
        return self.place_name


@dataclass
class Marker:
    """A map pin. Identity is the exact (latitude, longitude) pair."""

    latitude: float
    longitude: float
    labels: list[str] = field(default_factory=list)  # distinct place names, in order seen

    @property
    def coordinate(self) -> tuple[float, float]:
        return self.latitude, self.longitude

    @property
    def title(self) -> str:
        return ", ".join(self.labels)

    def add_label(self, name: str) -> None:
        if name not in self.labels:
            self.labels.append(name)


@dataclass(frozen=True)
class ViewportPolicy:
    """Where the map looks after markers are committed."""

    default_latitude: float = 31.777444   # Jerusalem
    default_longitude: float = 35.234935
    default_zoom: int = 8
    single_marker_zoom: int = 10


class MapWidget(Protocol):
    """Capabilities required of the external mapping widget."""

    def is_ready(self) -> bool: ...

    def place_marker(self, marker: Marker) -> None: ...

    def clear_markers(self) -> None: ...

    def fit_to_markers(self, markers: list[Marker]) -> None: ...

    def pan_to(self, latitude: float, longitude: float, zoom: int) -> None: ...
