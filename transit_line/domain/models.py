"""Immutable domain models for transit lines.

Station and Segment are frozen dataclasses with slots. They have no
external dependencies; a Segment refers to its line by id only, which
keeps the line -> segments ownership one-way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .errors import InvalidSegmentError


@dataclass(frozen=True, slots=True)
class Station:
    """A station referenced by transit lines.

    Identity is the id; two stations with the same id are equal whatever
    their display names.

    Attributes:
        id: Stable unique station identifier
        name: Human-readable station name
    """

    id: int
    name: str = field(default="", compare=False)


@dataclass(frozen=True, slots=True)
class Segment:
    """One directed stretch of track between two stations of a line.

    Segments compare equal on (line_id, up_station, down_station) so a
    chain can spot duplicate or conflicting segments; distance does not
    take part in equality.

    Attributes:
        line_id: Id of the line the segment belongs to
        up_station: Station at the up end of the segment
        down_station: Station at the down end of the segment
        distance: Positive integer length of the segment
    """

    line_id: int
    up_station: Station
    down_station: Station
    distance: int = field(compare=False)

    def __post_init__(self) -> None:
        """Reject degenerate segments."""
        if isinstance(self.distance, bool) or not isinstance(self.distance, int):
            raise InvalidSegmentError(
                f"Distance must be an integer, got {self.distance!r}",
                up_station_id=self.up_station.id,
                down_station_id=self.down_station.id,
                distance=self.distance,
            )
        if self.distance <= 0:
            raise InvalidSegmentError(
                f"Distance must be positive, got {self.distance}",
                up_station_id=self.up_station.id,
                down_station_id=self.down_station.id,
                distance=self.distance,
            )
        if self.up_station == self.down_station:
            raise InvalidSegmentError(
                f"Up and down stations must differ, got {self.up_station.id} twice",
                up_station_id=self.up_station.id,
                down_station_id=self.down_station.id,
                distance=self.distance,
            )

    def has_same_up(self, station: Station) -> bool:
        return self.up_station == station

    def has_same_down(self, station: Station) -> bool:
        return self.down_station == station

    def has_station(self, station: Station) -> bool:
        return self.up_station == station or self.down_station == station

    def endpoints(self) -> Tuple[Station, Station]:
        """Return (up_station, down_station)."""
        return self.up_station, self.down_station


@dataclass(frozen=True, slots=True)
class LineView:
    """Read-only snapshot of a line for presentation layers.

    Attributes:
        line_id: Line identifier
        name: Line name
        color: Line color
        stations: Stations in up-to-down order
        segments: Segments in up-to-down order
        total_distance: Sum of segment distances
    """

    line_id: int
    name: str
    color: str
    stations: Tuple[Station, ...] = field(default_factory=tuple)
    segments: Tuple[Segment, ...] = field(default_factory=tuple)
    total_distance: int = 0

    @property
    def station_names(self) -> Tuple[str, ...]:
        """Return station names in travel order."""
        return tuple(station.name for station in self.stations)

    @property
    def num_stations(self) -> int:
        return len(self.stations)

    @property
    def is_empty(self) -> bool:
        """Check if the line has no segment yet."""
        return len(self.segments) == 0
