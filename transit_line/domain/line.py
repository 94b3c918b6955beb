"""Line entity owning its segment chain by value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .models import LineView, Segment, Station
from .segment_chain import SegmentChain


@dataclass(eq=False)
class Line:
    """A named transit line and its track.

    Lines are identified by id. The chain is created empty with the line
    and is never shared with another line.

    Attributes:
        id: Line identifier
        name: Unique line name
        color: Display color
    """

    id: int
    name: str
    color: str
    segments: SegmentChain = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.segments = SegmentChain(line_id=self.id)

    @classmethod
    def create(
        cls,
        id: int,
        name: str,
        color: str,
        up_station: Station,
        down_station: Station,
        distance: int,
    ) -> Line:
        """Build a line seeded with its first segment."""
        line = cls(id=id, name=name, color=color)
        line.add_segment(up_station, down_station, distance)
        return line

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def add_segment(
        self, up_station: Station, down_station: Station, distance: int
    ) -> Segment:
        """Splice a new segment of this line into the track.

        Raises:
            InvalidSegmentError, DisconnectedInsertError, RedundantInsertError,
            OverlengthInsertError: See SegmentChain.add.
        """
        segment = Segment(self.id, up_station, down_station, distance)
        self.segments.add(segment)
        return segment

    def remove_station(self, station: Station) -> None:
        """Take a station off the line (see SegmentChain.remove)."""
        self.segments.remove(station)

    def update(self, name: Optional[str] = None, color: Optional[str] = None) -> None:
        """Change only the attributes that were supplied."""
        if name is not None:
            self.name = name
        if color is not None:
            self.color = color

    def stations(self) -> Tuple[Station, ...]:
        return self.segments.ordered_stations()

    def station_names(self) -> List[str]:
        return self.segments.station_names()

    def total_distance(self) -> int:
        return self.segments.total_distance()

    def has_all_stations_of(self, up_station: Station, down_station: Station) -> bool:
        chain = self.segments
        return chain.contains_station(up_station) and chain.contains_station(down_station)

    def view(self) -> LineView:
        """Return an immutable snapshot for presentation."""
        ordered = self.segments.ordered_segments()
        return LineView(
            line_id=self.id,
            name=self.name,
            color=self.color,
            stations=self.segments.ordered_stations(),
            segments=ordered,
            total_distance=sum(segment.distance for segment in ordered),
        )
