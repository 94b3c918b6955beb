"""Segment chain: the ordered track of a single line.

Segments are stored unordered; travel order is rebuilt on demand by
walking from the up-end station. Lines hold a few dozen stations at most,
so the repeated linear scans stay cheap and obviously correct.

Every mutation validates first and touches the backing list last, so a
rejected add or remove leaves the chain exactly as it was.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain, groupby
from typing import List, Optional, Set, Tuple

from .errors import (
    ChainIntegrityError,
    ChainTooShortError,
    DisconnectedInsertError,
    InvalidSegmentError,
    OverlengthInsertError,
    RedundantInsertError,
    StationNotFoundError,
)
from .models import Segment, Station

# A line must always keep at least this many segments
MIN_SEGMENTS = 1


@dataclass
class SegmentChain:
    """Collection of segments forming one simple path.

    Invariants after every successful mutation (when non-empty):
    exactly one up-end and one down-end station, every station touched
    by at most two segments, no duplicate segments.

    Attributes:
        line_id: Line the chain belongs to; segments of other lines are
            rejected when set
    """

    line_id: Optional[int] = None
    _segments: List[Segment] = field(default_factory=list, init=False, repr=False)

    # -- mutations ---------------------------------------------------------

    def add(self, segment: Segment) -> None:
        """Splice a segment into the chain.

        Args:
            segment: The segment to insert.

        Raises:
            InvalidSegmentError: If the segment belongs to another line.
            DisconnectedInsertError: If the segment does not touch the chain.
            RedundantInsertError: If both stations are already on the chain.
            OverlengthInsertError: If a split would leave no remainder.
        """
        if self.line_id is not None and segment.line_id != self.line_id:
            raise InvalidSegmentError(
                f"Segment of line {segment.line_id} offered to line {self.line_id}",
                up_station_id=segment.up_station.id,
                down_station_id=segment.down_station.id,
                distance=segment.distance,
            )

        if self.is_empty():
            self._segments.append(segment)
            return

        has_up = self.contains_station(segment.up_station)
        has_down = self.contains_station(segment.down_station)

        if not has_up and not has_down:
            raise DisconnectedInsertError(
                "Segment touches no station of the line",
                up_station_id=segment.up_station.id,
                down_station_id=segment.down_station.id,
            )
        if has_up and has_down:
            raise RedundantInsertError(
                "Both stations are already on the line",
                up_station_id=segment.up_station.id,
                down_station_id=segment.down_station.id,
            )

        if segment.has_same_down(self.up_end_station()):
            self._segments.insert(0, segment)
            return
        if segment.has_same_up(self.down_end_station()):
            self._segments.append(segment)
            return

        self._split(segment, shares_up=has_up)

    def _split(self, segment: Segment, shares_up: bool) -> None:
        if shares_up:
            matches = [s for s in self._segments if s.has_same_up(segment.up_station)]
        else:
            matches = [
                s for s in self._segments if s.has_same_down(segment.down_station)
            ]
        if len(matches) != 1:
            raise DisconnectedInsertError(
                f"No unique segment to split ({len(matches)} candidates)",
                up_station_id=segment.up_station.id,
                down_station_id=segment.down_station.id,
            )

        matched = matches[0]
        if matched.distance <= segment.distance:
            raise OverlengthInsertError(
                f"Inserted distance {segment.distance} must be shorter than "
                f"the split segment ({matched.distance})",
                requested_distance=segment.distance,
                available_distance=matched.distance,
            )

        remainder = matched.distance - segment.distance
        if shares_up:
            replacement = [
                segment,
                Segment(
                    matched.line_id, segment.down_station, matched.down_station, remainder
                ),
            ]
        else:
            replacement = [
                Segment(
                    matched.line_id, matched.up_station, segment.up_station, remainder
                ),
                segment,
            ]

        index = self._segments.index(matched)
        self._segments[index : index + 1] = replacement

    def remove(self, station: Station) -> None:
        """Take a station off the chain.

        An end station drops its only segment; an interior station merges
        its two segments into one spanning both.

        Args:
            station: The station to remove.

        Raises:
            ChainTooShortError: If only one segment remains.
            StationNotFoundError: If the station is not on the chain.
        """
        if self.size() <= MIN_SEGMENTS:
            raise ChainTooShortError(
                "A line must keep at least one segment",
                segment_count=self.size(),
            )
        if not self.contains_station(station):
            raise StationNotFoundError(
                f"Station {station.id} is not on the line",
                station_id=station.id,
            )

        if station == self.up_end_station():
            self._segments.remove(self._segment_from(station))
        elif station == self.down_end_station():
            self._segments.remove(self._segment_to(station))
        else:
            before = self._segment_to(station)
            after = self._segment_from(station)
            merged = Segment(
                before.line_id,
                before.up_station,
                after.down_station,
                before.distance + after.distance,
            )
            self._segments[:] = [
                merged if s == before else s for s in self._segments if s != after
            ]

    # -- queries -----------------------------------------------------------

    def size(self) -> int:
        return len(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def is_empty(self) -> bool:
        return not self._segments

    @property
    def segments(self) -> Tuple[Segment, ...]:
        """Unordered snapshot of the stored segments."""
        return tuple(self._segments)

    def contains_station(self, station: Station) -> bool:
        return any(segment.has_station(station) for segment in self._segments)

    def has_all_stations_of(self, segment: Segment) -> bool:
        """Check if both endpoints of a segment are already on the chain."""
        return self.contains_station(segment.up_station) and self.contains_station(
            segment.down_station
        )

    def up_end_station(self) -> Station:
        """Return the station that starts the line.

        Raises:
            StationNotFoundError: If the chain is empty.
            ChainIntegrityError: If the chain has no single up end.
        """
        ups = {segment.up_station for segment in self._segments}
        downs = {segment.down_station for segment in self._segments}
        return self._single_terminus(ups - downs, "up")

    def down_end_station(self) -> Station:
        """Return the station that ends the line.

        Raises:
            StationNotFoundError: If the chain is empty.
            ChainIntegrityError: If the chain has no single down end.
        """
        ups = {segment.up_station for segment in self._segments}
        downs = {segment.down_station for segment in self._segments}
        return self._single_terminus(downs - ups, "down")

    def _single_terminus(self, candidates: Set[Station], end: str) -> Station:
        if self.is_empty():
            raise StationNotFoundError(f"An empty line has no {end}-end station")
        if len(candidates) != 1:
            raise ChainIntegrityError(
                f"Expected one {end}-end station, found {len(candidates)}",
                segment_count=self.size(),
            )
        return next(iter(candidates))

    def ordered_segments(self) -> Tuple[Segment, ...]:
        """Return segments in up-to-down travel order.

        Raises:
            ChainIntegrityError: If the walk does not visit every segment.
        """
        if self.is_empty():
            return ()

        ordered: List[Segment] = []
        current = self.up_end_station()
        while len(ordered) < self.size():
            following = self._find_segment_from(current)
            if following is None:
                break
            ordered.append(following)
            current = following.down_station

        if len(ordered) != self.size():
            raise ChainIntegrityError(
                f"Walk reached {len(ordered)} of {self.size()} segments",
                segment_count=self.size(),
            )
        return tuple(ordered)

    def ordered_stations(self) -> Tuple[Station, ...]:
        """Return stations in up-to-down travel order."""
        endpoints = chain.from_iterable(s.endpoints() for s in self.ordered_segments())
        return tuple(station for station, _ in groupby(endpoints))

    def station_names(self) -> List[str]:
        return [station.name for station in self.ordered_stations()]

    def total_distance(self) -> int:
        return sum(segment.distance for segment in self.ordered_segments())

    # -- helpers -----------------------------------------------------------

    def _find_segment_from(self, station: Station) -> Optional[Segment]:
        return next((s for s in self._segments if s.has_same_up(station)), None)

    def _segment_from(self, station: Station) -> Segment:
        segment = self._find_segment_from(station)
        if segment is None:
            raise ChainIntegrityError(
                f"No segment leaves station {station.id}",
                segment_count=self.size(),
            )
        return segment

    def _segment_to(self, station: Station) -> Segment:
        segment = next((s for s in self._segments if s.has_same_down(station)), None)
        if segment is None:
            raise ChainIntegrityError(
                f"No segment reaches station {station.id}",
                segment_count=self.size(),
            )
        return segment
