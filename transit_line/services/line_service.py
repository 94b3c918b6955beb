"""Line service - Orchestrates line edits on top of the repositories.

The segment chain assumes a single writer per line. This service is that
writer: it resolves ids to stations and lines, serializes every mutation
behind one lock, and hands back immutable LineView snapshots.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.errors import (
    DuplicateLineError,
    LineNotFoundError,
    StationNotFoundError,
    TransitLineError,
)
from ..domain.line import Line
from ..domain.models import LineView, Station
from ..ports.repository import LineRepositoryPort, StationRepositoryPort


@dataclass
class LineService:
    """Application service for creating and editing lines.

    Attributes:
        station_repository: Resolves station ids
        line_repository: Stores lines and their chains
    """

    station_repository: StationRepositoryPort
    line_repository: LineRepositoryPort

    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def create_line(
        self,
        name: str,
        color: str,
        up_station_id: int,
        down_station_id: int,
        distance: int,
        line_id: Optional[int] = None,
    ) -> LineView:
        """Create a line seeded with its first segment.

        Args:
            name: Unique line name.
            color: Display color.
            up_station_id: Up-station of the first segment.
            down_station_id: Down-station of the first segment.
            distance: Length of the first segment.
            line_id: Explicit id; a fresh one is reserved when omitted.

        Returns:
            LineView of the new line.

        Raises:
            DuplicateLineError: If the name or the explicit id is already taken.
            StationNotFoundError: If a station id is unknown.
            InvalidSegmentError: If the first segment is invalid.
        """
        with self._lock:
            if self.line_repository.find_by_name(name) is not None:
                raise DuplicateLineError(f"Line name already used: {name}", name=name)
            if line_id is not None and self.line_repository.get(line_id) is not None:
                raise DuplicateLineError(
                    f"Line id already used: {line_id}", name=name, line_id=line_id
                )

            up_station = self._station(up_station_id)
            down_station = self._station(down_station_id)
            line = Line.create(
                id=line_id if line_id is not None else self.line_repository.next_id(),
                name=name,
                color=color,
                up_station=up_station,
                down_station=down_station,
                distance=distance,
            )
            self.line_repository.save(line)

        self._logger.info(
            "Line created",
            extra={"line_id": line.id, "line_name": name, "distance": distance},
        )
        return line.view()

    def get_line(self, line_id: int) -> LineView:
        """Return the current snapshot of a line.

        Raises:
            LineNotFoundError: If the line id is unknown.
        """
        with self._lock:
            return self._line(line_id).view()

    def list_lines(self) -> List[LineView]:
        with self._lock:
            return [line.view() for line in self.line_repository.list_lines()]

    def update_line(
        self,
        line_id: int,
        name: Optional[str] = None,
        color: Optional[str] = None,
    ) -> LineView:
        """Rename or recolor a line.

        Raises:
            LineNotFoundError: If the line id is unknown.
            DuplicateLineError: If the new name belongs to another line.
        """
        with self._lock:
            line = self._line(line_id)
            if name is not None:
                other = self.line_repository.find_by_name(name)
                if other is not None and other.id != line_id:
                    raise DuplicateLineError(
                        f"Line name already used: {name}", name=name
                    )
            line.update(name=name, color=color)
            self.line_repository.save(line)

        self._logger.info("Line updated", extra={"line_id": line_id})
        return line.view()

    def delete_line(self, line_id: int) -> None:
        """Delete a line and its chain.

        Raises:
            LineNotFoundError: If the line id is unknown.
        """
        with self._lock:
            if not self.line_repository.delete(line_id):
                raise LineNotFoundError(f"Line not found: {line_id}", line_id=line_id)
        self._logger.info("Line deleted", extra={"line_id": line_id})

    def add_segment(
        self,
        line_id: int,
        up_station_id: int,
        down_station_id: int,
        distance: int,
    ) -> LineView:
        """Splice a segment into a line.

        Returns:
            LineView after the insertion.

        Raises:
            LineNotFoundError: If the line id is unknown.
            StationNotFoundError: If a station id is unknown.
            TransitLineError: Any rejection raised by the segment chain.
        """
        with self._lock:
            line = self._line(line_id)
            up_station = self._station(up_station_id)
            down_station = self._station(down_station_id)
            try:
                line.add_segment(up_station, down_station, distance)
            except TransitLineError as e:
                self._logger.warning(
                    "Segment rejected",
                    extra={
                        "line_id": line_id,
                        "up_station_id": up_station_id,
                        "down_station_id": down_station_id,
                        "distance": distance,
                        "error_code": e.code.value,
                    },
                )
                raise
            self.line_repository.save(line)
            view = line.view()

        self._logger.info(
            "Segment added",
            extra={
                "line_id": line_id,
                "up_station_id": up_station_id,
                "down_station_id": down_station_id,
                "segments": len(view.segments),
            },
        )
        return view

    def remove_station(self, line_id: int, station_id: int) -> LineView:
        """Take a station off a line.

        Returns:
            LineView after the removal.

        Raises:
            LineNotFoundError: If the line id is unknown.
            StationNotFoundError: If the station is unknown or not on the line.
            ChainTooShortError: If the line has a single segment.
        """
        with self._lock:
            line = self._line(line_id)
            station = self._station(station_id)
            try:
                line.remove_station(station)
            except TransitLineError as e:
                self._logger.warning(
                    "Station removal rejected",
                    extra={
                        "line_id": line_id,
                        "station_id": station_id,
                        "error_code": e.code.value,
                    },
                )
                raise
            self.line_repository.save(line)
            view = line.view()

        self._logger.info(
            "Station removed",
            extra={"line_id": line_id, "station_id": station_id},
        )
        return view

    def _line(self, line_id: int) -> Line:
        line = self.line_repository.get(line_id)
        if line is None:
            raise LineNotFoundError(f"Line not found: {line_id}", line_id=line_id)
        return line

    def _station(self, station_id: int) -> Station:
        station = self.station_repository.get(station_id)
        if station is None:
            raise StationNotFoundError(
                f"Station not found: {station_id}", station_id=station_id
            )
        return station
