"""CSV network loader adapter.

Seeds the repositories from three CSV files:
- stations.csv: station_id,station_name
- lines.csv: line_id,name,color
- segments.csv: line_id,up_station_id,down_station_id,distance

Segments are applied in file order through LineService, so every row is
checked by the same rules as an interactive edit. The first segment of a
line creates it.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from ...config import NetworkConfig, get_config
from ...domain.errors import NetworkLoadError, TransitLineError
from ...domain.models import LineView, Station
from ...ports.repository import StationRepositoryPort
from ...services.line_service import LineService


@dataclass
class CSVNetworkLoader:
    """Loads stations and lines from CSV files into repositories.

    Attributes:
        station_repository: Receives the loaded stations
        line_service: Builds the lines segment by segment
        config: Network configuration (paths, file names)
    """

    station_repository: StationRepositoryPort
    line_service: LineService
    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> List[LineView]:
        """Load the whole network.

        Returns:
            Views of every line built from the files.

        Raises:
            NetworkLoadError: If a file cannot be read or a row is rejected.
        """
        self._logger.debug(
            "Loading network",
            extra={
                "stations_path": str(self.config.stations_path),
                "lines_path": str(self.config.lines_path),
                "segments_path": str(self.config.segments_path),
            },
        )

        stations = self._load_stations(self.config.stations_path)
        lines = self._load_lines(self.config.lines_path)
        self._load_segments(self.config.segments_path, lines)

        views = self.line_service.list_lines()
        self._logger.info(
            "Network loaded",
            extra={"stations": stations, "lines": len(views)},
        )
        return views

    def _load_stations(self, path: Path) -> int:
        count = 0
        for row in self._rows(path):
            try:
                station_id = int(row["station_id"])
                name = (row.get("station_name") or "").strip()
            except (KeyError, TypeError, ValueError) as e:
                raise NetworkLoadError(
                    f"Invalid station row: {row}", file_path=str(path), cause=e
                )
            self.station_repository.save(Station(id=station_id, name=name))
            count += 1
        return count

    def _load_lines(self, path: Path) -> Dict[int, Tuple[str, str]]:
        lines: Dict[int, Tuple[str, str]] = {}
        for row in self._rows(path):
            try:
                line_id = int(row["line_id"])
                name = row["name"].strip()
                color = (row.get("color") or "").strip()
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise NetworkLoadError(
                    f"Invalid line row: {row}", file_path=str(path), cause=e
                )
            if line_id in lines:
                raise NetworkLoadError(
                    f"Duplicate line id {line_id}", file_path=str(path)
                )
            lines[line_id] = (name, color)
        return lines

    def _load_segments(self, path: Path, lines: Dict[int, Tuple[str, str]]) -> None:
        created: set[int] = set()
        for row in self._rows(path):
            try:
                line_id = int(row["line_id"])
                up_station_id = int(row["up_station_id"])
                down_station_id = int(row["down_station_id"])
                distance = int(row["distance"])
            except (KeyError, TypeError, ValueError) as e:
                raise NetworkLoadError(
                    f"Invalid segment row: {row}", file_path=str(path), cause=e
                )

            if line_id not in lines:
                raise NetworkLoadError(
                    f"Segment references unknown line {line_id}",
                    file_path=str(path),
                )

            try:
                if line_id in created:
                    self.line_service.add_segment(
                        line_id, up_station_id, down_station_id, distance
                    )
                else:
                    name, color = lines[line_id]
                    self.line_service.create_line(
                        name,
                        color,
                        up_station_id,
                        down_station_id,
                        distance,
                        line_id=line_id,
                    )
                    created.add(line_id)
            except TransitLineError as e:
                raise NetworkLoadError(
                    f"Segment rejected for line {line_id}",
                    file_path=str(path),
                    cause=e,
                )

        missing = set(lines) - created
        if missing:
            self._logger.warning(
                "Lines without segments skipped",
                extra={"line_ids": sorted(missing)},
            )

    def _rows(self, path: Path) -> List[Dict[str, str]]:
        try:
            with path.open(newline="", encoding="utf-8") as f:
                return list(csv.DictReader(f))
        except OSError as e:
            raise NetworkLoadError(
                f"Failed to read {path.name}", file_path=str(path), cause=e
            )
