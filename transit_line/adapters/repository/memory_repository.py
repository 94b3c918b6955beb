"""Thread-safe in-memory repositories.

Stations and lines are kept in dictionaries guarded by an RLock. These
adapters implement the repository ports for tests, demos and the CSV
network loader.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from ...domain.line import Line
from ...domain.models import Station


@dataclass
class InMemoryStationRepository:
    """Station repository backed by a dictionary.

    Implements StationRepositoryPort.
    """

    _store: Dict[int, Station] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def get(self, station_id: int) -> Optional[Station]:
        with self._lock:
            return self._store.get(station_id)

    def save(self, station: Station) -> Station:
        with self._lock:
            self._store[station.id] = station
            self._logger.debug(
                "Station saved",
                extra={"station_id": station.id, "station_name": station.name},
            )
            return station

    def list_stations(self) -> List[Station]:
        with self._lock:
            return sorted(self._store.values(), key=lambda station: station.id)

    def size(self) -> int:
        with self._lock:
            return len(self._store)


@dataclass
class InMemoryLineRepository:
    """Line repository backed by a dictionary.

    Implements LineRepositoryPort. Ids handed out by next_id() start at
    ``first_id`` and skip ids already in use.

    Attributes:
        first_id: First id returned by next_id()
    """

    first_id: int = 1

    _store: Dict[int, Line] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _ids: Iterator[int] = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._ids = itertools.count(self.first_id)
        self._logger = logging.getLogger(__name__)

    def get(self, line_id: int) -> Optional[Line]:
        with self._lock:
            return self._store.get(line_id)

    def find_by_name(self, name: str) -> Optional[Line]:
        with self._lock:
            return next(
                (line for line in self._store.values() if line.name == name), None
            )

    def save(self, line: Line) -> Line:
        with self._lock:
            self._store[line.id] = line
            self._logger.debug(
                "Line saved",
                extra={"line_id": line.id, "segments": line.segments.size()},
            )
            return line

    def delete(self, line_id: int) -> bool:
        with self._lock:
            if line_id in self._store:
                del self._store[line_id]
                self._logger.debug("Line deleted", extra={"line_id": line_id})
                return True
            return False

    def list_lines(self) -> List[Line]:
        with self._lock:
            return [self._store[line_id] for line_id in sorted(self._store)]

    def next_id(self) -> int:
        with self._lock:
            while True:
                candidate = next(self._ids)
                if candidate not in self._store:
                    return candidate
