"""Repository ports - Abstractions for station and line storage.

Storage is a collaborator of the core: it hands over stations resolved
from ids and keeps whatever lines the core produces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.line import Line
    from ..domain.models import Station


class StationRepositoryPort(Protocol):
    """Port for looking up stations by id.

    Implementation: adapters/repository/memory_repository.py
    """

    def get(self, station_id: int) -> Optional[Station]:
        """Get a station by id.

        Args:
            station_id: The station id to look up.

        Returns:
            The station, or None if not found.
        """
        ...

    def save(self, station: Station) -> Station:
        """Store a station, replacing any station with the same id."""
        ...

    def list_stations(self) -> Sequence[Station]:
        """List all stored stations."""
        ...


class LineRepositoryPort(Protocol):
    """Port for storing lines together with their segment chains.

    Implementation: adapters/repository/memory_repository.py
    """

    def get(self, line_id: int) -> Optional[Line]:
        """Get a line by id, or None if not found."""
        ...

    def find_by_name(self, name: str) -> Optional[Line]:
        """Get a line by its unique name, or None if not found."""
        ...

    def save(self, line: Line) -> Line:
        """Store a line, replacing any line with the same id."""
        ...

    def delete(self, line_id: int) -> bool:
        """Delete a line.

        Returns:
            True if the line existed and was removed.
        """
        ...

    def list_lines(self) -> Sequence[Line]:
        """List all stored lines ordered by id."""
        ...

    def next_id(self) -> int:
        """Reserve a fresh line id."""
        ...
