"""Typed domain errors for transit line maintenance.

Every rejected operation raises one of these errors before touching the
segment chain, so a failure never leaves a line half-modified.

All errors inherit from TransitLineError, carry a stable ErrorCode that
outer layers translate into their own response convention, and can
optionally wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional


class ErrorCode(str, Enum):
    """Stable, distinguishable codes for each rejection kind."""

    INVALID_SEGMENT = "INVALID_SEGMENT"
    DISCONNECTED_INSERT = "DISCONNECTED_INSERT"
    REDUNDANT_INSERT = "REDUNDANT_INSERT"
    OVERLENGTH_INSERT = "OVERLENGTH_INSERT"
    CHAIN_TOO_SHORT = "CHAIN_TOO_SHORT"
    STATION_NOT_FOUND = "STATION_NOT_FOUND"
    CHAIN_INTEGRITY = "CHAIN_INTEGRITY"
    LINE_NOT_FOUND = "LINE_NOT_FOUND"
    DUPLICATE_LINE = "DUPLICATE_LINE"
    NETWORK_LOAD = "NETWORK_LOAD"
    UNKNOWN = "UNKNOWN"


@dataclass
class TransitLineError(Exception):
    """Base error for the transit line domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    code: ClassVar[ErrorCode] = ErrorCode.UNKNOWN

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidSegmentError(TransitLineError):
    """A segment cannot be built from the given values.

    Raised for a non-positive distance, identical end stations, or a
    segment offered to the chain of another line.

    Attributes:
        up_station_id: Up-station of the rejected segment
        down_station_id: Down-station of the rejected segment
        distance: Requested distance
    """

    code: ClassVar[ErrorCode] = ErrorCode.INVALID_SEGMENT

    up_station_id: Optional[int] = None
    down_station_id: Optional[int] = None
    distance: Optional[object] = None


@dataclass
class DisconnectedInsertError(TransitLineError):
    """The new segment does not attach to the chain at any valid position.

    Attributes:
        up_station_id: Up-station of the rejected segment
        down_station_id: Down-station of the rejected segment
    """

    code: ClassVar[ErrorCode] = ErrorCode.DISCONNECTED_INSERT

    up_station_id: Optional[int] = None
    down_station_id: Optional[int] = None


@dataclass
class RedundantInsertError(TransitLineError):
    """Both stations of the new segment are already on the chain.

    Attributes:
        up_station_id: Up-station of the rejected segment
        down_station_id: Down-station of the rejected segment
    """

    code: ClassVar[ErrorCode] = ErrorCode.REDUNDANT_INSERT

    up_station_id: Optional[int] = None
    down_station_id: Optional[int] = None


@dataclass
class OverlengthInsertError(TransitLineError):
    """A split would leave no positive remainder.

    Attributes:
        requested_distance: Length of the segment being inserted
        available_distance: Length of the segment that would be split
    """

    code: ClassVar[ErrorCode] = ErrorCode.OVERLENGTH_INSERT

    requested_distance: int = 0
    available_distance: int = 0


@dataclass
class ChainTooShortError(TransitLineError):
    """Removal would leave a line without any segment.

    Attributes:
        segment_count: Number of segments on the chain at the time
    """

    code: ClassVar[ErrorCode] = ErrorCode.CHAIN_TOO_SHORT

    segment_count: int = 0


@dataclass
class StationNotFoundError(TransitLineError):
    """Station is not on the chain, or not known at all.

    Attributes:
        station_id: The station id that was not found
    """

    code: ClassVar[ErrorCode] = ErrorCode.STATION_NOT_FOUND

    station_id: Optional[int] = None


@dataclass
class ChainIntegrityError(TransitLineError):
    """The chain does not form a single simple path.

    Attributes:
        segment_count: Number of segments on the chain
    """

    code: ClassVar[ErrorCode] = ErrorCode.CHAIN_INTEGRITY

    segment_count: int = 0


@dataclass
class LineNotFoundError(TransitLineError):
    """No line is registered under the given id.

    Attributes:
        line_id: The line id that was not found
    """

    code: ClassVar[ErrorCode] = ErrorCode.LINE_NOT_FOUND

    line_id: Optional[int] = None


@dataclass
class DuplicateLineError(TransitLineError):
    """A line with the same name or id already exists.

    Attributes:
        name: The conflicting line name
        line_id: The conflicting line id
    """

    code: ClassVar[ErrorCode] = ErrorCode.DUPLICATE_LINE

    name: str = ""
    line_id: Optional[int] = None


@dataclass
class NetworkLoadError(TransitLineError):
    """Network data could not be loaded.

    Attributes:
        file_path: Path to the data file if relevant
    """

    code: ClassVar[ErrorCode] = ErrorCode.NETWORK_LOAD

    file_path: Optional[str] = None
