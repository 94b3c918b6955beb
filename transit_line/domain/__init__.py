"""Domain layer - Core transit line models, errors and the segment chain.

This module contains the immutable models, typed errors and the chain
maintenance rules used throughout the application. No external
dependencies.
"""

from .errors import (
    ChainIntegrityError,
    ChainTooShortError,
    DisconnectedInsertError,
    DuplicateLineError,
    ErrorCode,
    InvalidSegmentError,
    LineNotFoundError,
    NetworkLoadError,
    OverlengthInsertError,
    RedundantInsertError,
    StationNotFoundError,
    TransitLineError,
)
from .line import Line
from .models import LineView, Segment, Station
from .segment_chain import SegmentChain

__all__ = [
    # Models
    "Station",
    "Segment",
    "LineView",
    "SegmentChain",
    "Line",
    # Errors
    "ErrorCode",
    "TransitLineError",
    "InvalidSegmentError",
    "DisconnectedInsertError",
    "RedundantInsertError",
    "OverlengthInsertError",
    "ChainTooShortError",
    "StationNotFoundError",
    "ChainIntegrityError",
    "LineNotFoundError",
    "DuplicateLineError",
    "NetworkLoadError",
]
