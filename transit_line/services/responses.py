"""Translation of failures into stable error responses.

Outer layers (HTTP handlers, CLIs) call error_response() on whatever a
service call raised and render the resulting code and message in their
own convention.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict

from ..domain.errors import ErrorCode, TransitLineError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ErrorResponse:
    """Renderable description of a rejected operation.

    Attributes:
        code: Stable error code
        message: Human-readable message
        details: Error-specific attributes (station ids, distances, ...)
    """

    code: ErrorCode
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


def error_response(exc: Exception) -> ErrorResponse:
    """Map an exception to an ErrorResponse.

    Domain errors keep their own code. Anything else is unexpected: it is
    logged with its traceback and reported as ErrorCode.UNKNOWN without
    leaking internals.
    """
    if isinstance(exc, TransitLineError):
        details = {
            f.name: getattr(exc, f.name)
            for f in fields(exc)
            if f.name not in ("message", "cause") and getattr(exc, f.name) is not None
        }
        return ErrorResponse(code=exc.code, message=str(exc), details=details)

    logger.error("Unexpected error", exc_info=exc)
    return ErrorResponse(code=ErrorCode.UNKNOWN, message="Unexpected error")
