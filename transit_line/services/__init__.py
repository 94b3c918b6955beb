"""Services layer - Application orchestration.

Available services:
- LineService: Creates lines and applies segment edits as the single writer
- error_response: Maps raised errors to stable response codes
"""

from .line_service import LineService
from .responses import ErrorResponse, error_response

__all__ = ["LineService", "ErrorResponse", "error_response"]
