# parcel_tracker/exceptions.py
"""
Exceptions raised by the parcel tracker and their HTTP error handler.

Driver and connection failures are not represented here: they surface
as the ``sqlalchemy.exc`` exceptions the database layer raises.
"""

from typing import Any, Dict

from fastapi import Request, status
from fastapi.responses import JSONResponse


class ParcelTrackerError(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, status_code: int = 500, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ParcelNotFoundError(ParcelTrackerError):
    """Raised when no parcel has the requested number."""

    def __init__(self, number: int):
        self.number = number
        super().__init__(
            message=f"Parcel with number {number} not found",
            error_code="ERR_NOT_FOUND_001",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"resource": "parcel", "number": number},
        )


async def tracker_exception_handler(request: Request, exc: ParcelTrackerError) -> JSONResponse:
    """Render application exceptions as a standard JSON error body."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": exc.error_code,
            "message": exc.message,
            "details": exc.details,
        },
    )
