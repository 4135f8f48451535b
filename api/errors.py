"""
Translation of application and domain errors into HTTP errors.

- ProgramNotFoundError -> 404 (also used for out-of-scope programs)
- ProgressionError -> 400 with {"code", "message"} detail
- ConcurrentModificationError -> 409
"""

from fastapi import HTTPException

from application.exceptions import ConcurrentModificationError, ProgramNotFoundError
from domain.exceptions import ProgressionError


class ProgramNotFoundHTTPError(HTTPException):
    """
    Raised when a program cannot be found.

    Also used for programs outside the caller's gym so that callers cannot
    distinguish "not found" from "not yours".
    """

    def __init__(self, program_id: str):
        super().__init__(
            status_code=404,
            detail=f"Program {program_id} not found",
        )


class ProgressionHTTPError(HTTPException):
    """Raised when a progress transition is rejected."""

    def __init__(self, error: ProgressionError):
        super().__init__(status_code=400, detail=error.to_dict())


class ConcurrentModificationHTTPError(HTTPException):
    """Raised when a write lost an optimistic-concurrency race."""

    def __init__(self, program_id: str):
        super().__init__(
            status_code=409,
            detail=f"Program {program_id} was modified by another request. Please retry.",
        )


# Errors routers translate; anything else propagates as a 500
HANDLED_ERRORS = (ProgramNotFoundError, ProgressionError, ConcurrentModificationError)


def to_http_error(error: Exception) -> HTTPException:
    """Map one of HANDLED_ERRORS to its HTTPException."""
    if isinstance(error, ProgramNotFoundError):
        return ProgramNotFoundHTTPError(error.program_id)
    if isinstance(error, ProgressionError):
        return ProgressionHTTPError(error)
    if isinstance(error, ConcurrentModificationError):
        return ConcurrentModificationHTTPError(error.program_id)
    raise TypeError(f"No HTTP mapping for {type(error).__name__}")
