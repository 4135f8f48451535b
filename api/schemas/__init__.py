"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- programs: Program update and progress transition models
"""

from api.schemas.programs import (
    JumpToWeekRequest,
    ProgramUpdateRequest,
    ProgressResponse,
    ProgressTransitionResponse,
)

__all__ = [
    "JumpToWeekRequest",
    "ProgramUpdateRequest",
    "ProgressResponse",
    "ProgressTransitionResponse",
]
