"""
Request and response models for program and progress endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models import Block, Program, ProgressMetadata


class JumpToWeekRequest(BaseModel):
    """Request to move progress to an absolute block/week position."""

    block_index: int = Field(..., ge=0, description="Target block index (0-based)")
    week_index: int = Field(..., ge=0, description="Target week index within the block (0-based)")


class ProgramUpdateRequest(BaseModel):
    """
    Partial update of a program.

    ``blocks`` replaces the whole structure and is rejected while progress
    is started.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    is_active: Optional[bool] = None
    blocks: Optional[List[Block]] = None


class ProgressResponse(BaseModel):
    """A program with its derived progress metadata."""

    program: Program
    metadata: ProgressMetadata


class ProgressTransitionResponse(ProgressResponse):
    """Result of a progress transition."""

    message: str
