"""
Fake implementations for testing.

This package provides in-memory fake implementations of repository
interfaces for fast, isolated testing without database dependencies.

Usage:
    from tests.fakes import FakeProgramRepository, build_program

    repo = FakeProgramRepository()
    repo.seed([build_program(week_counts=[2, 3])])
"""

from typing import List, Optional

from domain.models import Block, Program, ProgressRecord, Week
from tests.fakes.program_repository import FakeProgramRepository


def build_program(
    program_id: str = "program-1",
    gym_id: str = "gym-1",
    week_counts: Optional[List[int]] = None,
    progress: Optional[ProgressRecord] = None,
    **overrides,
) -> Program:
    """
    Build a Program with one block per entry in ``week_counts``.

    Blocks are named "Block 1", "Block 2", ... and weeks "Week 1", "Week 2", ...
    within each block.
    """
    week_counts = [2, 3] if week_counts is None else week_counts
    blocks = [
        Block(
            name=f"Block {b + 1}",
            order=b,
            weeks=[Week(name=f"Week {w + 1}", order=w) for w in range(count)],
        )
        for b, count in enumerate(week_counts)
    ]
    data = {
        "id": program_id,
        "gym_id": gym_id,
        "created_by": "coach-1",
        "name": "Strength Cycle",
        "blocks": blocks,
        "current_progress": progress or ProgressRecord.initial(),
        **overrides,
    }
    return Program(**data)


__all__ = [
    "FakeProgramRepository",
    "build_program",
]
