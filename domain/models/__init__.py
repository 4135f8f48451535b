"""
Domain models for the Program Progression API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Program: The aggregate root (structure + progress, persisted together)
- Block / Week / Day / Activity: The fixed-depth training plan hierarchy
- ProgressRecord: Where a client currently is within the Program
- ProgressMetadata: Derived, read-only view of progress

Usage:
    >>> from domain.models import Program, Block, Week

    >>> program = Program(
    ...     id="p1",
    ...     gym_id="gym-1",
    ...     created_by="coach-1",
    ...     name="Strength Cycle",
    ...     blocks=[
    ...         Block(name="Base", order=0, weeks=[Week(name="Week 1", order=0)]),
    ...     ],
    ... )
    >>> program.total_weeks
    1
"""

from domain.models.program import (
    Activity,
    ActivityGroupTarget,
    ActivitySet,
    ActivityType,
    Block,
    Day,
    DistanceUnit,
    Program,
    ProgressMetadata,
    ProgressRecord,
    Week,
)

__all__ = [
    # Aggregate root
    "Program",
    # Structure
    "Block",
    "Week",
    "Day",
    "Activity",
    "ActivitySet",
    "ActivityGroupTarget",
    # Progress
    "ProgressRecord",
    "ProgressMetadata",
    # Enums
    "ActivityType",
    "DistanceUnit",
]
