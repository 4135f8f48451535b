"""
Program progression engine.

Pure transition logic over (Program, ProgressRecord). Every transition takes
the whole Program and returns a new ProgressRecord, or raises a
ProgressionError subclass naming the violated precondition. Nothing here
touches persistence, and no transition ever modifies ``program.blocks``.

Transitions:
- start:    not started -> (0, 0)
- advance:  next week, first week of next block, or completion
- previous: back one week, crossing block boundaries; un-completes
- jump:     absolute (block, week) position; un-completes
- reset:    back to the not-started state

Usage:
    >>> progress = start_program(program)
    >>> program = program.with_progress(progress)
    >>> progress = advance_week(program)
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from domain.exceptions import (
    AlreadyAtStartError,
    AlreadyCompletedError,
    AlreadyStartedError,
    BlockIndexOutOfRangeError,
    CurrentBlockMissingError,
    EmptyProgramError,
    NotStartedError,
    PreviousBlockMissingError,
    ProgramStructureLockedError,
    WeekIndexOutOfRangeError,
)
from domain.models.program import Program, ProgressMetadata, ProgressRecord


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# Guards
# =============================================================================


def assert_not_started(program: Program) -> None:
    """
    Reject structural edits on a program whose progress has been started.

    Shared by the structural-edit path so the engine's assumption (blocks do
    not change under a started cursor) and the write path agree.

    Raises:
        ProgramStructureLockedError: If the program has been started
    """
    if program.current_progress.is_started:
        raise ProgramStructureLockedError()


def _require_started(program: Program, message: str) -> ProgressRecord:
    progress = program.current_progress
    if not progress.is_started:
        raise NotStartedError(message)
    return progress


# =============================================================================
# Transitions
# =============================================================================


def start_program(program: Program, now: Optional[datetime] = None) -> ProgressRecord:
    """
    Start tracking progress at block 0, week 0.

    Starting is not advancing, so ``last_advanced_at`` stays unset.

    Raises:
        EmptyProgramError: If the program has no blocks
        AlreadyStartedError: If progress was already started
    """
    if not program.blocks:
        raise EmptyProgramError()
    if program.current_progress.is_started:
        raise AlreadyStartedError()

    return ProgressRecord(
        block_index=0,
        week_index=0,
        started_at=now or _utcnow(),
        completed_at=None,
        last_advanced_at=None,
        total_weeks_completed=0,
    )


def advance_week(program: Program, now: Optional[datetime] = None) -> ProgressRecord:
    """
    Move forward one week.

    Moves within the current block, rolls over to the first week of the next
    block, or, on the last week of the last block, marks the program
    completed. Each branch counts one more completed week.

    Raises:
        NotStartedError: If progress has not been started
        AlreadyCompletedError: If the program is already completed
        CurrentBlockMissingError: If the cursor points past the last block
    """
    progress = _require_started(program, "Program must be started before advancing")
    if progress.is_completed:
        raise AlreadyCompletedError()

    block_index = progress.block_index
    if block_index >= len(program.blocks):
        raise CurrentBlockMissingError()
    current_block = program.blocks[block_index]

    now = now or _utcnow()
    update = {
        "last_advanced_at": now,
        "total_weeks_completed": progress.total_weeks_completed + 1,
    }

    is_last_week_of_block = progress.week_index == current_block.week_count - 1
    if not is_last_week_of_block:
        update["week_index"] = progress.week_index + 1
    elif block_index + 1 < len(program.blocks):
        update["block_index"] = block_index + 1
        update["week_index"] = 0
    else:
        update["completed_at"] = now

    return progress.model_copy(update=update)


def previous_week(program: Program, now: Optional[datetime] = None) -> ProgressRecord:
    """
    Move back one week, un-completing the program if needed.

    ``total_weeks_completed`` is decremented by one and floored at zero rather
    than recomputed from the new position.

    Raises:
        NotStartedError: If progress has not been started
        AlreadyAtStartError: If already at block 0, week 0
        PreviousBlockMissingError: If the previous block cannot be found
    """
    progress = _require_started(program, "Program must be started before going back")
    if progress.block_index == 0 and progress.week_index == 0:
        raise AlreadyAtStartError()

    if progress.week_index == 0:
        previous_block_index = progress.block_index - 1
        if previous_block_index >= len(program.blocks):
            raise PreviousBlockMissingError()
        previous_block = program.blocks[previous_block_index]
        block_index = previous_block_index
        week_index = previous_block.week_count - 1
    else:
        block_index = progress.block_index
        week_index = progress.week_index - 1

    return progress.model_copy(
        update={
            "block_index": block_index,
            "week_index": week_index,
            "completed_at": None,
            "total_weeks_completed": max(progress.total_weeks_completed - 1, 0),
            "last_advanced_at": now or _utcnow(),
        }
    )


def weeks_before(program: Program, block_index: int, week_index: int) -> int:
    """Count the weeks that precede (block_index, week_index)."""
    return sum(block.week_count for block in program.blocks[:block_index]) + week_index


def jump_to_week(
    program: Program,
    block_index: int,
    week_index: int,
    now: Optional[datetime] = None,
) -> ProgressRecord:
    """
    Move to an absolute (block, week) position.

    The completed-week counter is derived exactly from the target position.
    A jump never completes a program, even onto the final week.

    Raises:
        NotStartedError: If progress has not been started
        BlockIndexOutOfRangeError: If block_index is not a valid block
        WeekIndexOutOfRangeError: If week_index is not valid for that block
    """
    progress = _require_started(
        program, "Program must be started before jumping to a week"
    )

    block_count = len(program.blocks)
    if block_index < 0 or block_index >= block_count:
        raise BlockIndexOutOfRangeError(block_index, block_count)

    week_count = program.blocks[block_index].week_count
    if week_index < 0 or week_index >= week_count:
        raise WeekIndexOutOfRangeError(block_index, week_index, week_count)

    return progress.model_copy(
        update={
            "block_index": block_index,
            "week_index": week_index,
            "total_weeks_completed": weeks_before(program, block_index, week_index),
            "last_advanced_at": now or _utcnow(),
            "completed_at": None,
        }
    )


def reset_progress(program: Program) -> ProgressRecord:
    """Return progress to the not-started state. Always succeeds."""
    return ProgressRecord.initial()


# =============================================================================
# Derived view
# =============================================================================


def _percentage(completed: int, total: int) -> int:
    # Float division first, then half-up: 23/40 gives 57, not 58.
    if total <= 0:
        return 0
    return math.floor(completed / total * 100 + 0.5)


def get_current_progress(program: Program) -> ProgressMetadata:
    """
    Compute the read-only progress view for a program.

    The current block/week names are None when the cursor does not point at
    an existing entry (e.g. a reset program with no blocks).
    """
    progress = program.current_progress
    block_index = progress.block_index
    week_index = progress.week_index

    current_block = None
    current_week = None
    if block_index < len(program.blocks):
        current_block = program.blocks[block_index]
        if week_index < current_block.week_count:
            current_week = current_block.weeks[week_index]

    total_weeks = program.total_weeks

    return ProgressMetadata(
        total_blocks=program.total_blocks,
        total_weeks=total_weeks,
        current_block_index=block_index,
        current_week_index=week_index,
        current_block_name=current_block.name if current_block else None,
        current_week_name=current_week.name if current_week else None,
        is_started=progress.is_started,
        is_completed=progress.is_completed,
        progress_percentage=_percentage(progress.total_weeks_completed, total_weeks),
    )


# =============================================================================
# Command dispatch
# =============================================================================


class ProgressAction(str, Enum):
    """The legal ways to change a program's progress."""

    START = "start"
    ADVANCE = "advance"
    PREVIOUS = "previous"
    JUMP = "jump"
    RESET = "reset"


@dataclass(frozen=True)
class ProgressCommand:
    """A requested transition. Only JUMP uses the indices."""

    action: ProgressAction
    block_index: Optional[int] = None
    week_index: Optional[int] = None

    @classmethod
    def jump(cls, block_index: int, week_index: int) -> "ProgressCommand":
        return cls(ProgressAction.JUMP, block_index=block_index, week_index=week_index)


def apply_command(
    program: Program,
    command: ProgressCommand,
    now: Optional[datetime] = None,
) -> ProgressRecord:
    """
    Apply a progress command to a program.

    Args:
        program: Program carrying structure and current progress
        command: Transition to apply
        now: Timestamp for the transition (defaults to current UTC time)

    Returns:
        The new ProgressRecord

    Raises:
        ProgressionError: If the transition is not legal in the current state
        ValueError: If a JUMP command is missing an index
    """
    action = command.action
    if action == ProgressAction.START:
        return start_program(program, now)
    if action == ProgressAction.ADVANCE:
        return advance_week(program, now)
    if action == ProgressAction.PREVIOUS:
        return previous_week(program, now)
    if action == ProgressAction.JUMP:
        if command.block_index is None or command.week_index is None:
            raise ValueError("Jump command requires block_index and week_index")
        return jump_to_week(program, command.block_index, command.week_index, now)
    if action == ProgressAction.RESET:
        return reset_progress(program)
    raise ValueError(f"Unknown progress action: {action}")
