"""
Rejected progression transitions.

Each precondition violation has its own exception class with a stable
``code`` so callers can tell conditions apart without parsing messages.
Raising one of these guarantees the progress record was left untouched.
"""

from typing import Optional


class ProgressionError(Exception):
    """Base class for every rejected progress transition."""

    code = "PROGRESSION_ERROR"
    default_message = "Progress transition rejected"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class EmptyProgramError(ProgressionError):
    code = "EMPTY_PROGRAM"
    default_message = "Cannot start program with no blocks"


class AlreadyStartedError(ProgressionError):
    code = "ALREADY_STARTED"
    default_message = "Program has already been started"


class NotStartedError(ProgressionError):
    code = "NOT_STARTED"
    default_message = "Program must be started first"


class AlreadyCompletedError(ProgressionError):
    code = "ALREADY_COMPLETED"
    default_message = "Program has already been completed"


class CurrentBlockMissingError(ProgressionError):
    code = "CURRENT_BLOCK_MISSING"
    default_message = "Current block not found"


class AlreadyAtStartError(ProgressionError):
    code = "ALREADY_AT_START"
    default_message = "Already at the first week of the program"


class PreviousBlockMissingError(ProgressionError):
    code = "PREVIOUS_BLOCK_MISSING"
    default_message = "Previous block not found"


class BlockIndexOutOfRangeError(ProgressionError):
    code = "BLOCK_INDEX_OUT_OF_RANGE"
    default_message = "Block index is out of range"

    def __init__(self, block_index: int, block_count: int):
        self.block_index = block_index
        self.block_count = block_count
        super().__init__(
            f"Block index {block_index} is out of range. "
            f"Program has {block_count} blocks."
        )


class WeekIndexOutOfRangeError(ProgressionError):
    code = "WEEK_INDEX_OUT_OF_RANGE"
    default_message = "Week index is out of range"

    def __init__(self, block_index: int, week_index: int, week_count: int):
        self.block_index = block_index
        self.week_index = week_index
        self.week_count = week_count
        super().__init__(
            f"Week index {week_index} is out of range. "
            f"Block {block_index} has {week_count} weeks."
        )


class ProgramStructureLockedError(ProgressionError):
    code = "PROGRAM_STRUCTURE_LOCKED"
    default_message = (
        "Cannot modify block/week structure of a program that has been started. "
        "Please reset progress first."
    )
