"""
Program structure and progress value objects.

A Program is a hierarchical training plan:

    Program -> Block -> Week -> Day -> Activity

Blocks, weeks, days and activities carry an ``order`` field for author-facing
sequencing only. Progression always walks the lists by index.

Each level is its own record type. The progression engine indexes exactly two
levels (block, then week); days and activities are carried along untouched.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class ActivityType(str, Enum):
    """Kinds of planned activity."""

    LIFT = "lift"
    CARDIO = "cardio"
    OTHER = "other"
    BENCHMARK = "benchmark"


class DistanceUnit(str, Enum):
    """Units for cardio distances."""

    MILES = "miles"
    KILOMETERS = "kilometers"
    METERS = "meters"
    YARDS = "yards"


class ActivitySet(BaseModel):
    """A single prescribed set within a lift activity."""

    reps: int = Field(ge=1, le=100)
    percentage_of_max: float = Field(ge=0, le=200)
    benchmark_template_id: Optional[str] = None

    model_config = {"frozen": True}


class Activity(BaseModel):
    """A planned activity within a day."""

    id: Optional[str] = None
    activity_template_id: str
    type: ActivityType
    order: int = Field(ge=0)
    sets: Optional[List[ActivitySet]] = None
    time: Optional[int] = Field(default=None, ge=0, description="Duration in minutes")
    distance: Optional[float] = Field(default=None, ge=0)
    distance_unit: Optional[DistanceUnit] = None

    model_config = {"frozen": True}


class Day(BaseModel):
    """A single training day within a week."""

    id: Optional[str] = None
    name: str = Field(min_length=1, max_length=100)
    order: int = Field(ge=0)
    activities: List[Activity] = Field(default_factory=list)

    model_config = {"frozen": True}


class ActivityGroupTarget(BaseModel):
    """Target share of training volume for an activity group."""

    activity_group_id: str
    target_percentage: float = Field(ge=0, le=100)

    model_config = {"frozen": True}


class Week(BaseModel):
    """A micro training phase within a block."""

    id: Optional[str] = None
    name: str = Field(min_length=1, max_length=100)
    order: int = Field(ge=0)
    activity_group_targets: List[ActivityGroupTarget] = Field(default_factory=list)
    days: List[Day] = Field(default_factory=list)

    model_config = {"frozen": True}


class Block(BaseModel):
    """A macro training phase within a program."""

    id: Optional[str] = None
    name: str = Field(min_length=1, max_length=100)
    order: int = Field(ge=0)
    activity_group_targets: List[ActivityGroupTarget] = Field(default_factory=list)
    weeks: List[Week] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def week_count(self) -> int:
        """Number of weeks in this block."""
        return len(self.weeks)


class ProgressRecord(BaseModel):
    """
    Cursor tracking where a client is within a Program.

    ``started_at`` is the "has been started" sentinel. ``completed_at`` is set
    only by the advance that walks off the final week. Transitions never
    mutate a record; they return a replacement.
    """

    block_index: int = Field(default=0, ge=0)
    week_index: int = Field(default=0, ge=0)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    last_advanced_at: Optional[datetime] = None
    total_weeks_completed: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_not_started_state(self) -> "ProgressRecord":
        """A record that was never started must sit at the initial position."""
        if self.started_at is None:
            if (
                self.block_index != 0
                or self.week_index != 0
                or self.completed_at is not None
                or self.total_weeks_completed != 0
            ):
                raise ValueError(
                    "Progress that has not been started must be at block 0, "
                    "week 0 with no completed weeks"
                )
        return self

    @classmethod
    def initial(cls) -> "ProgressRecord":
        """Build the not-started state."""
        return cls()

    @property
    def is_started(self) -> bool:
        return self.started_at is not None

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None


class Program(BaseModel):
    """
    A client's assigned training plan.

    Structure (``blocks``) and progress (``current_progress``) live in one
    document and are persisted together. ``version`` is bumped by the store on
    every successful save and used for optimistic concurrency.
    """

    id: str
    gym_id: str
    created_by: str
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    is_active: bool = True
    blocks: List[Block] = Field(default_factory=list)
    current_progress: ProgressRecord = Field(default_factory=ProgressRecord.initial)
    version: int = Field(default=0, ge=0)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @property
    def total_blocks(self) -> int:
        return len(self.blocks)

    @property
    def total_weeks(self) -> int:
        """Total number of weeks across all blocks."""
        return sum(block.week_count for block in self.blocks)

    def with_progress(self, progress: ProgressRecord) -> "Program":
        """Return a copy of this program carrying ``progress``."""
        return self.model_copy(update={"current_progress": progress})


class ProgressMetadata(BaseModel):
    """Derived, read-only view of a program's progress."""

    total_blocks: int
    total_weeks: int
    current_block_index: int
    current_week_index: int
    current_block_name: Optional[str] = None
    current_week_name: Optional[str] = None
    is_started: bool
    is_completed: bool
    progress_percentage: int = Field(ge=0)
