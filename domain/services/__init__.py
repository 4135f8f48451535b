"""
Domain services.

- progression_engine: pure program progress transitions
"""

from domain.services.progression_engine import (
    ProgressAction,
    ProgressCommand,
    advance_week,
    apply_command,
    assert_not_started,
    get_current_progress,
    jump_to_week,
    previous_week,
    reset_progress,
    start_program,
)

__all__ = [
    "ProgressAction",
    "ProgressCommand",
    "advance_week",
    "apply_command",
    "assert_not_started",
    "get_current_progress",
    "jump_to_week",
    "previous_week",
    "reset_progress",
    "start_program",
]
