"""
ProgramProgress Use Case.

Drives the progression engine against the program store.

Workflow for every transition:
1. Load the program with find_scoped (missing -> ProgramNotFoundError)
2. Compute the new progress with the pure engine (may raise ProgressionError)
3. Save the whole program, conditional on the version it was loaded at
4. On a version conflict, reload and recompute (bounded retries)
5. Return the saved program with its derived progress metadata

Rejected transitions never reach step 3, so the stored program is untouched.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from application.exceptions import ConcurrentModificationError, ProgramNotFoundError
from application.ports import ProgramRepository, ProgramScope
from domain.exceptions import ProgressionError
from domain.models import Program, ProgressMetadata
from domain.services.progression_engine import (
    ProgressAction,
    ProgressCommand,
    apply_command,
    get_current_progress,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 3


@dataclass
class ProgressView:
    """A program together with its derived progress metadata."""

    program: Program
    metadata: ProgressMetadata


@dataclass
class ProgressTransitionResult:
    """Result of a successful progress transition."""

    program: Program
    metadata: ProgressMetadata
    message: str


def _success_message(command: ProgressCommand, program: Program) -> str:
    action = command.action
    if action == ProgressAction.START:
        return "Program started successfully"
    if action == ProgressAction.ADVANCE:
        if program.current_progress.is_completed:
            return "Program completed successfully"
        return "Advanced to next week successfully"
    if action == ProgressAction.PREVIOUS:
        return "Moved to previous week successfully"
    if action == ProgressAction.JUMP:
        return (
            f"Jumped to block {command.block_index}, "
            f"week {command.week_index} successfully"
        )
    return "Program progress reset successfully"


class ProgramProgressUseCase:
    """
    Use case for moving a client through a program.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> use_case = ProgramProgressUseCase(program_repo=repo)
        >>> result = use_case.advance("program-1", ProgramScope.for_gym("gym-1"))
        >>> result.metadata.progress_percentage
        25
    """

    def __init__(
        self,
        program_repo: ProgramRepository,
        max_retries: int = DEFAULT_MAX_RETRIES,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            program_repo: Repository for program persistence
            max_retries: Save attempts before a version conflict is surfaced
            clock: Returns the transition timestamp (defaults to UTC now)
        """
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self._program_repo = program_repo
        self._max_retries = max_retries
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_current_progress(self, program_id: str, scope: ProgramScope) -> ProgressView:
        """
        Get a program and its derived progress metadata.

        Raises:
            ProgramNotFoundError: If the program is missing or out of scope
        """
        program = self._load(program_id, scope)
        return ProgressView(program=program, metadata=get_current_progress(program))

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def start(self, program_id: str, scope: ProgramScope) -> ProgressTransitionResult:
        return self.execute(program_id, scope, ProgressCommand(ProgressAction.START))

    def advance(self, program_id: str, scope: ProgramScope) -> ProgressTransitionResult:
        return self.execute(program_id, scope, ProgressCommand(ProgressAction.ADVANCE))

    def previous(self, program_id: str, scope: ProgramScope) -> ProgressTransitionResult:
        return self.execute(program_id, scope, ProgressCommand(ProgressAction.PREVIOUS))

    def jump(
        self,
        program_id: str,
        scope: ProgramScope,
        block_index: int,
        week_index: int,
    ) -> ProgressTransitionResult:
        return self.execute(
            program_id, scope, ProgressCommand.jump(block_index, week_index)
        )

    def reset(self, program_id: str, scope: ProgramScope) -> ProgressTransitionResult:
        return self.execute(program_id, scope, ProgressCommand(ProgressAction.RESET))

    def execute(
        self,
        program_id: str,
        scope: ProgramScope,
        command: ProgressCommand,
    ) -> ProgressTransitionResult:
        """
        Apply a progress command and persist the result.

        Args:
            program_id: ID of the program to move
            scope: Gym scope of the caller
            command: Transition to apply

        Returns:
            ProgressTransitionResult with the saved program and metadata

        Raises:
            ProgramNotFoundError: If the program is missing or out of scope
            ProgressionError: If the transition is not legal
            ConcurrentModificationError: If every save attempt lost a race
        """
        attempt = 0
        while True:
            attempt += 1
            program = self._load(program_id, scope)

            try:
                progress = apply_command(program, command, now=self._clock())
            except ProgressionError as e:
                logger.warning(
                    f"Rejected {command.action.value} on program {program_id}: {e.code}"
                )
                raise

            try:
                saved = self._program_repo.save(program.with_progress(progress))
            except ConcurrentModificationError:
                if attempt >= self._max_retries:
                    logger.error(
                        f"Giving up {command.action.value} on program {program_id} "
                        f"after {attempt} conflicting writes"
                    )
                    raise
                logger.info(
                    f"Version conflict on program {program_id} "
                    f"(attempt {attempt}/{self._max_retries}), retrying"
                )
                continue

            current = saved.current_progress
            logger.info(
                f"Program {program_id} {command.action.value}: "
                f"block={current.block_index} week={current.week_index} "
                f"completed_weeks={current.total_weeks_completed}"
            )
            return ProgressTransitionResult(
                program=saved,
                metadata=get_current_progress(saved),
                message=_success_message(command, saved),
            )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _load(self, program_id: str, scope: ProgramScope) -> Program:
        program = self._program_repo.find_scoped(program_id, scope)
        if program is None:
            raise ProgramNotFoundError(program_id)
        return program
