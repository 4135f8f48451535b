"""
UpdateProgramStructure Use Case.

Edits a program's author-facing fields and its block/week structure.

The block structure is frozen while progress is started: the progression
engine indexes into ``blocks`` and must never see them change underneath a
live cursor. The same ``assert_not_started`` guard the engine relies on is
applied here. Metadata-only edits (name, description, is_active) are always
allowed.
"""

import logging
from typing import List, Optional

from application.exceptions import ProgramNotFoundError
from application.ports import ProgramRepository, ProgramScope
from domain.models import Block, Program
from domain.services.progression_engine import assert_not_started

logger = logging.getLogger(__name__)


class UpdateProgramStructureUseCase:
    """
    Use case for editing a program.

    Usage:
        >>> use_case = UpdateProgramStructureUseCase(program_repo=repo)
        >>> program = use_case.execute(
        ...     program_id="program-1",
        ...     scope=ProgramScope.for_gym("gym-1"),
        ...     blocks=[Block(name="Base", order=0, weeks=[...])],
        ... )
    """

    def __init__(self, program_repo: ProgramRepository) -> None:
        self._program_repo = program_repo

    def execute(
        self,
        program_id: str,
        scope: ProgramScope,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        is_active: Optional[bool] = None,
        blocks: Optional[List[Block]] = None,
    ) -> Program:
        """
        Apply the given edits and persist the program.

        Fields left as None are not changed.

        Returns:
            The saved Program

        Raises:
            ProgramNotFoundError: If the program is missing or out of scope
            ProgramStructureLockedError: If blocks are edited on a started program
            ConcurrentModificationError: If the program changed since it was loaded
        """
        program = self._program_repo.find_scoped(program_id, scope)
        if program is None:
            raise ProgramNotFoundError(program_id)

        update = {}
        if name is not None:
            update["name"] = name
        if description is not None:
            update["description"] = description
        if is_active is not None:
            update["is_active"] = is_active
        if blocks is not None:
            assert_not_started(program)
            update["blocks"] = list(blocks)

        if not update:
            return program

        logger.info(f"Updating program {program_id}: fields={sorted(update)}")
        # Round-trip through validation so field constraints still apply
        updated = Program.model_validate({**program.model_dump(), **update})
        return self._program_repo.save(updated)
