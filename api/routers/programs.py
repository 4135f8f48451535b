"""
Gym programs router.

Reads a single program and applies partial edits. Structure edits go
through UpdateProgramStructureUseCase, which refuses to replace blocks
while progress is started.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import (
    get_program_repo,
    get_program_scope,
    get_update_program_structure_use_case,
)
from api.errors import HANDLED_ERRORS, ProgramNotFoundHTTPError, to_http_error
from api.schemas import ProgramUpdateRequest
from application.ports import ProgramRepository, ProgramScope
from application.use_cases import UpdateProgramStructureUseCase
from domain.models import Program

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/gym/programs",
    tags=["Programs"],
)


@router.get("/{program_id}", response_model=Program)
def get_program(
    program_id: str,
    scope: ProgramScope = Depends(get_program_scope),
    program_repo: ProgramRepository = Depends(get_program_repo),
):
    """
    Get a program by ID.

    Programs outside the caller's gym are reported as not found.
    """
    program = program_repo.find_scoped(program_id, scope)
    if program is None:
        raise ProgramNotFoundHTTPError(program_id)
    return program


@router.patch("/{program_id}", response_model=Program)
def update_program(
    program_id: str,
    request: ProgramUpdateRequest,
    scope: ProgramScope = Depends(get_program_scope),
    use_case: UpdateProgramStructureUseCase = Depends(get_update_program_structure_use_case),
):
    """
    Partially update a program.

    Raises:
        400: PROGRAM_STRUCTURE_LOCKED when blocks are sent for a started program
        404: Program not found
        409: Concurrent modification
    """
    try:
        return use_case.execute(
            program_id,
            scope,
            name=request.name,
            description=request.description,
            is_active=request.is_active,
            blocks=request.blocks,
        )
    except HANDLED_ERRORS as e:
        raise to_http_error(e) from e
