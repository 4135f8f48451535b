"""
Program progress router.

Endpoints that read and move a gym program's current block/week position.
Every transition is validated by the progression engine; rejected
transitions return 400 with a machine-readable ``code``.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_program_progress_use_case, get_program_scope
from api.errors import HANDLED_ERRORS, to_http_error
from api.schemas import JumpToWeekRequest, ProgressResponse, ProgressTransitionResponse
from application.ports import ProgramScope
from application.use_cases import ProgramProgressUseCase, ProgressTransitionResult

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/gym/programs",
    tags=["Program Progress"],
)


def _transition_response(result: ProgressTransitionResult) -> ProgressTransitionResponse:
    return ProgressTransitionResponse(
        program=result.program,
        metadata=result.metadata,
        message=result.message,
    )


# =============================================================================
# Read
# =============================================================================


@router.get("/{program_id}/progress", response_model=ProgressResponse)
def get_progress(
    program_id: str,
    scope: ProgramScope = Depends(get_program_scope),
    use_case: ProgramProgressUseCase = Depends(get_program_progress_use_case),
):
    """
    Get a program with its current progress metadata.

    Returns:
        ProgressResponse with the program and derived metadata

    Raises:
        404: Program not found in the caller's gym
    """
    try:
        view = use_case.get_current_progress(program_id, scope)
    except HANDLED_ERRORS as e:
        raise to_http_error(e) from e

    return ProgressResponse(program=view.program, metadata=view.metadata)


# =============================================================================
# Transitions
# =============================================================================


@router.post("/{program_id}/progress/start", response_model=ProgressTransitionResponse)
def start_program(
    program_id: str,
    scope: ProgramScope = Depends(get_program_scope),
    use_case: ProgramProgressUseCase = Depends(get_program_progress_use_case),
):
    """
    Start a program at block 0, week 0.

    Raises:
        400: EMPTY_PROGRAM or ALREADY_STARTED
        404: Program not found
        409: Concurrent modification
    """
    try:
        result = use_case.start(program_id, scope)
    except HANDLED_ERRORS as e:
        raise to_http_error(e) from e

    return _transition_response(result)


@router.post("/{program_id}/progress/advance", response_model=ProgressTransitionResponse)
def advance_week(
    program_id: str,
    scope: ProgramScope = Depends(get_program_scope),
    use_case: ProgramProgressUseCase = Depends(get_program_progress_use_case),
):
    """
    Advance to the next week, rolling into the next block or completing
    the program after its last week.

    Raises:
        400: NOT_STARTED, ALREADY_COMPLETED or CURRENT_BLOCK_MISSING
        404: Program not found
        409: Concurrent modification
    """
    try:
        result = use_case.advance(program_id, scope)
    except HANDLED_ERRORS as e:
        raise to_http_error(e) from e

    return _transition_response(result)


@router.post("/{program_id}/progress/previous", response_model=ProgressTransitionResponse)
def previous_week(
    program_id: str,
    scope: ProgramScope = Depends(get_program_scope),
    use_case: ProgramProgressUseCase = Depends(get_program_progress_use_case),
):
    """
    Move back one week. Clears completion.

    Raises:
        400: NOT_STARTED, ALREADY_AT_START or PREVIOUS_BLOCK_MISSING
        404: Program not found
        409: Concurrent modification
    """
    try:
        result = use_case.previous(program_id, scope)
    except HANDLED_ERRORS as e:
        raise to_http_error(e) from e

    return _transition_response(result)


@router.post("/{program_id}/progress/jump", response_model=ProgressTransitionResponse)
def jump_to_week(
    program_id: str,
    request: JumpToWeekRequest,
    scope: ProgramScope = Depends(get_program_scope),
    use_case: ProgramProgressUseCase = Depends(get_program_progress_use_case),
):
    """
    Jump to an absolute block/week position. Clears completion.

    Raises:
        400: NOT_STARTED, BLOCK_INDEX_OUT_OF_RANGE or WEEK_INDEX_OUT_OF_RANGE
        404: Program not found
        409: Concurrent modification
        422: Negative or missing indices
    """
    try:
        result = use_case.jump(
            program_id,
            scope,
            block_index=request.block_index,
            week_index=request.week_index,
        )
    except HANDLED_ERRORS as e:
        raise to_http_error(e) from e

    return _transition_response(result)


@router.post("/{program_id}/progress/reset", response_model=ProgressTransitionResponse)
def reset_progress(
    program_id: str,
    scope: ProgramScope = Depends(get_program_scope),
    use_case: ProgramProgressUseCase = Depends(get_program_progress_use_case),
):
    """
    Return progress to the not-started state. Always succeeds for an
    existing program.

    Raises:
        404: Program not found
        409: Concurrent modification
    """
    try:
        result = use_case.reset(program_id, scope)
    except HANDLED_ERRORS as e:
        raise to_http_error(e) from e

    return _transition_response(result)
