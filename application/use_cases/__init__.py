"""
Application Use Cases for the Program Progression API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models, not API responses

Usage:
    from application.use_cases import ProgramProgressUseCase

    use_case = ProgramProgressUseCase(program_repo=program_repo)
    result = use_case.start(program_id="p-123", scope=ProgramScope.for_gym("gym-1"))
    print(result.message)
"""

from application.use_cases.program_progress import (
    ProgramProgressUseCase,
    ProgressTransitionResult,
    ProgressView,
)
from application.use_cases.update_program_structure import UpdateProgramStructureUseCase

__all__ = [
    "ProgramProgressUseCase",
    "ProgressTransitionResult",
    "ProgressView",
    "UpdateProgramStructureUseCase",
]
