"""
Repository Interfaces (Ports) for the Program Progression API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ProgramRepository, ProgramScope

    class ProgressService:
        def __init__(self, program_repo: ProgramRepository):
            self.program_repo = program_repo

        def load(self, program_id: str, gym_id: str):
            return self.program_repo.find_scoped(program_id, ProgramScope.for_gym(gym_id))
"""

from application.ports.program_repository import ProgramRepository, ProgramScope

__all__ = [
    "ProgramRepository",
    "ProgramScope",
]
