"""
Program repository port (interface).

This Protocol defines the contract for program persistence operations.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.

A Program is a single document: structure and progress are always loaded
and written together.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from domain.models import Program


@dataclass(frozen=True)
class ProgramScope:
    """
    Lookup filter restricting which programs a caller may see.

    ``gym_id=None`` means unscoped (platform admins).
    """

    gym_id: Optional[str] = None

    @classmethod
    def unscoped(cls) -> "ProgramScope":
        return cls(gym_id=None)

    @classmethod
    def for_gym(cls, gym_id: str) -> "ProgramScope":
        return cls(gym_id=gym_id)

    @property
    def is_unscoped(self) -> bool:
        return self.gym_id is None


class ProgramRepository(Protocol):
    """
    Repository interface for program persistence.

    Implementations work with Program domain models and handle
    serialization to/from storage rows.
    """

    def find_scoped(self, program_id: str, scope: ProgramScope) -> Optional[Program]:
        """
        Get a program by ID, restricted to the given scope.

        Args:
            program_id: The program's ID
            scope: Gym scope of the caller

        Returns:
            Program if found and inside the scope, None otherwise
        """
        ...

    def save(self, program: Program) -> Program:
        """
        Write the whole program document.

        The write only succeeds if the stored version still equals
        ``program.version``.

        Args:
            program: Program to persist (carrying the version it was loaded at)

        Returns:
            The stored Program, with version incremented and updated_at refreshed

        Raises:
            ConcurrentModificationError: If the stored version differs
        """
        ...
