"""
Supabase implementation of ProgramRepository.

This implementation uses the Supabase Python client against the ``programs``
table. Block structure and progress are stored as JSONB columns on the same
row, so a program is always read and written as one document.

Writes are conditional on the ``version`` column (optimistic concurrency):
an update that matches no row means another writer got there first.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from supabase import Client

from application.exceptions import ConcurrentModificationError
from application.ports import ProgramScope
from domain.converters import db_row_to_program, program_to_db_row
from domain.models import Program

logger = logging.getLogger(__name__)


class SupabaseProgramRepository:
    """
    Supabase-backed program repository implementation.

    Queries against:
    - programs: Program metadata, JSONB blocks and JSONB current_progress
    """

    TABLE = "programs"

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def find_scoped(self, program_id: str, scope: ProgramScope) -> Optional[Program]:
        """
        Get a program by its ID, restricted to the caller's gym.

        Args:
            program_id: The program's ID
            scope: Gym scope of the caller

        Returns:
            Program if found inside the scope, None otherwise
        """
        query = self._client.table(self.TABLE).select("*").eq("id", program_id)
        if not scope.is_unscoped:
            query = query.eq("gym_id", scope.gym_id)

        response = query.limit(1).execute()
        if not response.data:
            return None
        return db_row_to_program(response.data[0])

    def save(self, program: Program) -> Program:
        """
        Write the whole program if its stored version is unchanged.

        Args:
            program: Program carrying the version it was loaded at

        Returns:
            The stored Program with the incremented version

        Raises:
            ConcurrentModificationError: If no row matched id and version
        """
        expected_version = program.version
        row = program_to_db_row(program)
        row["version"] = expected_version + 1
        row["updated_at"] = datetime.now(timezone.utc).isoformat()

        response = (
            self._client.table(self.TABLE)
            .update(row)
            .eq("id", program.id)
            .eq("version", expected_version)
            .execute()
        )
        if not response.data:
            logger.warning(
                f"Conditional write missed for program {program.id} "
                f"at version {expected_version}"
            )
            raise ConcurrentModificationError(program.id, expected_version)

        return db_row_to_program(response.data[0])
