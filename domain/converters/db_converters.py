"""
Converters: Database row format <-> domain Program.

Provides bidirectional conversion between Supabase database rows
and the Program domain model.

Database schema (programs table):
- id: UUID
- gym_id: Owning gym
- created_by: User who authored the program
- name, description: Author metadata
- is_active: Soft-delete flag
- blocks: JSONB (block -> week -> day -> activity tree)
- current_progress: JSONB (progress cursor)
- version: Integer NOT NULL DEFAULT 0, bumped on every write (optimistic
  concurrency). Conditional writes compare with `=`, which never matches NULL.
- created_at, updated_at: Timestamps
"""

from typing import Any, Dict

from domain.models.program import Program, ProgressRecord

# Columns managed by the database rather than written by the application
_SERVER_MANAGED_COLUMNS = {"created_at", "updated_at"}


def db_row_to_program(row: Dict[str, Any]) -> Program:
    """
    Convert a database row to a domain Program.

    Missing or null ``blocks``/``current_progress`` columns are treated as an
    empty, not-started program. ``version`` must be present.

    Args:
        row: Dictionary representing a row from the programs table.

    Returns:
        Program domain model.

    Raises:
        ValueError: If the row has no version.
        pydantic.ValidationError: If the row does not describe a valid program.
    """
    data = dict(row)
    data["blocks"] = data.get("blocks") or []
    data["current_progress"] = data.get("current_progress") or ProgressRecord.initial()
    if data.get("version") is None:
        raise ValueError(f"Program row {data.get('id')} has no version")
    if data.get("is_active") is None:
        data["is_active"] = True
    return Program.model_validate(data)


def program_to_db_row(program: Program) -> Dict[str, Any]:
    """
    Convert a domain Program to a database row for persistence.

    The whole document (structure and progress) is written together.
    Timestamps are serialized as ISO 8601 strings.

    Args:
        program: Program to persist.

    Returns:
        Dictionary suitable for the programs table.
    """
    return program.model_dump(mode="json", exclude=_SERVER_MANAGED_COLUMNS)
