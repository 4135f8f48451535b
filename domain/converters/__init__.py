"""
Domain converters for the Program model.

- db_row_to_program: Database row (from Supabase) -> Program
- program_to_db_row: Program -> Database row (for persistence)

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import db_row_to_program, program_to_db_row

    >>> program = db_row_to_program(row)
    >>> row = program_to_db_row(program)
"""

from domain.converters.db_converters import db_row_to_program, program_to_db_row

__all__ = [
    "db_row_to_program",
    "program_to_db_row",
]
