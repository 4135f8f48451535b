"""
Infrastructure Layer for the Program Progression API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

from infrastructure.db import SupabaseProgramRepository

__all__ = [
    "SupabaseProgramRepository",
]
