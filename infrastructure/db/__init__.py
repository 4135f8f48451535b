"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into services
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseProgramRepository

    client = create_client(url, key)
    program_repo = SupabaseProgramRepository(client)
"""

from infrastructure.db.program_repository import SupabaseProgramRepository

__all__ = [
    "SupabaseProgramRepository",
]
