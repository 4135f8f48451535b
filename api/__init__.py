"""
API package for the Program API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: HTTP errors for application and domain failures
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_program_repo,
    get_program_progress_use_case,
    get_update_program_structure_use_case,
    get_current_user,
    get_program_scope,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_program_repo",
    # Use cases
    "get_program_progress_use_case",
    "get_update_program_structure_use_case",
    # Authentication
    "get_current_user",
    "get_program_scope",
]
