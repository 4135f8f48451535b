"""
FastAPI Dependency Providers for the Program Progression API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings come from the app they were created with (app.state.settings)
- Supabase client is cached per-process (lru_cache)
- Repository and use case providers create new instances per-request
- Auth providers wrap backend.auth validation

Usage in routers:
    from api.deps import get_program_progress_use_case, get_program_scope

    @router.post("/{program_id}/progress/advance")
    def advance(
        program_id: str,
        scope: ProgramScope = Depends(get_program_scope),
        use_case: ProgramProgressUseCase = Depends(get_program_progress_use_case),
    ):
        return use_case.advance(program_id, scope)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_program_repo] = lambda: FakeProgramRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request
from supabase import Client, create_client

from application.ports import ProgramRepository, ProgramScope
from application.use_cases import ProgramProgressUseCase, UpdateProgramStructureUseCase
from backend.auth import AuthenticatedUser, authenticate
from backend.settings import Settings, get_settings as _get_settings
from infrastructure.db import SupabaseProgramRepository


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings(request: Request) -> Settings:
    """
    Get application settings.

    Returns the Settings instance the app was created with, falling back to
    the cached Settings from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def _create_supabase_client(url: str, key: str) -> Client:
    return create_client(url, key)


def get_supabase_client(settings: Settings = Depends(get_settings)) -> Optional[Client]:
    """
    Get Supabase client instance (cached per URL/key).

    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    if not settings.supabase_url or not settings.supabase_key:
        return None

    return _create_supabase_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required(
    client: Optional[Client] = Depends(get_supabase_client),
) -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.
    Raises HTTPException 503 if database is not available.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_program_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProgramRepository:
    """
    Get ProgramRepository implementation.

    Returns a SupabaseProgramRepository instance with injected client.
    The return type is the Protocol to enable easy mocking.

    Args:
        client: Supabase client (injected)

    Returns:
        ProgramRepository: Repository for program persistence
    """
    return SupabaseProgramRepository(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_program_progress_use_case(
    program_repo: ProgramRepository = Depends(get_program_repo),
    settings: Settings = Depends(get_settings),
) -> ProgramProgressUseCase:
    """Get ProgramProgressUseCase with injected repository and retry budget."""
    return ProgramProgressUseCase(
        program_repo=program_repo,
        max_retries=settings.progress_max_retries,
    )


def get_update_program_structure_use_case(
    program_repo: ProgramRepository = Depends(get_program_repo),
) -> UpdateProgramStructureUseCase:
    """Get UpdateProgramStructureUseCase with injected repository."""
    return UpdateProgramStructureUseCase(program_repo=program_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """
    Get the current authenticated user.

    Returns:
        AuthenticatedUser: Caller identity, type and gym

    Raises:
        HTTPException: 401 if authentication fails
    """
    return authenticate(authorization, x_api_key, settings)


def get_program_scope(
    user: AuthenticatedUser = Depends(get_current_user),
) -> ProgramScope:
    """
    Resolve which programs the caller may see.

    Admins are unscoped. Every other user type is limited to its own gym.

    Raises:
        HTTPException: 403 if a non-admin caller has no gym
    """
    if user.is_admin:
        return ProgramScope.unscoped()
    if not user.gym_id:
        raise HTTPException(
            status_code=403,
            detail="User is not associated with a gym",
        )
    return ProgramScope.for_gym(user.gym_id)


# =============================================================================
# Exports
# =============================================================================

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
