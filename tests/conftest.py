"""
Pytest fixtures for program-api tests.
"""

from datetime import datetime, timezone
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import get_current_user, get_program_repo
from backend.auth import AuthenticatedUser, UserType
from backend.main import create_app
from backend.settings import Settings
from domain.models import ProgressRecord
from tests.fakes import FakeProgramRepository, build_program


# ---------------------------------------------------------------------------
# Auth Mocks
# ---------------------------------------------------------------------------

TEST_GYM_ID = "gym-1"
OTHER_GYM_ID = "gym-2"

COACH = AuthenticatedUser(user_id="coach-1", user_type=UserType.COACH, gym_id=TEST_GYM_ID)
ADMIN = AuthenticatedUser(user_id="admin-1", user_type=UserType.ADMIN)
GYMLESS_CLIENT = AuthenticatedUser(user_id="client-9", user_type=UserType.CLIENT)

STARTED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


async def mock_get_current_user() -> AuthenticatedUser:
    """Mock auth dependency that returns a coach of TEST_GYM_ID."""
    return COACH


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        jwt_secret="test-jwt-secret",
        api_keys="sk_test_key",
        _env_file=None,
    )


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient with the real auth dependency.
    Properly cleans up dependency overrides after each test.
    """
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "test-supabase-key")
    monkeypatch.setenv("ENVIRONMENT", "test")


# ---------------------------------------------------------------------------
# Domain Fixtures - Programs
# ---------------------------------------------------------------------------


@pytest.fixture
def program():
    """Not-started program with two blocks of 2 and 3 weeks."""
    return build_program(week_counts=[2, 3])


@pytest.fixture
def started_program():
    """Program [2, 3] started at block 0, week 0."""
    return build_program(
        week_counts=[2, 3],
        progress=ProgressRecord(started_at=STARTED_AT),
    )


@pytest.fixture
def empty_program():
    """Program with no blocks."""
    return build_program(program_id="program-empty", week_counts=[])


@pytest.fixture
def other_gym_program():
    """Program belonging to another gym."""
    return build_program(program_id="program-other", gym_id=OTHER_GYM_ID)


# ---------------------------------------------------------------------------
# Fake Repository Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_program_repo():
    """Create a fake program repository for testing."""
    return FakeProgramRepository()


@pytest.fixture
def seeded_program_repo(fake_program_repo, program, empty_program, other_gym_program):
    """Fake program repository pre-seeded with test programs."""
    fake_program_repo.seed([program, empty_program, other_gym_program])
    return fake_program_repo


@pytest.fixture
def client_with_seeded_repo(app, seeded_program_repo) -> Generator[TestClient, None, None]:
    """TestClient authenticated as a gym-1 coach, backed by the seeded fake repository."""
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_program_repo] = lambda: seeded_program_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
