"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "JWT_SECRET",
    "API_KEYS",
    "PROGRESS_MAX_RETRIES",
    "CORS_ALLOWED_ORIGINS",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        """Default environment should be development."""
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_supabase_fields_default_to_none(self, clean_env):
        """Supabase fields should default to None."""
        settings = Settings(_env_file=None)
        assert settings.supabase_url is None
        assert settings.supabase_service_role_key is None
        assert settings.supabase_anon_key is None

    def test_jwt_defaults(self, clean_env):
        """JWT secret and algorithm should have default values."""
        settings = Settings(_env_file=None)
        assert settings.jwt_secret == "ironlogic-jwt-secret-change-in-production"
        assert settings.jwt_algorithm == "HS256"

    def test_progress_max_retries_default(self, clean_env):
        """Progress transitions retry three times by default."""
        settings = Settings(_env_file=None)
        assert settings.progress_max_retries == 3

    def test_sentry_dsn_default_to_none(self, clean_env):
        """Sentry DSN should default to None."""
        settings = Settings(_env_file=None)
        assert settings.sentry_dsn is None


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings validation behavior."""

    def test_valid_environments_accepted(self):
        """Valid environment values should be accepted."""
        for env in ["development", "staging", "production", "test"]:
            settings = Settings(environment=env)
            assert settings.environment == env

    def test_environment_case_insensitive(self):
        """Environment validation should be case-insensitive."""
        settings = Settings(environment="PRODUCTION")
        assert settings.environment == "production"

    def test_invalid_environment_raises_error(self):
        """Invalid environment should raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(environment="invalid")
        assert "Invalid environment" in str(exc_info.value)

    def test_progress_max_retries_bounds(self):
        """Retry budget must be between 1 and 10."""
        with pytest.raises(ValidationError):
            Settings(progress_max_retries=0)
        with pytest.raises(ValidationError):
            Settings(progress_max_retries=11)

    def test_progress_max_retries_from_env(self, monkeypatch):
        monkeypatch.setenv("PROGRESS_MAX_RETRIES", "5")
        settings = Settings(_env_file=None)
        assert settings.progress_max_retries == 5


@pytest.mark.unit
class TestSettingsProperties:
    """Test Settings computed properties."""

    def test_supabase_key_prefers_service_role(self, clean_env):
        """supabase_key should prefer service role key over anon key."""
        settings = Settings(
            _env_file=None,
            supabase_service_role_key="service-key",
            supabase_anon_key="anon-key",
        )
        assert settings.supabase_key == "service-key"

    def test_supabase_key_falls_back_to_anon(self, clean_env):
        """supabase_key should fall back to anon key if no service role."""
        settings = Settings(
            _env_file=None,
            supabase_service_role_key=None,
            supabase_anon_key="anon-key",
        )
        assert settings.supabase_key == "anon-key"

    def test_supabase_key_returns_none_if_neither(self, clean_env):
        """supabase_key should return None if no keys set."""
        settings = Settings(_env_file=None)
        assert settings.supabase_key is None

    def test_api_keys_list_parses_comma_separated(self):
        """api_keys_list should parse comma-separated keys."""
        settings = Settings(api_keys="key1, key2, key3")
        assert settings.api_keys_list == ["key1", "key2", "key3"]

    def test_api_keys_list_handles_empty(self):
        """api_keys_list should handle empty string."""
        settings = Settings(api_keys="")
        assert settings.api_keys_list == []

    def test_cors_allowed_origins_list(self):
        """cors_allowed_origins_list should parse and strip origins."""
        settings = Settings(cors_allowed_origins=" https://a.example , https://b.example ,")
        assert settings.cors_allowed_origins_list == ["https://a.example", "https://b.example"]

    def test_is_production_property(self):
        """is_production should return True only in production."""
        assert Settings(environment="production").is_production is True
        assert Settings(environment="development").is_production is False

    def test_is_development_property(self):
        """is_development should return True only in development."""
        assert Settings(environment="development").is_development is True
        assert Settings(environment="production").is_development is False

    def test_is_test_property(self):
        """is_test should return True only in test environment."""
        assert Settings(environment="test").is_test is True
        assert Settings(environment="development").is_test is False


@pytest.mark.unit
class TestGetSettings:
    """Test get_settings() function."""

    def test_get_settings_returns_settings_instance(self):
        """get_settings() should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_is_cached(self):
        """get_settings() should return the same cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
