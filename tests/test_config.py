"""Tests for settings loading."""
from nairim.config import Settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.default_page_size == 10
        assert settings.max_page_size == 100
        assert settings.geocoding_concurrency == 3
        assert settings.dashboard_max_range_days == 365

    def test_environment_override(self, monkeypatch) -> None:
        monkeypatch.setenv("GEOCODING_CONCURRENCY", "5")
        monkeypatch.setenv("GEOCODING_USER_AGENT", "Test/2.0")
        settings = Settings(_env_file=None)
        assert settings.geocoding_concurrency == 5
        assert settings.geocoding_user_agent == "Test/2.0"
