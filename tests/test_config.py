"""Tests for the config module."""

from expandkit.config import Settings, _parse_cors_origins


class TestParseCorsOrigins:
    """Test CORS origins parsing."""

    def test_parse_cors_origins_with_value(self, monkeypatch):
        """Test parsing CORS origins from environment variable."""
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://localhost:3000,http://localhost:8080")
        result = _parse_cors_origins()
        assert result == ["http://localhost:3000", "http://localhost:8080"]

    def test_parse_cors_origins_without_value(self, monkeypatch):
        """Test default CORS origins when not set."""
        monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
        assert _parse_cors_origins() == ["*"]

    def test_parse_cors_origins_empty_string(self, monkeypatch):
        """Test parsing empty CORS origins defaults to wildcard."""
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "")
        assert _parse_cors_origins() == ["*"]


class TestSettings:
    """Test Settings configuration."""

    def test_settings_with_custom_values(self):
        """Test Settings initialization with explicit values."""
        settings = Settings(
            settings_file_name="project.ini",
            settings_section="release",
            release_notes_file_name="HISTORY.md",
            ignore_case=True,
            tab_size=8,
            log_level="DEBUG",
            port=9000,
        )

        assert settings.settings_file_name == "project.ini"
        assert settings.settings_section == "release"
        assert settings.release_notes_file_name == "HISTORY.md"
        assert settings.ignore_case is True
        assert settings.tab_size == 8
        assert settings.log_level == "DEBUG"
        assert settings.port == 9000

    def test_settings_types(self):
        """Test that default settings have the expected types."""
        settings = Settings()

        assert isinstance(settings.settings_file_name, str)
        assert isinstance(settings.settings_section, str)
        assert isinstance(settings.ignore_case, bool)
        assert isinstance(settings.tab_size, int)
        assert isinstance(settings.cors_allow_origins, list)
