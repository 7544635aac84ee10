"""Tests for configuration loading."""

from tvdb_catalog.core.config import Settings, load_settings


def test_default_settings():
    """Test that default settings load correctly."""
    settings = Settings()

    assert settings.catalog.base_url == "http://thetvdb.com"
    assert settings.catalog.api_key == ""
    assert settings.catalog.language == "en"
    assert settings.search.max_results == 10
    assert settings.logging.level == "WARNING"


def test_settings_from_env(monkeypatch):
    """Test loading settings from environment variables."""
    monkeypatch.setenv("TVDB_CATALOG__API_KEY", "ABC123")
    monkeypatch.setenv("TVDB_CATALOG__LANGUAGE", "fr")
    monkeypatch.setenv("TVDB_SEARCH__MAX_RESULTS", "3")

    settings = Settings()

    assert settings.catalog.api_key == "ABC123"
    assert settings.catalog.language == "fr"
    assert settings.search.max_results == 3


def test_settings_from_yaml(tmp_path):
    """Test loading settings from a YAML file."""
    path = tmp_path / "config.yaml"
    path.write_text("catalog:\n  api_key: FROMFILE\n  timeout: 5\nlogging:\n  level: DEBUG\n")

    settings = load_settings(path)

    assert settings.catalog.api_key == "FROMFILE"
    assert settings.catalog.timeout == 5
    assert settings.logging.level == "DEBUG"


def test_empty_yaml_uses_defaults(tmp_path):
    """Test that an empty file falls back to defaults."""
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert Settings.from_yaml(path).catalog.language == "en"


def test_load_settings_without_file(tmp_path, monkeypatch):
    """Test that missing config files fall back to defaults."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))

    settings = load_settings(tmp_path / "missing.yaml")

    assert settings.catalog.base_url == "http://thetvdb.com"


def test_configure_logging_accepts_unknown_level():
    """Test that an unknown level name falls back instead of failing."""
    from tvdb_catalog.core.config import LoggingConfig
    from tvdb_catalog.core.logging import configure_logging

    configure_logging(LoggingConfig(level="debug"))
    configure_logging(LoggingConfig(level="not-a-level"))
