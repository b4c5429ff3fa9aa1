"""Unit tests for application settings configuration."""

from pathlib import Path

from blogrepo.config import Settings


def test_settings_uses_package_env_file_independent_of_cwd():
    """Settings should always include the project-root .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_root_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_root_env in normalized
    assert str(Path(".env")) in normalized


def test_cache_and_sampling_defaults():
    settings = Settings()
    assert settings.article_cache_capacity == 0
    assert settings.random_sampling_offset == 0.1
    assert settings.default_page_size == 20


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("ARTICLE_CACHE_CAPACITY", "250")
    monkeypatch.setenv("LOG_LEVEL_CACHE", "DEBUG")
    settings = Settings()
    assert settings.article_cache_capacity == 250
    assert settings.log_level_cache == "DEBUG"
