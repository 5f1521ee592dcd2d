"""Test settings loading."""

import pytest

from tgkeyboards.config import Settings, load_settings
from tgkeyboards.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run without a stray .env file or TGKEYBOARDS_ variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("DEBUG", "LOG_LEVEL", "RESIZE_KEYBOARD", "JSON_INDENT"):
        monkeypatch.delenv(f"TGKEYBOARDS_{name}", raising=False)


def test_default_settings():
    settings = load_settings()

    assert isinstance(settings, Settings)
    assert settings.debug is False
    assert settings.log_level == "INFO"
    assert settings.resize_keyboard is True
    assert settings.json_indent == 2


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TGKEYBOARDS_LOG_LEVEL", "debug")
    monkeypatch.setenv("TGKEYBOARDS_RESIZE_KEYBOARD", "false")

    settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.resize_keyboard is False


def test_settings_from_env_file(tmp_path):
    (tmp_path / ".env").write_text("TGKEYBOARDS_JSON_INDENT=0\n", encoding="utf-8")

    assert load_settings().json_indent == 0


def test_invalid_log_level_raises_configuration_error(monkeypatch):
    monkeypatch.setenv("TGKEYBOARDS_LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError):
        load_settings()


def test_json_indent_bounds():
    with pytest.raises(ConfigurationError):
        load_settings(json_indent=9)
