import pytest

from imagery_ui.config import DEFAULT_API_BASE, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("IMAGERY_API_BASE", "IMAGERY_REQUEST_TIMEOUT", "IMAGERY_DEFAULT_SAVE", "IMAGERY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()

    assert settings.api_base == DEFAULT_API_BASE
    assert settings.process_url == "http://localhost:8000/api/process"
    assert settings.request_timeout == 180.0
    assert settings.default_save is True
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("IMAGERY_API_BASE", "https://imagery.example.com/")
    monkeypatch.setenv("IMAGERY_REQUEST_TIMEOUT", "30")
    monkeypatch.setenv("IMAGERY_DEFAULT_SAVE", "false")
    monkeypatch.setenv("IMAGERY_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.process_url == "https://imagery.example.com/api/process"
    assert settings.request_timeout == 30.0
    assert settings.default_save is False
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["soon", "0", "-5"])
def test_invalid_timeout_is_rejected(monkeypatch, value):
    monkeypatch.setenv("IMAGERY_REQUEST_TIMEOUT", value)

    with pytest.raises(ValueError, match="IMAGERY_REQUEST_TIMEOUT"):
        load_settings()
