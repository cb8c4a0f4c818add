import pytest
from pydantic import ValidationError

from openweather_tool.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, WeatherSettings


def test_from_env_reads_api_key(monkeypatch):
    monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "env_key")
    monkeypatch.delenv("OPENWEATHERMAP_BASE_URL", raising=False)
    monkeypatch.delenv("OPENWEATHERMAP_TIMEOUT", raising=False)

    settings = WeatherSettings.from_env()

    assert settings.api_key == "env_key"
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT


def test_from_env_empty_key_is_unset(monkeypatch):
    monkeypatch.setenv("OPENWEATHERMAP_API_KEY", "")

    assert WeatherSettings.from_env().api_key is None


def test_from_env_base_url_and_timeout(monkeypatch):
    monkeypatch.setenv("OPENWEATHERMAP_BASE_URL", "https://owm.example.test/data/2.5/")
    monkeypatch.setenv("OPENWEATHERMAP_TIMEOUT", "2.5")

    settings = WeatherSettings.from_env()

    assert settings.base_url == "https://owm.example.test/data/2.5"
    assert settings.timeout == 2.5


def test_timeout_can_be_disabled(monkeypatch):
    monkeypatch.setenv("OPENWEATHERMAP_TIMEOUT", "none")

    assert WeatherSettings.from_env().timeout is None


def test_settings_are_read_only():
    settings = WeatherSettings(api_key="k")

    with pytest.raises(ValidationError):
        settings.api_key = "other"
