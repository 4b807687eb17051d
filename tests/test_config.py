import pytest
from pydantic import ValidationError

from forecast_summarizer.config import Settings

ENV = {
    "LOG_LEVEL": "debug",
    "API_HOST": "0.0.0.0",
    "API_PORT": "8080",
    "METRICS_HOST": "0.0.0.0",
    "METRICS_PORT": "8081",
    "OLLAMA_HOST": "http://ollama",
    "OLLAMA_PORT": "11434",
    "OLLAMA_MODEL": "llama3",
}


@pytest.fixture
def env(monkeypatch):
    for key, value in ENV.items():
        monkeypatch.setenv(key, value)
    return monkeypatch


def test_settings_from_env(env):
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.api_port == 8080
    assert settings.metrics_port == 8081
    assert settings.ollama_base_url == "http://ollama:11434/v1"
    assert settings.weather_ua.startswith("nws-forecast-summarizer")


@pytest.mark.parametrize("key", sorted(ENV))
def test_missing_variable_is_fatal(env, key):
    env.delenv(key)
    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.parametrize(
    "key,value",
    [("API_PORT", "http"), ("METRICS_PORT", "70000"), ("OLLAMA_PORT", "-1"), ("LOG_LEVEL", "loud")],
)
def test_malformed_variable_is_fatal(env, key, value):
    env.setenv(key, value)
    with pytest.raises(ValidationError):
        Settings()
