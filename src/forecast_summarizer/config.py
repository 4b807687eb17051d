"""Application configuration."""
from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = "nws-forecast-summarizer (forecast-summarizer@example.com)"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

Port = Annotated[int, Field(ge=0, le=65535)]


class Settings(BaseSettings):
    log_level: str
    api_host: str
    api_port: Port
    metrics_host: str
    metrics_port: Port
    ollama_host: str
    ollama_port: Port
    ollama_model: str
    weather_ua: str = DEFAULT_USER_AGENT

    class Config:
        env_prefix = ""

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"{value} is not a valid log level")
        return level

    @property
    def ollama_base_url(self) -> str:
        return f"{self.ollama_host.rstrip('/')}:{self.ollama_port}/v1"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
