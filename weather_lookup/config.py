# ABOUTME: Environment-driven settings for the lookup service and its client.
# ABOUTME: pydantic-settings reads upper-case environment variables and an optional .env file.

import logging
from pathlib import Path
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseSettings):
    """Runtime configuration. Each field is read from its upper-case environment variable."""

    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    host: str = "0.0.0.0"
    port: int = 5000
    app_env: str = "development"
    static_dir: Path = Path("client/dist")
    geocoding_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    http_timeout_seconds: float = 10.0
    cors_allow_origins: Annotated[list[str], NoDecode] = ["*"]
    log_level: str = "INFO"
    weather_api_url: str = "http://localhost:5000"
    recent_searches_path: Path = Path("~/.weather_lookup/storage.json")

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("weather_api_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs to avoid double slashes."""
        return v.rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


def configure_logging(level: str = "INFO") -> None:
    """Install the root log format once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level.upper())
