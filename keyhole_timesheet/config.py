"""
Keyhole Timesheet — Centralized configuration.

Loads Sherpa endpoints, the upstream timeout and optional credentials from
.env / the environment. The resulting Settings object is passed explicitly
to the service and adapters; nothing here runs at import time.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

# .env lives at the project root (one level up from keyhole_timesheet/config.py)
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"

DEFAULT_SHERPA_API_URL = "https://keyholekc.com/sherpa"
DEFAULT_SHERPA_ENTRIES_API_URL = "https://keyholekc.com/api"
DEFAULT_TIMEOUT_SECONDS = 10.0
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Engine settings loaded from environment variables."""

    # Sherpa — clients + daily detail endpoints
    SHERPA_API_URL: str = DEFAULT_SHERPA_API_URL
    # Sherpa — weekly summary endpoint
    SHERPA_ENTRIES_API_URL: str = DEFAULT_SHERPA_ENTRIES_API_URL
    SHERPA_TIMEOUT_SECONDS: float = DEFAULT_TIMEOUT_SECONDS

    # Credentials for the env-backed identity provider (optional)
    SHERPA_TOKEN: str = ""
    SHERPA_USER_ID: str = ""
    SHERPA_JSESSIONID: str = ""

    LOG_LEVEL: str = "INFO"

    @field_validator("SHERPA_API_URL", "SHERPA_ENTRIES_API_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("SHERPA_TIMEOUT_SECONDS", mode="before")
    @classmethod
    def parse_timeout(cls, v: str | float) -> float:
        timeout = float(v)
        if timeout <= 0:
            raise ValueError("SHERPA_TIMEOUT_SECONDS must be positive")
        return timeout

    @field_validator("LOG_LEVEL")
    @classmethod
    def upper_level(cls, v: str) -> str:
        level = v.strip().upper() or "INFO"
        if level not in _LOG_LEVELS:
            choices = ", ".join(_LOG_LEVELS)
            raise ValueError(f"LOG_LEVEL must be one of {choices}, not {v!r}")
        return level


def load_settings(env_path: Path | None = None) -> Settings:
    """Load settings from .env and the process environment."""
    load_dotenv(env_path or _ENV_PATH)

    return Settings(
        SHERPA_API_URL=os.getenv("SHERPA_API_URL", DEFAULT_SHERPA_API_URL),
        SHERPA_ENTRIES_API_URL=os.getenv(
            "SHERPA_ENTRIES_API_URL", DEFAULT_SHERPA_ENTRIES_API_URL,
        ),
        SHERPA_TIMEOUT_SECONDS=os.getenv(
            "SHERPA_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS),
        ),
        SHERPA_TOKEN=os.getenv("SHERPA_TOKEN", ""),
        SHERPA_USER_ID=os.getenv("SHERPA_USER_ID", ""),
        SHERPA_JSESSIONID=os.getenv("SHERPA_JSESSIONID", ""),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
    )
