"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Entry points call get_settings() after
load_dotenv() has run so a project-level .env is respected.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

DEFAULT_API_URL = "http://localhost:5000/api"


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}")
    return value if value > 0 else None


@dataclass
class Settings:
    # Remote task store
    api_url: str = field(
        default_factory=lambda: os.getenv("TASKBOARD_API_URL", DEFAULT_API_URL)
    )
    # None means requests waits indefinitely
    request_timeout: Optional[float] = field(
        default_factory=lambda: _env_float("TASKBOARD_REQUEST_TIMEOUT")
    )

    # Window
    window_title: str = field(
        default_factory=lambda: os.getenv("TASKBOARD_WINDOW_TITLE", "To-Do List")
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("TASKBOARD_LOG_LEVEL", "INFO")
    )
    verbose: bool = field(
        default_factory=lambda: os.getenv("TASKBOARD_VERBOSE", "0") == "1"
    )

    def __post_init__(self) -> None:
        self.api_url = self.api_url.rstrip("/")


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
