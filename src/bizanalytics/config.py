"""Environment-based settings."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    ``api_key`` is optional; without it AI insights are disabled and the
    rest of the dashboard keeps working.
    """

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def insights_enabled(self) -> bool:
        return bool(self.api_key)


def _log_level(value: Optional[str]) -> str:
    level = (value or DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def load_settings(use_dotenv: bool = True) -> Settings:
    """Build Settings from the process environment.

    An unrecognised ``BIZANALYTICS_LOG_LEVEL`` falls back to WARNING.

    Args:
        use_dotenv: Load a ``.env`` file found from the working directory first

    Returns:
        Settings instance
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        api_key=os.getenv("API_KEY") or None,
        model=os.getenv("BIZANALYTICS_MODEL", DEFAULT_MODEL),
        log_level=_log_level(os.getenv("BIZANALYTICS_LOG_LEVEL")),
    )
