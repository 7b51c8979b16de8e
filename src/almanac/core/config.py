"""Environment-driven defaults for the API and CLI."""
from __future__ import annotations

import os
from dataclasses import dataclass

ENV_CALENDAR = "ALMANAC_CALENDAR"
ENV_DATE_FORMAT = "ALMANAC_DATE_FORMAT"
ENV_LOG_LEVEL = "ALMANAC_LOG_LEVEL"

DEFAULT_CALENDAR = "gregorian"
DEFAULT_DATE_FORMAT = "yyyy-MM-dd"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    calendar: str = DEFAULT_CALENDAR
    date_format: str = DEFAULT_DATE_FORMAT
    log_level: str = DEFAULT_LOG_LEVEL


def _env(name: str, default: str) -> str:
    v = os.environ.get(name, "").strip()
    return v or default


def load_settings() -> Settings:
    """Read settings from the environment; blank values fall back to defaults."""
    return Settings(
        calendar=_env(ENV_CALENDAR, DEFAULT_CALENDAR).lower(),
        date_format=_env(ENV_DATE_FORMAT, DEFAULT_DATE_FORMAT),
        log_level=_env(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper(),
    )
