"""Library configuration helpers."""

from __future__ import annotations

from .calendar import (
    DEFAULT_DATE_PATTERN,
    DEFAULT_FIRST_WEEKDAY,
    CalendarConfig,
    get_calendar_config,
    validate_date_pattern,
)
from .env import read_env_vars
from .errors import ConfigurationError, InvalidConfigurationError
from .logging import configure_logging, get_log_level

__all__ = [
    "DEFAULT_DATE_PATTERN",
    "DEFAULT_FIRST_WEEKDAY",
    "CalendarConfig",
    "ConfigurationError",
    "InvalidConfigurationError",
    "configure_logging",
    "get_calendar_config",
    "get_log_level",
    "read_env_vars",
    "validate_date_pattern",
]
