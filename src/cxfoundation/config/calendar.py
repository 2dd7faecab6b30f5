"""Calendar and formatting defaults read from the environment."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .env import parse_int_var, read_env_vars
from .errors import InvalidConfigurationError

if TYPE_CHECKING:
    from datetime import tzinfo

TIMEZONE_VAR = "CXFOUNDATION_TIMEZONE"
FIRST_WEEKDAY_VAR = "CXFOUNDATION_FIRST_WEEKDAY"
DATE_PATTERN_VAR = "CXFOUNDATION_DATE_PATTERN"

DEFAULT_FIRST_WEEKDAY = 1  # Sunday
DEFAULT_DATE_PATTERN = "{date.year:04d}-{date.month:02d}-{date.day:02d}"

_SAMPLE_TIMESTAMP = datetime(2001, 2, 3, 4, 5, 6)


@dataclass(frozen=True, slots=True)
class CalendarConfig:
    timezone: tzinfo | None = None
    first_weekday: int = DEFAULT_FIRST_WEEKDAY
    date_pattern: str = DEFAULT_DATE_PATTERN


def _resolve_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidConfigurationError(
            f"{TIMEZONE_VAR} names an unknown timezone: {name!r}"
        ) from exc


def validate_date_pattern(pattern: str) -> str:
    """Return ``pattern`` if it renders a timestamp bound to ``date``, else raise ``ValueError``.

    A pattern without any replacement field (such as ``yyyy-MM-dd``) would print the
    same literal text for every date and is rejected too.
    """

    if "{" not in pattern:
        raise ValueError(f"Date pattern has no replacement field: {pattern!r}")
    try:
        pattern.format(date=_SAMPLE_TIMESTAMP)
    except (KeyError, IndexError, AttributeError, TypeError, ValueError) as exc:
        raise ValueError(f"Date pattern cannot format a date: {pattern!r} ({exc!r})") from exc
    return pattern


def _resolve_date_pattern(raw: str) -> str:
    try:
        return validate_date_pattern(raw)
    except ValueError as exc:
        raise InvalidConfigurationError(f"{DATE_PATTERN_VAR}: {exc}") from exc


def get_calendar_config() -> CalendarConfig:
    values = read_env_vars((TIMEZONE_VAR, FIRST_WEEKDAY_VAR, DATE_PATTERN_VAR))

    timezone = _resolve_timezone(values[TIMEZONE_VAR]) if TIMEZONE_VAR in values else None
    first_weekday = (
        parse_int_var(FIRST_WEEKDAY_VAR, values[FIRST_WEEKDAY_VAR], lower=1, upper=7)
        if FIRST_WEEKDAY_VAR in values
        else DEFAULT_FIRST_WEEKDAY
    )
    return CalendarConfig(
        timezone=timezone,
        first_weekday=first_weekday,
        date_pattern=(
            _resolve_date_pattern(values[DATE_PATTERN_VAR])
            if DATE_PATTERN_VAR in values
            else DEFAULT_DATE_PATTERN
        ),
    )
