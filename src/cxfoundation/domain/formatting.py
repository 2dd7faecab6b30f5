"""Timestamp rendering with fixed display patterns.

Patterns are ``str.format`` templates with the timestamp bound to ``date``, so both
``strftime`` directives (``{date:%B}``) and attribute access (``{date.day}``) are
available. Month and weekday names follow the process locale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from cxfoundation.config import DEFAULT_DATE_PATTERN, get_calendar_config, validate_date_pattern

if TYPE_CHECKING:
    from datetime import datetime

DEFAULT_PATTERN: Final[str] = DEFAULT_DATE_PATTERN
ABBREVIATED_MONTH: Final[str] = "{date:%b}"
FULL_MONTH: Final[str] = "{date:%B}"
DAY_OF_WEEK_WITH_MONTH_AND_DAY: Final[str] = "{date:%A}, {date:%B} {date.day}"
FULL_DATE: Final[str] = "{date:%B} {date.day}, {date.year:04d}"
YEAR: Final[str] = "{date.year:04d}"
DAY: Final[str] = "{date.day}"
MONTH_DAY: Final[str] = "{date:%B} {date.day}"


@dataclass(frozen=True, slots=True)
class DateFormatter:
    """Renders timestamps with a fixed pattern.

    The pattern is checked on construction; one that cannot format a date raises
    ``ValueError`` here rather than later from ``format``.
    """

    pattern: str = DEFAULT_PATTERN

    def __post_init__(self) -> None:
        validate_date_pattern(self.pattern)

    @classmethod
    def default(cls) -> DateFormatter:
        """Formatter for the configured canonical pattern (``yyyy-MM-dd`` unless overridden)."""
        return cls(pattern=get_calendar_config().date_pattern)

    def format(self, value: datetime) -> str:
        return self.pattern.format(date=value)


def abbreviated_month(value: datetime) -> str:
    return DateFormatter(ABBREVIATED_MONTH).format(value)


def full_month(value: datetime) -> str:
    return DateFormatter(FULL_MONTH).format(value)


def day_of_week_with_month_and_day(value: datetime) -> str:
    return DateFormatter(DAY_OF_WEEK_WITH_MONTH_AND_DAY).format(value)


def full_date(value: datetime) -> str:
    return DateFormatter(FULL_DATE).format(value)


def year(value: datetime) -> str:
    return DateFormatter(YEAR).format(value)


def day(value: datetime) -> str:
    return DateFormatter(DAY).format(value)


def month_day(value: datetime) -> str:
    return DateFormatter(MONTH_DAY).format(value)


__all__ = [
    "ABBREVIATED_MONTH",
    "DAY",
    "DAY_OF_WEEK_WITH_MONTH_AND_DAY",
    "DEFAULT_PATTERN",
    "FULL_DATE",
    "FULL_MONTH",
    "MONTH_DAY",
    "YEAR",
    "DateFormatter",
    "abbreviated_month",
    "day",
    "day_of_week_with_month_and_day",
    "full_date",
    "full_month",
    "month_day",
    "year",
]
