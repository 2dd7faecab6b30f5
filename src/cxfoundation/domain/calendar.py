"""Gregorian calendar provider backed by the standard library.

The calendar only answers pure queries: field extraction, timestamp construction
from partial fields, month ranges and localized symbol tables. Lookups that cannot
be resolved return ``None`` (or an empty string for symbols) instead of raising.
"""

from __future__ import annotations

from calendar import day_abbr, day_name, month_abbr, month_name, monthrange
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from cxfoundation.common import EMPTY, safe_get
from cxfoundation.config import DEFAULT_FIRST_WEEKDAY, get_calendar_config

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import tzinfo

log = getLogger(__name__)

DAYS_PER_WEEK = 7


class CalendarField(StrEnum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    WEEKDAY = "weekday"


class SymbolStyle(StrEnum):
    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True, slots=True)
class Calendar:
    """Gregorian calendar, optionally pinned to a timezone.

    Weekdays are numbered 1 (Sunday) through 7 (Saturday). ``first_weekday`` uses the
    same numbering and only affects grid layout helpers.
    """

    timezone: tzinfo | None = None
    first_weekday: int = DEFAULT_FIRST_WEEKDAY

    def __post_init__(self) -> None:
        if not 1 <= self.first_weekday <= DAYS_PER_WEEK:
            raise ValueError(f"first_weekday must be between 1 and 7, got {self.first_weekday}")

    @classmethod
    def current(cls) -> Calendar:
        """Return the calendar described by the environment configuration."""
        config = get_calendar_config()
        return cls(timezone=config.timezone, first_weekday=config.first_weekday)

    def localize(self, value: datetime) -> datetime:
        """Express an aware timestamp in this calendar's timezone."""
        if self.timezone is None or value.tzinfo is None:
            return value
        return value.astimezone(self.timezone)

    def component(self, field: CalendarField, value: datetime) -> int:
        local = self.localize(value)
        match field:
            case CalendarField.YEAR:
                return local.year
            case CalendarField.MONTH:
                return local.month
            case CalendarField.DAY:
                return local.day
            case CalendarField.WEEKDAY:
                # isoweekday: Monday=1 .. Sunday=7
                return local.isoweekday() % DAYS_PER_WEEK + 1

    def components(self, value: datetime) -> tuple[int, int, int]:
        """Return ``(year, month, day)`` of ``value``."""
        local = self.localize(value)
        return local.year, local.month, local.day

    def date_from_components(
        self,
        year: int,
        month: int | None = None,
        day: int | None = None,
    ) -> datetime | None:
        """Build the start of the given (partial) date, or ``None`` if it does not exist."""
        try:
            return datetime(
                year,
                1 if month is None else month,
                1 if day is None else day,
                tzinfo=self.timezone,
            )
        except (ValueError, OverflowError):
            log.debug("Calendar could not resolve year=%s month=%s day=%s", year, month, day)
            return None

    def start_of_month(self, value: datetime) -> datetime:
        return self.localize(value).replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    def start_of_year(self, value: datetime) -> datetime:
        return self.start_of_month(value).replace(month=1)

    def range_of_days(self, value: datetime) -> range | None:
        """Return the valid day numbers of the month containing ``value``."""
        year, month, _ = self.components(value)
        try:
            _, days = monthrange(year, month)
        except ValueError:
            log.debug("Calendar could not resolve month range for %s-%s", year, month)
            return None
        return range(1, days + 1)

    def is_same(self, first: datetime, second: datetime, fields: Iterable[CalendarField]) -> bool:
        return all(
            self.component(field, first) == self.component(field, second) for field in fields
        )

    def is_same_month_in_year(self, first: datetime, second: datetime) -> bool:
        return self.is_same(first, second, (CalendarField.YEAR, CalendarField.MONTH))

    def is_same_day(self, first: datetime, second: datetime) -> bool:
        return self.is_same(
            first, second, (CalendarField.YEAR, CalendarField.MONTH, CalendarField.DAY)
        )

    def month_symbols(self, style: SymbolStyle) -> list[str]:
        """Localized month names, January first."""
        table = month_abbr if style is SymbolStyle.SHORT else month_name
        return list(table)[1:]

    def month_symbol(self, month: int, style: SymbolStyle) -> str:
        return safe_get(self.month_symbols(style), month - 1) or EMPTY

    def weekday_symbols(self, style: SymbolStyle) -> list[str]:
        """Localized weekday names, Sunday first."""
        table = list(day_abbr if style is SymbolStyle.SHORT else day_name)
        return table[-1:] + table[:-1]


__all__ = ["DAYS_PER_WEEK", "Calendar", "CalendarField", "SymbolStyle"]
