"""Date components: validated year, month and day values.

Components are immutable. Months and days may carry a copy of their coarser
component (day -> month -> year) so that comparisons and lookups are year-aware.
Validity is advisory: any integer is accepted and simply reports ``is_valid == False``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from functools import total_ordering
from typing import TYPE_CHECKING, Protocol

from cxfoundation.domain.calendar import DAYS_PER_WEEK, Calendar, CalendarField, SymbolStyle

if TYPE_CHECKING:
    from datetime import datetime

MONTHS_PER_YEAR = 12
MAX_DAYS_PER_MONTH = 31


class DateComponentType(StrEnum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"


class DateComponent(Protocol):
    """Shared contract of the year, month and day components (and ``CXDate``)."""

    @property
    def is_valid(self) -> bool: ...

    @property
    def id(self) -> str: ...

    def date(self, calendar: Calendar | None = None) -> datetime | None: ...


@dataclass(frozen=True, slots=True, order=True)
class YearComponent:
    value: int

    @classmethod
    def empty(cls) -> YearComponent:
        return cls(0)

    @classmethod
    def from_timestamp(cls, value: datetime, calendar: Calendar | None = None) -> YearComponent:
        calendar = calendar or Calendar.current()
        return cls(calendar.component(CalendarField.YEAR, value))

    @property
    def is_valid(self) -> bool:
        return self.value > 0

    @property
    def id(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return str(self.value)

    def date(self, calendar: Calendar | None = None) -> datetime | None:
        return (calendar or Calendar.current()).date_from_components(self.value)


@total_ordering
@dataclass(frozen=True, slots=True)
class MonthComponent:
    """A month number, optionally bound to its year.

    ``symbol`` holds a localized month name when one was requested explicitly; it is
    used for rendering only and takes no part in equality or ordering.
    """

    value: int
    year: YearComponent | None = None
    symbol: str | None = field(default=None, compare=False)

    @classmethod
    def empty(cls) -> MonthComponent:
        return cls(0, YearComponent.empty())

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        *,
        style: SymbolStyle | None = None,
        calendar: Calendar | None = None,
    ) -> MonthComponent:
        return cls(month, YearComponent(year), _month_symbol(month, style, calendar))

    @classmethod
    def from_timestamp(
        cls,
        value: datetime,
        calendar: Calendar | None = None,
        *,
        style: SymbolStyle | None = None,
    ) -> MonthComponent:
        calendar = calendar or Calendar.current()
        month = calendar.component(CalendarField.MONTH, value)
        return cls(
            month,
            YearComponent.from_timestamp(value, calendar),
            _month_symbol(month, style, calendar),
        )

    @classmethod
    def named(
        cls,
        month: int,
        style: SymbolStyle,
        calendar: Calendar | None = None,
    ) -> MonthComponent:
        """A month without a year, rendered with the calendar's month symbol."""
        return cls(month, symbol=_month_symbol(month, style, calendar))

    @property
    def is_valid(self) -> bool:
        if self.year is not None and not self.year.is_valid:
            return False
        return 1 <= self.value <= MONTHS_PER_YEAR

    @property
    def id(self) -> str:
        if self.year is None:
            return str(self)
        return f"{self.year.id}-{self}"

    def __str__(self) -> str:
        return str(self.value) if self.symbol is None else self.symbol

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonthComponent):
            return NotImplemented
        if self.year is not None and other.year is not None and self.year != other.year:
            return self.year < other.year
        return self.value < other.value

    def date(self, calendar: Calendar | None = None) -> datetime | None:
        if self.year is None:
            return None
        return (calendar or Calendar.current()).date_from_components(self.year.value, self.value)


@total_ordering
@dataclass(frozen=True, slots=True)
class DayComponent:
    """A day number, optionally bound to its month.

    Validity only checks ``1..31``; it does not know how long the month is. Use
    :meth:`days_in_month` when calendar-correct days are needed.
    """

    value: int
    month: MonthComponent | None = None

    @classmethod
    def empty(cls) -> DayComponent:
        return cls(0, MonthComponent.empty())

    @classmethod
    def of(cls, month: MonthComponent, day: int) -> DayComponent:
        return cls(day, month)

    @classmethod
    def from_timestamp(cls, value: datetime, calendar: Calendar | None = None) -> DayComponent:
        calendar = calendar or Calendar.current()
        return cls(
            calendar.component(CalendarField.DAY, value),
            MonthComponent.from_timestamp(value, calendar),
        )

    @classmethod
    def days_in_month(cls, calendar: Calendar, reference: datetime) -> list[DayComponent]:
        """Every day of the month containing ``reference``, in order."""
        days = calendar.range_of_days(reference)
        if days is None:
            return []
        month = MonthComponent.from_timestamp(reference, calendar)
        return [cls(day, month) for day in days]

    @staticmethod
    def leading_blank_count(calendar: Calendar, reference: datetime) -> int:
        """Number of empty grid cells before day 1 of the month containing ``reference``."""
        first = calendar.start_of_month(reference)
        weekday = calendar.component(CalendarField.WEEKDAY, first)
        return (weekday - calendar.first_weekday) % DAYS_PER_WEEK

    @property
    def year(self) -> YearComponent | None:
        return None if self.month is None else self.month.year

    @property
    def is_valid(self) -> bool:
        if self.month is not None and not self.month.is_valid:
            return False
        return 1 <= self.value <= MAX_DAYS_PER_MONTH

    @property
    def id(self) -> str:
        if self.month is None:
            return str(self)
        return f"{self.month.id}-{self}"

    def __str__(self) -> str:
        return str(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DayComponent):
            return NotImplemented
        if self.month is not None and other.month is not None:
            # months without a year may be unordered against dated ones
            if self.month < other.month:
                return True
            if other.month < self.month:
                return False
        return self.value < other.value

    def date(self, calendar: Calendar | None = None) -> datetime | None:
        year = self.year
        if self.month is None or year is None:
            return None
        return (calendar or Calendar.current()).date_from_components(
            year.value, self.month.value, self.value
        )


def _month_symbol(month: int, style: SymbolStyle | None, calendar: Calendar | None) -> str | None:
    if style is None:
        return None
    return (calendar or Calendar.current()).month_symbol(month, style)


__all__ = [
    "DateComponent",
    "DateComponentType",
    "DayComponent",
    "MonthComponent",
    "YearComponent",
]
