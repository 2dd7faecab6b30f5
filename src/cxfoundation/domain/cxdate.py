"""``CXDate``: a year, year-month or year-month-day value."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from cxfoundation.common import PLACEHOLDER
from cxfoundation.domain.calendar import Calendar
from cxfoundation.domain.components import (
    DateComponentType,
    DayComponent,
    MonthComponent,
    YearComponent,
)
from cxfoundation.domain.formatting import DateFormatter

if TYPE_CHECKING:
    from cxfoundation.domain.components import DateComponent


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def _now() -> datetime:
    return datetime.now().astimezone()


_GRANULARITIES = (DateComponentType.YEAR, DateComponentType.MONTH, DateComponentType.DAY)


@dataclass(frozen=True, slots=True, order=True)
class CXDate:
    """A calendar date that may be known only down to the year or month.

    Validity is a prefix property: the date is valid as soon as its year is, and the
    month and day only count while every coarser component is valid too. Equality
    and ordering compare ``(year, month, day)``; the calendar and formatter are
    presentation context and take no part in them.

    Replacing a finer component with :meth:`with_month` or :meth:`with_day` also
    replaces the coarser ones from the new component's back-references.

    Omitted ``calendar`` and ``formatter`` arguments are read from the environment
    (``Calendar.current()``, ``DateFormatter.default()``), so a malformed
    ``CXFOUNDATION_*`` setting makes even ``CXDate()`` raise
    ``InvalidConfigurationError``. Pass both explicitly to stay independent of it.
    """

    year: YearComponent = field(default_factory=YearComponent.empty)
    month: MonthComponent = field(default_factory=MonthComponent.empty)
    day: DayComponent = field(default_factory=DayComponent.empty)
    calendar: Calendar = field(default_factory=Calendar.current, compare=False, repr=False)
    formatter: DateFormatter = field(
        default_factory=DateFormatter.default, compare=False, repr=False
    )

    @classmethod
    def _empty(cls, calendar: Calendar | None, formatter: DateFormatter | None) -> CXDate:
        return cls(
            calendar=calendar or Calendar.current(),
            formatter=formatter or DateFormatter.default(),
        )

    @classmethod
    def from_timestamp(
        cls,
        value: datetime,
        calendar: Calendar | None = None,
        formatter: DateFormatter | None = None,
    ) -> CXDate:
        calendar = calendar or Calendar.current()
        return cls.from_day(DayComponent.from_timestamp(value, calendar), calendar, formatter)

    @classmethod
    def from_year(
        cls,
        year: YearComponent,
        calendar: Calendar | None = None,
        formatter: DateFormatter | None = None,
    ) -> CXDate:
        return cls._empty(calendar, formatter).with_year(year)

    @classmethod
    def from_month(
        cls,
        month: MonthComponent,
        calendar: Calendar | None = None,
        formatter: DateFormatter | None = None,
    ) -> CXDate:
        return cls._empty(calendar, formatter).with_month(month)

    @classmethod
    def from_day(
        cls,
        day: DayComponent,
        calendar: Calendar | None = None,
        formatter: DateFormatter | None = None,
    ) -> CXDate:
        return cls._empty(calendar, formatter).with_day(day)

    @classmethod
    def today(
        cls,
        calendar: Calendar | None = None,
        formatter: DateFormatter | None = None,
        *,
        clock: Clock = _now,
    ) -> CXDate:
        return cls.from_timestamp(clock(), calendar, formatter)

    def with_year(self, year: YearComponent) -> CXDate:
        return replace(self, year=year)

    def with_month(self, month: MonthComponent) -> CXDate:
        """Return a copy holding ``month``; its year (if any) replaces the current one."""
        updated = self if month.year is None else self.with_year(month.year)
        return replace(updated, month=month)

    def with_day(self, day: DayComponent) -> CXDate:
        """Return a copy holding ``day``; its month and year (if any) replace the current ones."""
        updated = self if day.month is None else self.with_month(day.month)
        return replace(updated, day=day)

    def updated_valid_components(self, other: CXDate) -> CXDate:
        """Fill the invalid components of this date with those of ``other``.

        Each of year, month and day is decided on its own and no back-references are
        followed, so the result may combine components of both dates.
        """
        return replace(
            self,
            year=self.year if self.year.is_valid else other.year,
            month=self.month if self.month.is_valid else other.month,
            day=self.day if self.day.is_valid else other.day,
        )

    def _valid_prefix(self) -> tuple[DateComponent, ...]:
        prefix: list[DateComponent] = []
        for component in (self.year, self.month, self.day):
            if not component.is_valid:
                break
            prefix.append(component)
        return tuple(prefix)

    @property
    def is_valid(self) -> bool:
        return self.year.is_valid

    @property
    def granularity(self) -> DateComponentType | None:
        """The finest component that is part of the valid prefix."""
        prefix = self._valid_prefix()
        return _GRANULARITIES[len(prefix) - 1] if prefix else None

    def resolved_timestamp(self, calendar: Calendar | None = None) -> datetime | None:
        """Start of the most specific valid prefix, or ``None`` if there is none.

        A prefix the calendar cannot resolve (February 31st) also yields ``None``.
        """
        calendar = calendar or self.calendar
        match self.granularity:
            case DateComponentType.DAY:
                return calendar.date_from_components(
                    self.year.value, self.month.value, self.day.value
                )
            case DateComponentType.MONTH:
                return calendar.date_from_components(self.year.value, self.month.value)
            case DateComponentType.YEAR:
                return calendar.date_from_components(self.year.value)
            case None:
                return None

    def date(self, calendar: Calendar | None = None) -> datetime | None:
        return self.resolved_timestamp(calendar)

    @property
    def timestamp(self) -> datetime | None:
        return self.resolved_timestamp(self.calendar)

    @property
    def formatted_value(self) -> str:
        value = self.timestamp
        if value is None:
            return PLACEHOLDER
        return self.formatter.format(value)

    @property
    def description(self) -> str:
        return "-".join(str(component) for component in self._valid_prefix()) or PLACEHOLDER

    @property
    def id(self) -> str:
        return self.description

    def __str__(self) -> str:
        return self.description


__all__ = ["CXDate", "Clock"]
