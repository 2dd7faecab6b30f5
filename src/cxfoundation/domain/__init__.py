"""Date domain: calendar provider, formatters, components and ``CXDate``."""

from __future__ import annotations

from .calendar import DAYS_PER_WEEK, Calendar, CalendarField, SymbolStyle
from .components import (
    DateComponent,
    DateComponentType,
    DayComponent,
    MonthComponent,
    YearComponent,
)
from .cxdate import Clock, CXDate
from .formatting import DateFormatter
from .identifiable import IdentifiableDate, identified

__all__ = [
    "DAYS_PER_WEEK",
    "CXDate",
    "Calendar",
    "CalendarField",
    "Clock",
    "DateComponent",
    "DateComponentType",
    "DateFormatter",
    "DayComponent",
    "IdentifiableDate",
    "MonthComponent",
    "SymbolStyle",
    "YearComponent",
    "identified",
]
