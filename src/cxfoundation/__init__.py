from __future__ import annotations

from importlib import metadata

from cxfoundation.domain import (
    Calendar,
    CXDate,
    DateComponentType,
    DateFormatter,
    DayComponent,
    MonthComponent,
    SymbolStyle,
    YearComponent,
)

try:
    __version__ = metadata.version("cxfoundation")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "CXDate",
    "Calendar",
    "DateComponentType",
    "DateFormatter",
    "DayComponent",
    "MonthComponent",
    "SymbolStyle",
    "YearComponent",
    "__version__",
]
