# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import re
import sys
from datetime import datetime
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from cxfoundation.config import ConfigurationError, configure_logging
from cxfoundation.domain import (
    DAYS_PER_WEEK,
    Calendar,
    Clock,
    CXDate,
    DateFormatter,
    DayComponent,
    MonthComponent,
    SymbolStyle,
    YearComponent,
)
from cxfoundation.domain.formatting import full_month, year

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

_PARTIAL_DATE = re.compile(r"^(\d{1,4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?$")


def _now() -> datetime:
    return datetime.now().astimezone()


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect partial calendar dates")
    subparsers = parser.add_subparsers(dest="command", required=True)

    describe = subparsers.add_parser("describe", help="Describe a YYYY, YYYY-MM or YYYY-MM-DD date")
    describe.add_argument("value", type=str, help="Date to describe, e.g. 2023 or 2023-01-31")
    describe.add_argument(
        "--month-style",
        choices=[style.value for style in SymbolStyle],
        help="Render the month with its localized name instead of its number",
    )

    month = subparsers.add_parser("month", help="Print a calendar grid for a month")
    month.add_argument(
        "value",
        type=str,
        nargs="?",
        help="Month to print as YYYY-MM (defaults to the current month)",
    )

    return parser.parse_args(list(argv))


def _parse_partial_date(value: str) -> tuple[int, int | None, int | None]:
    match = _PARTIAL_DATE.match(value.strip())
    if match is None:
        raise ValueError(f"Invalid partial date: {value!r} (expected YYYY, YYYY-MM or YYYY-MM-DD)")
    year_text, month_text, day_text = match.groups()
    return (
        int(year_text),
        int(month_text) if month_text else None,
        int(day_text) if day_text else None,
    )


def build_date(
    value: str,
    *,
    calendar: Calendar,
    formatter: DateFormatter | None = None,
    style: SymbolStyle | None = None,
) -> CXDate:
    """Build a ``CXDate`` from ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD`` text.

    Out of range numbers are kept and simply produce an invalid component.
    """
    year_value, month_value, day_value = _parse_partial_date(value)
    date = CXDate.from_year(YearComponent(year_value), calendar, formatter)
    if month_value is None:
        return date
    month = MonthComponent.of(year_value, month_value, style=style, calendar=calendar)
    date = date.with_month(month)
    if day_value is None:
        return date
    return date.with_day(DayComponent.of(month, day_value))


def describe_lines(date: CXDate) -> list[str]:
    granularity = date.granularity
    return [
        f"description: {date.description}",
        f"formatted:   {date.formatted_value}",
        f"valid:       {'yes' if date.is_valid else 'no'}",
        f"granularity: {granularity.value if granularity else 'none'}",
    ]


def month_grid_lines(calendar: Calendar, reference: datetime) -> list[str]:
    """Lay out the month containing ``reference`` as a weekday grid."""
    symbols = calendar.weekday_symbols(SymbolStyle.SHORT)
    offset = calendar.first_weekday - 1
    header = symbols[offset:] + symbols[:offset]
    width = max(len(symbol) for symbol in header) + 1

    cells = [""] * DayComponent.leading_blank_count(calendar, reference)
    cells.extend(str(day) for day in DayComponent.days_in_month(calendar, reference))

    lines = [f"{full_month(reference)} {year(reference)}".center(width * DAYS_PER_WEEK).rstrip()]
    lines.append("".join(symbol.rjust(width) for symbol in header))
    for start in range(0, len(cells), DAYS_PER_WEEK):
        row = cells[start : start + DAYS_PER_WEEK]
        lines.append("".join(cell.rjust(width) for cell in row).rstrip())
    return lines


def _resolve_month_reference(
    value: str | None,
    calendar: Calendar,
    *,
    clock: Clock = _now,
) -> datetime:
    if value is None:
        return calendar.localize(clock())
    year_value, month_value, day_value = _parse_partial_date(value)
    if month_value is None or day_value is not None:
        raise ValueError(f"Invalid month: {value!r} (expected YYYY-MM)")
    reference = calendar.date_from_components(year_value, month_value)
    if reference is None:
        raise ValueError(f"Invalid month: {value!r}")
    return reference


def main(argv: Sequence[str] | None = None, *, clock: Clock = _now) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        configure_logging()
        calendar = Calendar.current()
        if parsed_args.command == "describe":
            style = SymbolStyle(parsed_args.month_style) if parsed_args.month_style else None
            date = build_date(parsed_args.value, calendar=calendar, style=style)
            lines = describe_lines(date)
        elif parsed_args.command == "month":
            reference = _resolve_month_reference(parsed_args.value, calendar, clock=clock)
            lines = month_grid_lines(calendar, reference)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (ValueError, ConfigurationError) as exc:
        log.error("CLI validation error: %s", exc)  # noqa: TRY400
        sys.exit(2)

    for line in lines:
        print(line)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
