from __future__ import annotations

from datetime import UTC, datetime

import pytest

from cxfoundation.config import DEFAULT_DATE_PATTERN
from cxfoundation.config.calendar import DATE_PATTERN_VAR
from cxfoundation.domain import DateFormatter, IdentifiableDate, identified
from cxfoundation.domain.formatting import (
    DEFAULT_PATTERN,
    abbreviated_month,
    day,
    day_of_week_with_month_and_day,
    full_date,
    full_month,
    month_day,
    year,
)

VALUE = datetime(2023, 3, 5, 14, 30, tzinfo=UTC)


def test_default_pattern_is_iso_like() -> None:
    assert DateFormatter().format(VALUE) == "2023-03-05"
    assert DateFormatter().format(datetime(987, 1, 1)) == "0987-01-01"


def test_default_formatter_uses_configured_pattern(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DATE_PATTERN_VAR, "{date.day}.{date.month}.{date.year}")

    assert DateFormatter.default().format(VALUE) == "5.3.2023"


def test_display_helpers() -> None:
    assert abbreviated_month(VALUE) == "Mar"
    assert full_month(VALUE) == "March"
    assert day_of_week_with_month_and_day(VALUE) == "Sunday, March 5"
    assert full_date(VALUE) == "March 5, 2023"
    assert year(VALUE) == "2023"
    assert day(VALUE) == "5"
    assert month_day(VALUE) == "March 5"


def test_identified_wraps_timestamp() -> None:
    wrapped = identified(VALUE, "launch")

    assert wrapped == IdentifiableDate(value=VALUE, id="launch")
    assert wrapped.value is VALUE


def test_default_pattern_preset_matches_configuration_default() -> None:
    assert DEFAULT_PATTERN == DEFAULT_DATE_PATTERN
    assert DateFormatter(DEFAULT_PATTERN).format(VALUE) == "2023-03-05"


@pytest.mark.parametrize("pattern", ["{year}", "MMMM d"])
def test_formatter_rejects_unusable_pattern(pattern: str) -> None:
    with pytest.raises(ValueError, match="Date pattern"):
        DateFormatter(pattern)
