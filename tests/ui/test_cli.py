from __future__ import annotations

from datetime import UTC, datetime

import pytest

from cxfoundation.config.calendar import DATE_PATTERN_VAR, FIRST_WEEKDAY_VAR
from cxfoundation.domain import Calendar, SymbolStyle
from cxfoundation.ui import cli


def test_build_date_from_partial_text(calendar: Calendar) -> None:
    assert cli.build_date("2023", calendar=calendar).description == "2023"
    assert cli.build_date("2023-01", calendar=calendar).description == "2023-1"
    assert cli.build_date("2023-01-01", calendar=calendar).description == "2023-1-1"
    assert (
        cli.build_date("2023-01-01", calendar=calendar, style=SymbolStyle.SHORT).description
        == "2023-Jan-1"
    )


def test_describe_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["describe", "2023-01-01"])

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "description: 2023-1-1",
        "formatted:   2023-01-01",
        "valid:       yes",
        "granularity: day",
    ]


def test_describe_with_month_style(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["describe", "2023-03", "--month-style", "long"])

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "description: 2023-March"
    assert out[3] == "granularity: month"


def test_describe_keeps_out_of_range_values(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["describe", "2023-13-01"])

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "description: 2023"
    assert out[1] == "formatted:   2023-01-01"
    assert out[3] == "granularity: year"


def test_describe_invalid_year_prints_placeholder(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["describe", "0"])

    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ["description: --", "formatted:   --", "valid:       no"]


def test_describe_rejects_malformed_text() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["describe", "not-a-date"])

    assert excinfo.value.code == 2


def test_month_grid(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["month", "2023-02"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].strip() == "February 2023"
    assert lines[1].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert lines[2] == " " * 15 + "1   2   3   4"
    assert lines[3].split() == [str(day) for day in range(5, 12)]
    assert lines[-1].split() == ["26", "27", "28"]
    assert len(lines) == 7


def test_month_grid_respects_first_weekday(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv(FIRST_WEEKDAY_VAR, "2")

    cli.main(["month", "2023-01"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[1].split()[0] == "Mon"
    assert lines[2].split() == ["1"]
    assert lines[3].split() == [str(day) for day in range(2, 9)]


def test_month_defaults_to_clock(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["month"], clock=lambda: datetime(2024, 2, 10, tzinfo=UTC))

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].strip() == "February 2024"
    assert lines[-1].split()[-1] == "29"


@pytest.mark.parametrize("value", ["2023", "2023-13", "2023-02-01"])
def test_month_rejects_invalid_month(value: str) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["month", value])

    assert excinfo.value.code == 2


def test_invalid_configuration_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(FIRST_WEEKDAY_VAR, "9")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["describe", "2023"])

    assert excinfo.value.code == 2


def test_unusable_date_pattern_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DATE_PATTERN_VAR, "{year}")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["describe", "2023"])

    assert excinfo.value.code == 2
