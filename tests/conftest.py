from __future__ import annotations

from datetime import UTC

import pytest

from cxfoundation.config.calendar import DATE_PATTERN_VAR, FIRST_WEEKDAY_VAR, TIMEZONE_VAR
from cxfoundation.config.logging import LOG_LEVEL_VAR
from cxfoundation.domain import Calendar


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (TIMEZONE_VAR, FIRST_WEEKDAY_VAR, DATE_PATTERN_VAR, LOG_LEVEL_VAR):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def calendar() -> Calendar:
    return Calendar(timezone=UTC)
