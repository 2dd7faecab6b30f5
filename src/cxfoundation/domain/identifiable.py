from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True, slots=True)
class IdentifiableDate:
    """A timestamp paired with a caller-chosen identifier."""

    value: datetime
    id: str


def identified(value: datetime, id: str) -> IdentifiableDate:  # noqa: A002
    return IdentifiableDate(value=value, id=id)
