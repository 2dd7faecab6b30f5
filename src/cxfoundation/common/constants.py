"""String constants shared across the package."""

from __future__ import annotations

from typing import Final

EMPTY: Final[str] = ""
PLACEHOLDER: Final[str] = "--"
