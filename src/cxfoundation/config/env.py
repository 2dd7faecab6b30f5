"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import InvalidConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def read_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables that are set, skipping blank ones."""

    values: dict[str, str] = {}
    for name in names:
        value = os.getenv(name)
        if value is None or not value.strip():
            continue
        values[name] = value.strip()
    return values


def parse_int_var(name: str, raw: str, *, lower: int, upper: int) -> int:
    """Parse an integer environment value constrained to ``[lower, upper]``."""

    try:
        value = int(raw)
    except ValueError as exc:
        raise InvalidConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if not lower <= value <= upper:
        raise InvalidConfigurationError(f"{name} must be between {lower} and {upper}, got {value}")
    return value
