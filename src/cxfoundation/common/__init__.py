from __future__ import annotations

from .collections import clamped, safe_get
from .constants import EMPTY, PLACEHOLDER

__all__ = ["EMPTY", "PLACEHOLDER", "clamped", "safe_get"]
