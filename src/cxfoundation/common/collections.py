"""Small sequence helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")
N = TypeVar("N", int, float)


def safe_get(sequence: Sequence[T], index: int) -> T | None:
    """Return the element at ``index`` or ``None`` when it is out of bounds.

    Negative indices count as out of bounds.
    """

    if 0 <= index < len(sequence):
        return sequence[index]
    return None


def clamped(value: N, lower: N, upper: N) -> N:
    """Clamp ``value`` into the closed range ``[lower, upper]``."""

    return min(max(lower, value), upper)
