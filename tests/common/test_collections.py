from __future__ import annotations

import pytest

from cxfoundation.common import EMPTY, PLACEHOLDER, clamped, safe_get


def test_safe_get_returns_element_in_bounds() -> None:
    assert safe_get([1, 2, 3], 1) == 2


@pytest.mark.parametrize("index", [3, 4, -1])
def test_safe_get_returns_none_out_of_bounds(index: int) -> None:
    assert safe_get([1, 2, 3], index) is None


def test_safe_get_on_empty_sequence() -> None:
    assert safe_get("", 0) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [(-5, 0), (0, 0), (4, 4), (10, 10), (11, 10)],
)
def test_clamped_keeps_value_in_range(value: int, expected: int) -> None:
    assert clamped(value, 0, 10) == expected


def test_string_constants() -> None:
    assert EMPTY == ""
    assert PLACEHOLDER == "--"
