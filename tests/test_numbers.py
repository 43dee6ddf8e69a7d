from __future__ import annotations

import math

import pytest

from ghgcalc.common import monthly_frame
from ghgcalc.utils import convert_value, non_negative, parse_number, percent, safe_float


@pytest.mark.parametrize("value", [None, "", "  ", "abc", math.nan, math.inf, -math.inf, object()])
def test_safe_float_falls_back_to_default(value: object) -> None:
    assert safe_float(value, 7.0) == 7.0


def test_safe_float_parses_numbers() -> None:
    assert safe_float(" 12.5 ") == 12.5
    assert safe_float(3) == 3.0
    assert non_negative(-4) == 0


def test_percent_clamps_and_defaults() -> None:
    assert percent(None, 99.6) == 99.6
    assert percent(120, 99.6) == 100
    assert percent("-1", 99.6) == 0


@pytest.mark.parametrize(
    ("value", "expected"),
    [("", 0.0), (None, 0.0), ("4", 4.0), (2.5, 2.5), ("-1", None), ("x", None), (True, None)],
)
def test_parse_number_is_strict(value: object, expected: float | None) -> None:
    assert parse_number(value) == expected


def test_convert_value_uses_pint() -> None:
    assert convert_value(1, "g/km", "mg/km") == pytest.approx(1000)
    assert convert_value(5, "t", "t") == 5


def test_integers_too_large_for_float_are_not_numbers() -> None:
    huge = 10**400

    assert safe_float(huge, 7.0) == 7.0
    assert non_negative(huge) == 0
    assert parse_number(huge) is None


def test_monthly_frame_ignores_oversized_integers() -> None:
    frame = monthly_frame({"amount": [10**400, 2]})

    assert frame["amount"].tolist()[:2] == [0.0, 2.0]
