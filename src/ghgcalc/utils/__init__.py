"""Numeric, unit and identifier helpers."""

from .ids import generate_id
from .numbers import clamp, non_negative, parse_number, percent, safe_float
from .units import (
    convert_value,
    normalize_distance_factor,
    ureg,
)

__all__ = [
    "ureg",
    "convert_value",
    "normalize_distance_factor",
    "safe_float",
    "non_negative",
    "clamp",
    "percent",
    "parse_number",
    "generate_id",
]
