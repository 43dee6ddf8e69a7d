"""Unit handling utilities built on top of :mod:`pint`."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import pint


@lru_cache(maxsize=1)
def ureg() -> pint.UnitRegistry:
    """Return a process-wide :class:`~pint.UnitRegistry` instance."""

    return pint.UnitRegistry()


def convert_value(value: float, src_unit: str, dst_unit: str) -> float:
    """Convert ``value`` from ``src_unit`` to ``dst_unit``."""

    if src_unit == dst_unit:
        return float(value)
    quantity = float(value) * ureg()(src_unit)
    return float(quantity.to(dst_unit).magnitude)


def normalize_distance_factor(value: float, unit: str, dst: str = "mg/km") -> float:
    """Normalize a per-distance emission factor to milligrams per kilometre."""

    return convert_value(value, unit, dst)


__all__ = [
    "ureg",
    "convert_value",
    "normalize_distance_factor",
]
