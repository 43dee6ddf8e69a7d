"""Lenient numeric coercion for user-entered activity data."""

from __future__ import annotations

import logging
import math
from typing import Any

logger = logging.getLogger(__name__)


def safe_float(value: Any, default: float = 0.0) -> float:
    """Return ``value`` as a finite float, or ``default`` when it is not one.

    ``None``, empty strings, non-numeric text, NaN and infinities all map to
    ``default``. Strings are stripped before parsing so form values such as
    ``" 12.5 "`` are accepted.
    """

    if value is None:
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Replacing non-numeric value %r with %s", value, default)
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def non_negative(value: Any) -> float:
    """Coerce ``value`` and floor it at zero."""

    return max(0.0, safe_float(value))


def clamp(value: float, lower: float, upper: float) -> float:
    return min(upper, max(lower, value))


def percent(value: Any, default: float) -> float:
    """Coerce a percentage, substituting ``default`` and clamping to [0, 100]."""

    number = safe_float(value, default)
    clamped = clamp(number, 0.0, 100.0)
    if clamped != number:
        logger.debug("Clamped percentage %s to %s", number, clamped)
    return clamped


def parse_number(value: Any) -> float | None:
    """Strictly parse a non-negative number, returning ``None`` when invalid.

    Used at the edit boundary, where invalid input must be rejected rather than
    silently coerced. Empty input parses to ``0.0``.
    """

    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number) or math.isinf(number) or number < 0:
        return None
    return number


__all__ = ["safe_float", "non_negative", "clamp", "percent", "parse_number"]
