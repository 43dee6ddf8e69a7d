"""Twelve-month indicator frames shared by the monthly calculators."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd

from ..utils.numbers import safe_float

MONTHS: tuple[int, ...] = tuple(range(1, 13))


def _as_month_series(values: Any) -> pd.Series:
    if values is None:
        return pd.Series(np.nan, index=MONTHS, dtype="object")
    if isinstance(values, pd.Series):
        return values.reindex(MONTHS)
    if isinstance(values, Mapping):
        data = {int(month): value for month, value in values.items()}
        return pd.Series(data, dtype="object").reindex(MONTHS)
    if isinstance(values, Sequence) and not isinstance(values, str):
        padded = list(values)[: len(MONTHS)]
        padded += [None] * (len(MONTHS) - len(padded))
        return pd.Series(padded, index=MONTHS, dtype="object")
    return pd.Series([values] * len(MONTHS), index=MONTHS, dtype="object")


def coerce_numeric(series: pd.Series, default: float = 0.0) -> pd.Series:
    """Coerce user input to floats, replacing blanks and garbage with ``default``."""

    numeric = pd.to_numeric(series.map(lambda value: safe_float(value, np.nan)), errors="coerce")
    return numeric.astype(float).fillna(default)


def month_values(values: Any) -> list[Any]:
    """Raw per-month values (length 12) from a sequence, mapping or scalar."""

    return _as_month_series(values).tolist()


def monthly_frame(
    columns: Mapping[str, Any],
    *,
    defaults: Mapping[str, float] | None = None,
) -> pd.DataFrame:
    """Build a numeric frame indexed by month 1..12.

    Each column value may be a sequence in month order (shorter sequences are
    padded), a mapping of month number to value, or a scalar applied to every
    month. Missing or non-numeric cells take the column default (0 unless
    ``defaults`` says otherwise).
    """

    fills = dict(defaults or {})
    frame = pd.DataFrame(index=pd.Index(MONTHS, name="month"))
    for name, values in columns.items():
        frame[name] = coerce_numeric(_as_month_series(values), fills.get(name, 0.0)).to_numpy()
    return frame


__all__ = ["MONTHS", "coerce_numeric", "month_values", "monthly_frame"]
