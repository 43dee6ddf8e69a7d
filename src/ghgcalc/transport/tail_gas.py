"""CO2 released by urea-based tail-gas purification (SCR)."""

from __future__ import annotations

from typing import Any

import pandas as pd

from ..common.monthly import monthly_frame
from ..utils.numbers import non_negative, percent
from .constants import (
    CARBON_TO_CO2_RATIO,
    DEFAULT_UREA_PURITY_PERCENT,
    KG_TO_TONNE,
    UREA_CARBON_RATIO,
)


def emission_factor(purity_percent: Any = None) -> float:
    """tCO2 per kg of urea additive at the given purity."""

    purity = percent(purity_percent, DEFAULT_UREA_PURITY_PERCENT)
    return UREA_CARBON_RATIO * (purity / 100) * CARBON_TO_CO2_RATIO * KG_TO_TONNE


def tail_gas_emission(urea_mass_kg: Any, purity_percent: Any = None) -> float:
    """E = M x 12/60 x P x 44/12 x 10^-3, in tCO2.

    Purity defaults to 99.6 % when absent or not a number and is clamped to
    [0, 100]; a negative urea mass counts as zero.
    """

    return non_negative(urea_mass_kg) * emission_factor(purity_percent)


def monthly_tail_gas_emissions(urea_mass_kg: Any, purity_percent: Any = None) -> pd.DataFrame:
    """Per-month urea consumption, purity and emission for one additive."""

    frame = monthly_frame(
        {"urea_kg": urea_mass_kg, "purity_percent": purity_percent},
        defaults={"purity_percent": DEFAULT_UREA_PURITY_PERCENT},
    )
    frame["urea_kg"] = frame["urea_kg"].clip(lower=0.0)
    frame["purity_percent"] = frame["purity_percent"].clip(0.0, 100.0)
    frame["emission_t"] = (
        frame["urea_kg"]
        * UREA_CARBON_RATIO
        * (frame["purity_percent"] / 100)
        * CARBON_TO_CO2_RATIO
        * KG_TO_TONNE
    )
    return frame


__all__ = ["emission_factor", "tail_gas_emission", "monthly_tail_gas_emissions"]
