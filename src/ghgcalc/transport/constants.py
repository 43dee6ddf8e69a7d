"""Emission factors and conversion constants for land transportation."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Vehicle emission factors (mg/km), keyed by "<vehicle>-<fuel>" then by
# China emission standard. Missing gases are treated as zero.
_EMISSION_FACTORS = {
    "car-gasoline": {
        "国I": {"n2o": 38, "ch4": 45},
        "国II": {"n2o": 24, "ch4": 94},
        "国III": {"n2o": 12, "ch4": 83},
        "国IV及以上": {"n2o": 6, "ch4": 57},
    },
    "car-diesel": {
        "国I": {"n2o": 0, "ch4": 18},
        "国II": {"n2o": 3, "ch4": 6},
        "国III": {"n2o": 15, "ch4": 7},
        "国IV及以上": {"n2o": 15, "ch4": 0},
    },
    "car-lpg": {
        "国I": {"n2o": 38, "ch4": 80},
        "国II": {"n2o": 23, "ch4": 80},
        "国III及以上": {"n2o": 9, "ch4": 80},
    },
    "car-other-light-gasoline": {
        "国I": {"n2o": 122, "ch4": 45},
        "国II": {"n2o": 62, "ch4": 94},
        "国III": {"n2o": 36, "ch4": 83},
        "国IV及以上": {"n2o": 16, "ch4": 57},
    },
    "car-other-light-diesel": {
        "国I": {"n2o": 0, "ch4": 18},
        "国II": {"n2o": 3, "ch4": 6},
        "国III": {"n2o": 15, "ch4": 7},
        "国IV及以上": {"n2o": 15, "ch4": 0},
    },
    "heavy-gasoline": {
        "所有": {"n2o": 6, "ch4": 140},
    },
    "heavy-diesel": {
        "所有": {"n2o": 30, "ch4": 175},
    },
    "heavy-gas-natural": {
        "国IV及以上": {"ch4": 900},
        "其他": {"ch4": 5400},
    },
}


FactorMapping = Mapping[str, Mapping[str, Mapping[str, float]]]


def freeze_table(table: FactorMapping) -> FactorMapping:
    """Return a read-only deep view of an emission factor table."""

    return MappingProxyType(
        {
            key: MappingProxyType(
                {standard: MappingProxyType(dict(factors)) for standard, factors in standards.items()}
            )
            for key, standards in table.items()
        }
    )


EMISSION_FACTORS = freeze_table(_EMISSION_FACTORS)

TYPE_LABEL_MAP: Mapping[str, str] = MappingProxyType(
    {
        "car": "轿车",
        "car-other-light": "其它轻型车",
        "heavy": "重型车",
        "gasoline": "汽油",
        "diesel": "柴油",
        "lpg": "LPG",
        "gas-natural": "天然气",
    }
)

# AR6 100-year global warming potentials.
GWP_CH4 = 28
GWP_N2O = 273

MG_TO_TONNE = 1e-9

# Tail-gas purification (urea SCR additive).
UREA_CARBON_RATIO = 12 / 60
CARBON_TO_CO2_RATIO = 44 / 12
KG_TO_TONNE = 0.001
DEFAULT_UREA_PURITY_PERCENT = 99.6

__all__ = [
    "EMISSION_FACTORS",
    "TYPE_LABEL_MAP",
    "GWP_CH4",
    "GWP_N2O",
    "MG_TO_TONNE",
    "UREA_CARBON_RATIO",
    "CARBON_TO_CO2_RATIO",
    "KG_TO_TONNE",
    "DEFAULT_UREA_PURITY_PERCENT",
    "freeze_table",
]
