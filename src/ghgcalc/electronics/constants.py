"""Fluorinated feed gases used in electronics manufacturing."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_RESIDUAL_PERCENT = 10.0

MATERIAL_GASES: Mapping[str, float] = MappingProxyType(
    {
        "NF3": 17200,
        "SF6": 23500,
        "CF4": 7390,
        "C2F6": 12200,
        "C3F8": 8900,
        "C4F6": 12200,
        "c-C4F8": 10300,
        "c-C4F8O": 10300,
        "C5F8": 12000,
        "CHF3": 12400,
        "CH2F2": 675,
        "CH3F": 92,
    }
)

BYPRODUCT_GASES: Mapping[str, float] = MappingProxyType(
    {
        "CF4": 7390,
        "C2F6": 12200,
        "C3F8": 8900,
    }
)


@dataclass(frozen=True)
class GasDefaults:
    """Default utilisation, collection and removal rates (%) of a feed gas.

    ``None`` means no default is published and the user has to supply one.
    ``conversion_factors`` maps by-product gases to tonnes formed per tonne
    of feed gas.
    """

    utilization_percent: float | None = None
    collection_percent: float | None = None
    removal_percent: float | None = None
    conversion_factors: Mapping[str, float] = field(default_factory=dict)


DEFAULT_PARAMETERS: Mapping[str, GasDefaults] = MappingProxyType(
    {
        "NF3": GasDefaults(80, 90, 95, {"CF4": 0.09}),
        "SF6": GasDefaults(80, 90, 90),
        "CF4": GasDefaults(10, 90, 90),
        "C2F6": GasDefaults(40, 90, 90, {"CF4": 0.2}),
        "C3F8": GasDefaults(60, 90, 90, {"CF4": 0.1}),
        "C4F6": GasDefaults(conversion_factors={"C2F6": 0.2}),
        "c-C4F8": GasDefaults(90, 90, 90, {"CF4": 0.1, "C2F6": 0.1}),
        "c-C4F8O": GasDefaults(conversion_factors={"C3F8": 0.04}),
        "C5F8": GasDefaults(conversion_factors={"C2F6": 0.04}),
        "CHF3": GasDefaults(60, 90, 90, {"CF4": 0.07}),
        "CH2F2": GasDefaults(conversion_factors={"CF4": 0.08}),
        "CH3F": GasDefaults(),
    }
)

NO_DEFAULTS = GasDefaults()


def defaults_for(gas: str) -> GasDefaults:
    return DEFAULT_PARAMETERS.get(gas, NO_DEFAULTS)


def default_conversion_factor(gas: str, byproduct: str) -> float:
    return defaults_for(gas).conversion_factors.get(byproduct, 0.0)


__all__ = [
    "BYPRODUCT_GASES",
    "DEFAULT_PARAMETERS",
    "DEFAULT_RESIDUAL_PERCENT",
    "GasDefaults",
    "MATERIAL_GASES",
    "default_conversion_factor",
    "defaults_for",
]
