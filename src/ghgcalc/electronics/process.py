"""Fluorinated gas emissions from etching and chamber cleaning.

Each feed gas is tracked month by month. Emissions come from two sources:

* leakage of the unreacted feed gas,
  ``(1 - h) x FC x (1 - U) x (1 - a x d) x GWP``;
* by-products formed from it,
  ``(1 - h) x FC x B x (1 - a_j x d_j) x GWP_j``.

``h`` is the residual ratio left in the container (10 % by default), ``FC``
the feed gas used (t), ``U`` the utilisation rate, ``a``/``d`` the collection
and removal efficiencies of the abatement system and ``B`` the conversion
factor of the by-product. All results are in tCO2e.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from ..common.monthly import MONTHS, month_values, monthly_frame
from ..events import EmissionCallback, ReportEmitter
from ..summary import ELECTRONIC_PROCESS
from ..utils.ids import generate_id
from ..utils.numbers import non_negative, percent, safe_float
from .constants import (
    BYPRODUCT_GASES,
    DEFAULT_RESIDUAL_PERCENT,
    MATERIAL_GASES,
    default_conversion_factor,
    defaults_for,
)

FEED_GAS_INDICATORS = (
    "usage_t",
    "residual_percent",
    "utilization_percent",
    "collection_percent",
    "removal_percent",
)
BYPRODUCT_INDICATORS = ("conversion_factor", "collection_percent", "removal_percent")

_PERCENT_COLUMNS = ("residual_percent", "utilization_percent", "collection_percent", "removal_percent")


def leakage_emission(
    usage_t: Any,
    gwp: Any,
    *,
    residual_percent: Any = None,
    utilization_percent: Any = None,
    collection_percent: Any = None,
    removal_percent: Any = None,
) -> float:
    residual = percent(residual_percent, DEFAULT_RESIDUAL_PERCENT) / 100
    utilization = percent(utilization_percent, 0.0) / 100
    abated = percent(collection_percent, 0.0) / 100 * percent(removal_percent, 0.0) / 100
    return (1 - residual) * non_negative(usage_t) * (1 - utilization) * (1 - abated) * safe_float(gwp)


def byproduct_emission(
    usage_t: Any,
    gwp: Any,
    conversion_factor: Any = None,
    *,
    residual_percent: Any = None,
    collection_percent: Any = None,
    removal_percent: Any = None,
    default_factor: float = 0.0,
) -> float:
    """By-product emission; a blank or zero conversion factor uses ``default_factor``."""

    factor = non_negative(conversion_factor) or default_factor
    residual = percent(residual_percent, DEFAULT_RESIDUAL_PERCENT) / 100
    abated = percent(collection_percent, 0.0) / 100 * percent(removal_percent, 0.0) / 100
    return (1 - residual) * non_negative(usage_t) * factor * (1 - abated) * safe_float(gwp)


def _months(value: Any = None) -> list[Any]:
    return [value] * len(MONTHS)


def _check_month(month: int) -> int:
    if month not in MONTHS:
        raise ValueError(f"Month must be between 1 and 12, got {month!r}.")
    return month


@dataclass(slots=True)
class Byproduct:
    """A gas formed from a feed gas; monthly values keyed by indicator."""

    gas: str
    gwp: float
    id: str = field(default_factory=generate_id)
    values: dict[str, list[Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in BYPRODUCT_INDICATORS:
            self.values.setdefault(name, _months())


@dataclass(slots=True)
class FeedGas:
    """One feed gas with twelve months of inputs and its by-products."""

    gas: str
    gwp: float
    id: str = field(default_factory=generate_id)
    values: dict[str, list[Any]] = field(default_factory=dict)
    byproducts: list[Byproduct] = field(default_factory=list)

    def __post_init__(self) -> None:
        defaults = defaults_for(self.gas)
        initial = {
            "usage_t": None,
            "residual_percent": DEFAULT_RESIDUAL_PERCENT,
            "utilization_percent": defaults.utilization_percent,
            "collection_percent": defaults.collection_percent,
            "removal_percent": defaults.removal_percent,
        }
        for name, value in initial.items():
            self.values.setdefault(name, _months(value))

    @classmethod
    def create(cls, gas: str, gwp: Any = None) -> "FeedGas":
        """Feed gas with published defaults; custom gases need an explicit GWP."""

        if gwp is None:
            if gas not in MATERIAL_GASES:
                raise ValueError(f"Unknown feed gas '{gas}'; a GWP value is required.")
            gwp = MATERIAL_GASES[gas]
        return cls(gas=gas, gwp=safe_float(gwp))

    def new_byproduct(self, gas: str, gwp: Any = None) -> Byproduct:
        """By-product seeded with this gas's conversion factor and abatement rates."""

        if gwp is None:
            if gas not in BYPRODUCT_GASES:
                raise ValueError(f"Unknown by-product '{gas}'; a GWP value is required.")
            gwp = BYPRODUCT_GASES[gas]
        defaults = defaults_for(self.gas)
        factor = defaults.conversion_factors.get(gas)
        return Byproduct(
            gas=gas,
            gwp=safe_float(gwp),
            values={
                "conversion_factor": _months(factor),
                "collection_percent": _months(defaults.collection_percent),
                "removal_percent": _months(defaults.removal_percent),
            },
        )

    def byproduct(self, byproduct_id: str) -> Byproduct:
        for item in self.byproducts:
            if item.id == byproduct_id:
                return item
        raise KeyError(f"No by-product with id '{byproduct_id}' for {self.gas}.")

    def inputs(self) -> pd.DataFrame:
        frame = monthly_frame(
            {name: self.values[name] for name in FEED_GAS_INDICATORS},
            defaults={"residual_percent": DEFAULT_RESIDUAL_PERCENT},
        )
        frame["usage_t"] = frame["usage_t"].clip(lower=0.0)
        for column in _PERCENT_COLUMNS:
            frame[column] = frame[column].clip(0.0, 100.0)
        return frame

    def frame(self) -> pd.DataFrame:
        """Monthly inputs with leakage, by-product and total emissions."""

        frame = self.inputs()
        retained = (1 - frame["residual_percent"] / 100) * frame["usage_t"]
        frame["leakage_t"] = (
            retained
            * (1 - frame["utilization_percent"] / 100)
            * (1 - frame["collection_percent"] / 100 * frame["removal_percent"] / 100)
            * self.gwp
        )
        frame["byproduct_t"] = 0.0
        for item in self.byproducts:
            frame["byproduct_t"] += self._byproduct_series(item, retained)
        frame["emission_t"] = frame["leakage_t"] + frame["byproduct_t"]
        return frame

    def _byproduct_series(self, item: Byproduct, retained: pd.Series) -> pd.Series:
        values = monthly_frame({name: item.values[name] for name in BYPRODUCT_INDICATORS})
        factor = values["conversion_factor"].clip(lower=0.0)
        factor = factor.where(factor > 0, default_conversion_factor(self.gas, item.gas))
        abated = (
            values["collection_percent"].clip(0.0, 100.0)
            / 100
            * values["removal_percent"].clip(0.0, 100.0)
            / 100
        )
        return retained * factor * (1 - abated) * item.gwp

    @property
    def total_emission(self) -> float:
        return float(self.frame()["emission_t"].sum())


class ProcessInventory:
    """Feed gases of an electronics plant; reports the annual total on change."""

    def __init__(
        self,
        *,
        callback: EmissionCallback | None = None,
        source: str = "electronics.process",
    ) -> None:
        self.gases: list[FeedGas] = []
        self._emitter = ReportEmitter(source, ELECTRONIC_PROCESS, callback)

    def add_gas(self, gas: str, gwp: Any = None) -> FeedGas:
        if any(item.gas == gas for item in self.gases):
            raise ValueError(f"Feed gas '{gas}' is already listed.")
        item = FeedGas.create(gas, gwp)
        self.gases.append(item)
        self._changed()
        return item

    def remove_gas(self, gas_id: str) -> None:
        remaining = [item for item in self.gases if item.id != gas_id]
        if len(remaining) == len(self.gases):
            raise KeyError(f"No feed gas with id '{gas_id}'.")
        self.gases = remaining
        self._changed()

    def get_gas(self, gas_id: str) -> FeedGas:
        for item in self.gases:
            if item.id == gas_id:
                return item
        raise KeyError(f"No feed gas with id '{gas_id}'.")

    def add_byproduct(self, gas_id: str, byproduct: str, gwp: Any = None) -> Byproduct:
        parent = self.get_gas(gas_id)
        if any(item.gas == byproduct for item in parent.byproducts):
            raise ValueError(f"By-product '{byproduct}' is already listed for {parent.gas}.")
        item = parent.new_byproduct(byproduct, gwp)
        parent.byproducts.append(item)
        self._changed()
        return item

    def remove_byproduct(self, gas_id: str, byproduct_id: str) -> None:
        parent = self.get_gas(gas_id)
        parent.byproduct(byproduct_id)
        parent.byproducts = [item for item in parent.byproducts if item.id != byproduct_id]
        self._changed()

    def set_value(
        self,
        gas_id: str,
        indicator: str,
        month: int,
        value: Any,
        *,
        byproduct_id: str | None = None,
    ) -> None:
        parent = self.get_gas(gas_id)
        if byproduct_id is None:
            target, allowed = parent.values, FEED_GAS_INDICATORS
        else:
            target, allowed = parent.byproduct(byproduct_id).values, BYPRODUCT_INDICATORS
        if indicator not in allowed:
            raise ValueError(f"Unknown indicator '{indicator}'. Allowed: {', '.join(allowed)}")
        target[indicator][_check_month(month) - 1] = value
        self._changed()

    def fill(self, gas_id: str, indicator: str, values: Any) -> None:
        """Set every month of a feed-gas indicator from a sequence, mapping or scalar."""

        parent = self.get_gas(gas_id)
        if indicator not in FEED_GAS_INDICATORS:
            raise ValueError(
                f"Unknown indicator '{indicator}'. Allowed: {', '.join(FEED_GAS_INDICATORS)}"
            )
        parent.values[indicator] = month_values(values)
        self._changed()

    def monthly_totals(self) -> pd.Series:
        totals = pd.Series(0.0, index=pd.Index(MONTHS, name="month"))
        for item in self.gases:
            totals = totals + item.frame()["emission_t"]
        return totals

    @property
    def total_emission(self) -> float:
        return float(self.monthly_totals().sum())

    def _changed(self) -> None:
        self._emitter.emit(self.total_emission, {"feed_gases": len(self.gases)})


__all__ = [
    "BYPRODUCT_INDICATORS",
    "Byproduct",
    "FEED_GAS_INDICATORS",
    "FeedGas",
    "ProcessInventory",
    "byproduct_emission",
    "leakage_emission",
]
