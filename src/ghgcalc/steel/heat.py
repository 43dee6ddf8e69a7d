"""Heat consumed by steel production processes."""

from __future__ import annotations

from typing import Any, Mapping

import pandas as pd

from ..common.electricity_heat import DEFAULT_HEAT_EMISSION_FACTOR
from ..common.monthly import monthly_frame
from ..events import EmissionCallback
from ..summary import STEEL_HEAT
from ..utils.numbers import safe_float
from .lines import LineSheet, ProductionLine

HEAT_INDICATORS = ("input_gj", "output_gj", "emission_factor")


def heat_emission(
    input_gj: Any,
    output_gj: Any,
    emission_factor: Any = DEFAULT_HEAT_EMISSION_FACTOR,
) -> float:
    """``max(0, input - recovered output) x factor``, in tCO2."""

    consumed = safe_float(input_gj) - safe_float(output_gj)
    return max(0.0, consumed) * safe_float(emission_factor, DEFAULT_HEAT_EMISSION_FACTOR)


def monthly_heat(values: Mapping[str, Any]) -> pd.DataFrame:
    frame = monthly_frame(
        {name: values.get(name) for name in HEAT_INDICATORS},
        defaults={"emission_factor": DEFAULT_HEAT_EMISSION_FACTOR},
    )
    frame["consumed_gj"] = frame["input_gj"] - frame["output_gj"]
    frame["emission_t"] = frame["consumed_gj"].clip(lower=0.0) * frame["emission_factor"]
    return frame


class SteelHeat(LineSheet):
    """Heat sheet of every production line; blank factors use 0.11 tCO2/GJ."""

    indicators = HEAT_INDICATORS

    def __init__(
        self,
        *,
        callback: EmissionCallback | None = None,
        source: str = "steel.heat",
    ) -> None:
        super().__init__(STEEL_HEAT, source, callback)

    def line_frame(self, line: ProductionLine) -> pd.DataFrame:
        return monthly_heat(line.values)


__all__ = ["HEAT_INDICATORS", "SteelHeat", "heat_emission", "monthly_heat"]
