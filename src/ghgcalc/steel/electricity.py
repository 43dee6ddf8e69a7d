"""Electricity consumed by steel production processes.

Two accounting methods are supported:

1. in/out metering available for the process: consumption is the electricity
   entering the process minus the electricity leaving it, each net of directly
   supplied and self-generated non-fossil power;
2. no metering: total consumption minus non-fossil power and the process's
   own generation.

Monthly emission is ``max(0, consumed) x grid factor``.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping

import pandas as pd

from ..common.electricity_heat import DEFAULT_ELECTRICITY_EMISSION_FACTOR
from ..common.monthly import monthly_frame
from ..events import EmissionCallback
from ..summary import STEEL_ELECTRICITY
from ..utils.numbers import safe_float
from .lines import LineSheet, ProductionLine

Method = Literal[1, 2]

METHOD1_INDICATORS = (
    "input_total_mwh",
    "input_non_fossil_grid_mwh",
    "input_non_fossil_self_mwh",
    "output_total_mwh",
    "output_non_fossil_grid_mwh",
    "output_non_fossil_self_mwh",
)
METHOD2_INDICATORS = (
    "total_consumed_mwh",
    "non_fossil_grid_mwh",
    "non_fossil_self_mwh",
    "self_generated_mwh",
)
INDICATORS: Mapping[int, tuple[str, ...]] = {1: METHOD1_INDICATORS, 2: METHOD2_INDICATORS}


def consumed_method1(
    input_total: Any,
    input_non_fossil_grid: Any,
    input_non_fossil_self: Any,
    output_total: Any,
    output_non_fossil_grid: Any,
    output_non_fossil_self: Any,
) -> float:
    entering = (
        safe_float(input_total)
        - safe_float(input_non_fossil_grid)
        - safe_float(input_non_fossil_self)
    )
    leaving = (
        safe_float(output_total)
        - safe_float(output_non_fossil_grid)
        - safe_float(output_non_fossil_self)
    )
    return entering - leaving


def consumed_method2(
    total_consumed: Any,
    non_fossil_grid: Any,
    non_fossil_self: Any,
    self_generated: Any,
) -> float:
    return (
        safe_float(total_consumed)
        - safe_float(non_fossil_grid)
        - safe_float(non_fossil_self)
        - safe_float(self_generated)
    )


def electricity_emission(
    consumed_mwh: Any,
    grid_factor: Any = DEFAULT_ELECTRICITY_EMISSION_FACTOR,
) -> float:
    """Negative consumption (a net exporter) counts as zero emission."""

    return max(0.0, safe_float(consumed_mwh)) * safe_float(grid_factor)


def monthly_consumption(
    values: Mapping[str, Any],
    method: Method = 1,
    grid_factor: Any = DEFAULT_ELECTRICITY_EMISSION_FACTOR,
) -> pd.DataFrame:
    """Monthly inputs of one process with ``consumed_mwh`` and ``emission_t``."""

    if method not in INDICATORS:
        raise ValueError(f"Unknown calculation method {method!r}; expected 1 or 2.")
    frame = monthly_frame({name: values.get(name) for name in INDICATORS[method]})
    if method == 1:
        entering = (
            frame["input_total_mwh"]
            - frame["input_non_fossil_grid_mwh"]
            - frame["input_non_fossil_self_mwh"]
        )
        leaving = (
            frame["output_total_mwh"]
            - frame["output_non_fossil_grid_mwh"]
            - frame["output_non_fossil_self_mwh"]
        )
        frame["consumed_mwh"] = entering - leaving
    else:
        frame["consumed_mwh"] = (
            frame["total_consumed_mwh"]
            - frame["non_fossil_grid_mwh"]
            - frame["non_fossil_self_mwh"]
            - frame["self_generated_mwh"]
        )
    frame["emission_t"] = frame["consumed_mwh"].clip(lower=0.0) * safe_float(grid_factor)
    return frame


class SteelElectricity(LineSheet):
    """Electricity sheet of every production line, using one method for all."""

    def __init__(
        self,
        method: Method = 1,
        grid_factor: Any = DEFAULT_ELECTRICITY_EMISSION_FACTOR,
        *,
        callback: EmissionCallback | None = None,
        source: str = "steel.electricity",
    ) -> None:
        if method not in INDICATORS:
            raise ValueError(f"Unknown calculation method {method!r}; expected 1 or 2.")
        self.method: Method = method
        self.grid_factor = safe_float(grid_factor, DEFAULT_ELECTRICITY_EMISSION_FACTOR)
        super().__init__(STEEL_ELECTRICITY, source, callback)

    @property
    def indicators(self) -> tuple[str, ...]:  # type: ignore[override]
        return INDICATORS[self.method]

    def set_method(self, method: Method) -> None:
        """Switch method; every line's entries are cleared."""

        if method not in INDICATORS:
            raise ValueError(f"Unknown calculation method {method!r}; expected 1 or 2.")
        if method == self.method:
            return
        self.method = method
        for line in self.lines:
            line.values = self._blank_values()
        self._changed()

    def set_grid_factor(self, value: Any) -> None:
        self.grid_factor = safe_float(value, DEFAULT_ELECTRICITY_EMISSION_FACTOR)
        self._changed()

    def line_frame(self, line: ProductionLine) -> pd.DataFrame:
        return monthly_consumption(line.values, self.method, self.grid_factor)


__all__ = [
    "INDICATORS",
    "METHOD1_INDICATORS",
    "METHOD2_INDICATORS",
    "SteelElectricity",
    "consumed_method1",
    "consumed_method2",
    "electricity_emission",
    "monthly_consumption",
]
