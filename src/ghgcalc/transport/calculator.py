"""CH4 and N2O emissions from vehicle fuel combustion."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable, Mapping

from ..utils.numbers import safe_float
from .constants import GWP_CH4, GWP_N2O, MG_TO_TONNE


@dataclass(slots=True, frozen=True)
class DerivedEmissions:
    """Emissions derived from one row; masses in mg, total in tCO2e."""

    n2o_emission_mg: float = 0.0
    ch4_emission_mg: float = 0.0
    n2o_co2e_mg: float = 0.0
    ch4_co2e_mg: float = 0.0
    total_co2e_t: float = 0.0

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    def __add__(self, other: "DerivedEmissions") -> "DerivedEmissions":
        return DerivedEmissions(
            n2o_emission_mg=self.n2o_emission_mg + other.n2o_emission_mg,
            ch4_emission_mg=self.ch4_emission_mg + other.ch4_emission_mg,
            n2o_co2e_mg=self.n2o_co2e_mg + other.n2o_co2e_mg,
            ch4_co2e_mg=self.ch4_co2e_mg + other.ch4_co2e_mg,
            total_co2e_t=self.total_co2e_t + other.total_co2e_t,
        )


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def compute(row: Any) -> DerivedEmissions:
    """Compute the emissions of ``row``.

    ``row`` may be a :class:`~.combinations.CombinationRow` or any mapping with
    ``n2o_factor``, ``ch4_factor``, ``distance`` and ``vehicle_count`` entries.
    Missing or non-numeric values count as zero, so this never raises. Negative
    inputs are passed through unchanged; validating them is up to the caller.
    """

    vehicle_count = safe_float(_field(row, "vehicle_count"))
    distance = safe_float(_field(row, "distance"))
    n2o_factor = safe_float(_field(row, "n2o_factor"))
    ch4_factor = safe_float(_field(row, "ch4_factor"))

    n2o_emission = n2o_factor * distance * vehicle_count
    ch4_emission = ch4_factor * distance * vehicle_count
    n2o_co2e = n2o_emission * GWP_N2O
    ch4_co2e = ch4_emission * GWP_CH4

    return DerivedEmissions(
        n2o_emission_mg=n2o_emission,
        ch4_emission_mg=ch4_emission,
        n2o_co2e_mg=n2o_co2e,
        ch4_co2e_mg=ch4_co2e,
        total_co2e_t=(n2o_co2e + ch4_co2e) * MG_TO_TONNE,
    )


def sum_emissions(rows: Iterable[Any]) -> DerivedEmissions:
    """Column-wise totals of :func:`compute` over ``rows``."""

    total = DerivedEmissions()
    for row in rows:
        total = total + compute(row)
    return total


__all__ = ["DerivedEmissions", "compute", "sum_emissions"]
