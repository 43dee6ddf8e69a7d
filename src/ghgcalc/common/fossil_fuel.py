"""CO2 from stationary and mobile fossil fuel combustion."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from ..events import EmissionCallback, ReportEmitter
from ..summary import FOSSIL_FUEL
from ..utils.numbers import safe_float

CARBON_TO_CO2_RATIO = 44 / 12


@dataclass(frozen=True)
class FuelDefaults:
    """Default parameters of one fuel.

    ``ncv`` is the net calorific value (GJ/t, or GJ/10^4 Nm3 for gases),
    ``carbon_per_heat`` the carbon content per unit heat (tC/GJ) and
    ``oxidation_percent`` the carbon oxidation rate.
    """

    name: str
    ncv: float
    carbon_per_heat: float
    oxidation_percent: float


_FUELS = (
    FuelDefaults("无烟煤", 24.515, 0.02749, 94),
    FuelDefaults("烟煤", 23.204, 0.02618, 93),
    FuelDefaults("褐煤", 14.449, 0.02800, 96),
    FuelDefaults("洗精煤", 26.344, 0.02540, 93),
    FuelDefaults("其它洗煤", 15.373, 0.02540, 90),
    FuelDefaults("型煤", 17.46, 0.03360, 90),
    FuelDefaults("焦炭", 28.446, 0.02940, 93),
    FuelDefaults("原油", 42.62, 0.02010, 98),
    FuelDefaults("燃料油", 40.19, 0.02110, 98),
    FuelDefaults("汽油", 44.80, 0.01890, 98),
    FuelDefaults("柴油", 43.33, 0.02020, 98),
    FuelDefaults("一般煤油", 44.75, 0.01960, 98),
    FuelDefaults("喷气煤油", 44.750, 0.0196, 98),
    FuelDefaults("石脑油", 41.031, 0.0200, 98),
    FuelDefaults("石油焦", 31.00, 0.02750, 98),
    FuelDefaults("其它石油制品", 40.19, 0.02000, 98),
    FuelDefaults("焦油", 33.453, 0.02200, 98),
    FuelDefaults("粗苯", 41.816, 0.02270, 98),
    FuelDefaults("炼厂干气", 46.05, 0.01820, 99),
    FuelDefaults("液化石油气", 47.31, 0.01720, 99),
    FuelDefaults("液化天然气", 41.868, 0.01530, 99),
    FuelDefaults("天然气", 389.31, 0.01530, 99),
    FuelDefaults("焦炉煤气", 173.854, 0.01360, 99),
    FuelDefaults("高炉煤气", 37.69, 0.07080, 99),
    FuelDefaults("转炉煤气", 79.54, 0.04960, 99),
    FuelDefaults("密闭电石炉炉气", 111.19, 0.03951, 99),
    FuelDefaults("其它煤气", 52.34, 0.01220, 99),
)

DEFAULT_FUELS: Mapping[str, FuelDefaults] = MappingProxyType({fuel.name: fuel for fuel in _FUELS})

LAND_TRANSPORTATION_FUELS = ("汽油", "柴油", "液化天然气", "天然气", "液化石油气", "无烟煤", "烟煤")

STEEL_FUELS = (
    "无烟煤", "烟煤", "褐煤", "洗精煤", "其它洗煤", "型煤", "焦炭", "原油", "燃料油",
    "汽油", "柴油", "一般煤油", "液化天然气", "液化石油气", "焦油", "粗苯",
    "焦炉煤气", "高炉煤气", "转炉煤气", "其它煤气", "天然气", "炼厂干气",
)


@dataclass(slots=True)
class FuelRow:
    """Consumption of one fuel; blank parameters fall back to the defaults."""

    name: str
    consumption: Any = ""
    ncv: Any = None
    carbon_per_heat: Any = None
    oxidation_percent: Any = None

    def _resolved(self) -> tuple[float, float, float]:
        defaults = DEFAULT_FUELS.get(self.name)
        ncv = safe_float(self.ncv, defaults.ncv if defaults else 0.0)
        carbon = safe_float(self.carbon_per_heat, defaults.carbon_per_heat if defaults else 0.0)
        oxidation = safe_float(self.oxidation_percent, defaults.oxidation_percent if defaults else 0.0)
        return ncv, carbon, oxidation

    @property
    def carbon_content(self) -> float:
        """Carbon per unit of fuel (tC/t): NCV x carbon per unit heat."""

        ncv, carbon, _ = self._resolved()
        return ncv * carbon

    @property
    def emission(self) -> float:
        _, _, oxidation = self._resolved()
        return combustion_emission(self.consumption, self.carbon_content, oxidation)


def combustion_emission(consumption: Any, carbon_content: Any, oxidation_percent: Any) -> float:
    """E = consumption x carbon content x oxidation rate x 44/12, in tCO2."""

    return (
        safe_float(consumption)
        * safe_float(carbon_content)
        * (safe_float(oxidation_percent) / 100)
        * CARBON_TO_CO2_RATIO
    )


def fuel_rows(names: Iterable[str]) -> list[FuelRow]:
    """Blank rows for the given fuels, in order."""

    return [FuelRow(name=name) for name in names]


_EDITABLE = ("consumption", "ncv", "carbon_per_heat", "oxidation_percent")


def _assign(row: FuelRow, values: dict[str, Any]) -> None:
    for field_name, value in values.items():
        if field_name not in _EDITABLE:
            raise ValueError(f"Field '{field_name}' cannot be updated.")
        setattr(row, field_name, value)


def total_emission(rows: Iterable[FuelRow]) -> float:
    return sum(row.emission for row in rows)


class FuelInventory:
    """Fuel rows of one facility; reports the CO2 total after each change."""

    def __init__(
        self,
        names: Iterable[str] = LAND_TRANSPORTATION_FUELS,
        *,
        callback: EmissionCallback | None = None,
        category: str = FOSSIL_FUEL,
        source: str = "common.fossil_fuel",
    ) -> None:
        self.rows = fuel_rows(names)
        self._emitter = ReportEmitter(source, category, callback)

    def row(self, name: str) -> FuelRow:
        for row in self.rows:
            if row.name == name:
                return row
        raise KeyError(f"Unknown fuel '{name}'.")

    def add_fuel(self, name: str, **values: Any) -> FuelRow:
        if any(row.name == name for row in self.rows):
            raise ValueError(f"Fuel '{name}' is already listed.")
        row = FuelRow(name=name)
        _assign(row, values)
        self.rows.append(row)
        self._changed()
        return row

    def update(self, name: str, **values: Any) -> FuelRow:
        row = self.row(name)
        _assign(row, values)
        self._changed()
        return row

    def _changed(self) -> None:
        self._emitter.emit(self.total_emission, {"fuels": len(self.rows)})

    @property
    def total_emission(self) -> float:
        return total_emission(self.rows)


__all__ = [
    "CARBON_TO_CO2_RATIO",
    "DEFAULT_FUELS",
    "FuelDefaults",
    "FuelInventory",
    "FuelRow",
    "LAND_TRANSPORTATION_FUELS",
    "STEEL_FUELS",
    "combustion_emission",
    "fuel_rows",
    "total_emission",
]
