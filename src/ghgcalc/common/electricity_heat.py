"""Emissions implied by net purchased electricity and heat."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

import pandas as pd

from ..events import EmissionCallback, ReportEmitter
from ..summary import ELECTRICITY_HEAT
from ..utils.numbers import safe_float
from .monthly import MONTHS, monthly_frame

logger = logging.getLogger(__name__)

# National average grid factor, tCO2/MWh.
DEFAULT_ELECTRICITY_EMISSION_FACTOR = 0.5366
# tCO2/GJ
DEFAULT_HEAT_EMISSION_FACTOR = 0.11

DEFAULT_YEAR = "2022"

# Provincial grid factors (tCO2/MWh) by year.
PROVINCIAL_FACTORS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "山东": {"2021": 0.6838, "2022": 0.641},
        "新疆": {"2021": 0.6577, "2022": 0.6231},
        "宁夏": {"2021": 0.6546, "2022": 0.6423},
        "青海": {"2021": 0.1326, "2022": 0.1567},
        "甘肃": {"2021": 0.4955, "2022": 0.4772},
        "陕西": {"2021": 0.6336, "2022": 0.6558},
        "云南": {"2021": 0.1235, "2022": 0.1073},
        "贵州": {"2021": 0.5182, "2022": 0.4989},
        "四川": {"2021": 0.1255, "2022": 0.1404},
        "重庆": {"2021": 0.4743, "2022": 0.5227},
        "海南": {"2021": 0.4524, "2022": 0.4184},
        "广西": {"2021": 0.5154, "2022": 0.4044},
        "广东": {"2021": 0.4715, "2022": 0.4403},
        "湖南": {"2021": 0.5138, "2022": 0.49},
        "湖北": {"2021": 0.3672, "2022": 0.4364},
        "河南": {"2021": 0.6369, "2022": 0.6058},
        "江西": {"2021": 0.5835, "2022": 0.5752},
        "福建": {"2021": 0.4711, "2022": 0.4092},
        "安徽": {"2021": 0.7075, "2022": 0.6782},
        "浙江": {"2021": 0.5422, "2022": 0.5153},
        "江苏": {"2021": 0.6451, "2022": 0.5978},
        "上海": {"2021": 0.5834, "2022": 0.5849},
        "黑龙江": {"2021": 0.6342, "2022": 0.5368},
        "吉林": {"2021": 0.5629, "2022": 0.4932},
        "辽宁": {"2021": 0.5876, "2022": 0.5626},
        "内蒙古": {"2021": 0.7025, "2022": 0.6849},
        "山西": {"2021": 0.7222, "2022": 0.7096},
        "河北": {"2021": 0.7901, "2022": 0.7252},
        "天津": {"2021": 0.7355, "2022": 0.7041},
        "北京": {"2021": 0.5688, "2022": 0.558},
    }
)


def grid_emission_factor(province: str | None = None, year: str = DEFAULT_YEAR) -> float:
    """Provincial grid factor, or the national average when unknown."""

    if province is None:
        return DEFAULT_ELECTRICITY_EMISSION_FACTOR
    factor = PROVINCIAL_FACTORS.get(province, {}).get(str(year))
    if factor is None:
        logger.debug("No grid factor for %s/%s, using national average", province, year)
        return DEFAULT_ELECTRICITY_EMISSION_FACTOR
    return factor


def electricity_heat_emission(
    electricity_mwh: Any,
    heat_gj: Any,
    *,
    electricity_factor: Any = DEFAULT_ELECTRICITY_EMISSION_FACTOR,
    heat_factor: Any = DEFAULT_HEAT_EMISSION_FACTOR,
) -> float:
    """Net purchased electricity x grid factor + net purchased heat x heat factor."""

    return safe_float(electricity_mwh) * safe_float(electricity_factor) + safe_float(
        heat_gj
    ) * safe_float(heat_factor)


def monthly_electricity_heat(
    electricity_mwh: Any,
    heat_gj: Any,
    *,
    electricity_factor: Any = DEFAULT_ELECTRICITY_EMISSION_FACTOR,
    heat_factor: Any = DEFAULT_HEAT_EMISSION_FACTOR,
) -> pd.DataFrame:
    """Per-month electricity and heat emissions with their sum."""

    frame = monthly_frame({"electricity_mwh": electricity_mwh, "heat_gj": heat_gj})
    frame["electricity_t"] = frame["electricity_mwh"] * safe_float(electricity_factor)
    frame["heat_t"] = frame["heat_gj"] * safe_float(heat_factor)
    frame["emission_t"] = frame["electricity_t"] + frame["heat_t"]
    return frame


_UNSET: Any = object()


class PurchasedEnergy:
    """Monthly net purchased electricity and heat of one enterprise."""

    def __init__(
        self,
        *,
        province: str | None = None,
        year: str = DEFAULT_YEAR,
        callback: EmissionCallback | None = None,
        source: str = "common.electricity_heat",
    ) -> None:
        self.electricity_factor = grid_emission_factor(province, year)
        self.electricity_mwh: list[Any] = [None] * len(MONTHS)
        self.heat_gj: list[Any] = [None] * len(MONTHS)
        self._emitter = ReportEmitter(source, ELECTRICITY_HEAT, callback)

    def set_month(self, month: int, *, electricity_mwh: Any = _UNSET, heat_gj: Any = _UNSET) -> None:
        """Set one month; omitted quantities are kept, ``None`` clears them."""

        if month not in MONTHS:
            raise ValueError(f"Month must be between 1 and 12, got {month!r}.")
        if electricity_mwh is not _UNSET:
            self.electricity_mwh[month - 1] = electricity_mwh
        if heat_gj is not _UNSET:
            self.heat_gj[month - 1] = heat_gj
        self._emitter.emit(self.total_emission)

    def frame(self) -> pd.DataFrame:
        return monthly_electricity_heat(
            self.electricity_mwh,
            self.heat_gj,
            electricity_factor=self.electricity_factor,
        )

    @property
    def total_emission(self) -> float:
        return float(self.frame()["emission_t"].sum())


__all__ = [
    "DEFAULT_ELECTRICITY_EMISSION_FACTOR",
    "DEFAULT_HEAT_EMISSION_FACTOR",
    "PROVINCIAL_FACTORS",
    "PurchasedEnergy",
    "electricity_heat_emission",
    "grid_emission_factor",
    "monthly_electricity_heat",
]
