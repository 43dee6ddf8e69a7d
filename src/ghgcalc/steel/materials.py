"""Purchased materials and carbon-sequestering products of a steel plant.

Both sheets share one rule per material and month::

    emission = max(0, amount) x emission factor

where a blank or zero monthly factor falls back to the material's default.
Process materials (fluxes, electrodes and purchased carbon-bearing inputs)
report to the industrial process category. Carbon-sequestering products
report to their own category, which the steel summary subtracts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

import pandas as pd

from ..common.monthly import MONTHS, month_values, monthly_frame
from ..events import EmissionCallback, ReportEmitter
from ..summary import CARBON_SEQUESTRATION, STEEL_PROCESS
from ..utils.ids import generate_id
from ..utils.numbers import non_negative, safe_float

MATERIAL_INDICATORS = ("amount_t", "emission_factor")

FLUX = "flux"
ELECTRODE = "electrode"
CARBON_MATERIAL = "carbon_material"
PRODUCT = "product"


@dataclass(frozen=True)
class MaterialDefaults:
    name: str
    emission_factor: float


# tCO2 per tonne.
PROCESS_MATERIALS: Mapping[str, tuple[MaterialDefaults, ...]] = MappingProxyType(
    {
        FLUX: (
            MaterialDefaults("石灰石", 0.440),
            MaterialDefaults("白云石", 0.471),
        ),
        ELECTRODE: (MaterialDefaults("电极", 3.663),),
        CARBON_MATERIAL: (
            MaterialDefaults("生铁", 0.172),
            MaterialDefaults("直接还原铁", 0.073),
            MaterialDefaults("镍铁合金", 0.037),
            MaterialDefaults("硅铁合金", 0.007),
            MaterialDefaults("钼铁合金", 0.018),
            MaterialDefaults("锰硅合金", 0.092),
            MaterialDefaults("低碳锰硅合金", 0.011),
            MaterialDefaults("高炉锰铁", 0.275),
            MaterialDefaults("电炉高碳锰铁", 0.275),
            MaterialDefaults("微碳锰铁", 0.004),
            MaterialDefaults("高碳铬铁", 0.348),
            MaterialDefaults("废钢", 0.037),
        ),
    }
)
SEQUESTRATION_PRODUCTS: Mapping[str, tuple[MaterialDefaults, ...]] = MappingProxyType(
    {
        PRODUCT: (
            MaterialDefaults("生铁", 0.172),
            MaterialDefaults("粗钢", 0.037),
            MaterialDefaults("焦油", 2.699),
            MaterialDefaults("粗苯", 3.382),
        ),
    }
)

NEW_ITEM_NAMES: Mapping[str, str] = MappingProxyType(
    {
        FLUX: "新熔剂",
        ELECTRODE: "新电极",
        CARBON_MATERIAL: "新外购含碳原料",
        PRODUCT: "新固碳产品",
    }
)


def material_emission(
    amount_t: Any,
    emission_factor: Any = None,
    default_factor: float = 0.0,
) -> float:
    """Emission of one month; a blank or zero factor uses ``default_factor``."""

    factor = safe_float(emission_factor) or default_factor
    return non_negative(amount_t) * factor


@dataclass(slots=True)
class MaterialItem:
    """A material with its default factor and twelve months of inputs."""

    group: str
    name: str
    emission_factor: float = 0.0
    is_default: bool = False
    id: str = field(default_factory=generate_id)
    values: dict[str, list[Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.values.setdefault("amount_t", [None] * len(MONTHS))
        self.values.setdefault("emission_factor", [self.emission_factor] * len(MONTHS))

    def frame(self) -> pd.DataFrame:
        frame = monthly_frame({name: self.values[name] for name in MATERIAL_INDICATORS})
        factor = frame["emission_factor"]
        frame["emission_factor"] = factor.where(factor != 0, self.emission_factor)
        frame["emission_t"] = frame["amount_t"].clip(lower=0.0) * frame["emission_factor"]
        return frame

    @property
    def total_emission(self) -> float:
        return float(self.frame()["emission_t"].sum())


class MaterialSheet:
    """Material groups seeded with defaults; reports the annual total on change.

    Default materials can be renamed and edited but not removed.
    """

    def __init__(
        self,
        groups: Mapping[str, tuple[MaterialDefaults, ...]],
        category: str,
        source: str,
        callback: EmissionCallback | None = None,
    ) -> None:
        self.items: list[MaterialItem] = [
            MaterialItem(group, item.name, item.emission_factor, is_default=True)
            for group, defaults in groups.items()
            for item in defaults
        ]
        self.groups = tuple(groups)
        self._emitter = ReportEmitter(source, category, callback)

    def group(self, group: str) -> list[MaterialItem]:
        self._check_group(group)
        return [item for item in self.items if item.group == group]

    def get_item(self, item_id: str) -> MaterialItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise KeyError(f"No material with id '{item_id}'.")

    def add_item(self, group: str, name: str = "", emission_factor: Any = None) -> MaterialItem:
        self._check_group(group)
        item = MaterialItem(
            group,
            name.strip() or NEW_ITEM_NAMES.get(group, group),
            non_negative(emission_factor),
        )
        self.items.append(item)
        self._changed()
        return item

    def remove_item(self, item_id: str) -> None:
        item = self.get_item(item_id)
        if item.is_default:
            raise ValueError(f"Default material '{item.name}' cannot be removed.")
        self.items.remove(item)
        self._changed()

    def rename(self, item_id: str, name: str) -> None:
        if not name.strip():
            raise ValueError("Material name must not be blank.")
        self.get_item(item_id).name = name.strip()

    def set_value(self, item_id: str, indicator: str, month: int, value: Any) -> None:
        self._check_indicator(indicator)
        if month not in MONTHS:
            raise ValueError(f"Month must be between 1 and 12, got {month!r}.")
        self.get_item(item_id).values[indicator][month - 1] = value
        self._changed()

    def fill(self, item_id: str, indicator: str, values: Any) -> None:
        self._check_indicator(indicator)
        self.get_item(item_id).values[indicator] = month_values(values)
        self._changed()

    def group_totals(self) -> dict[str, float]:
        """Annual emission (tCO2) per material group."""

        totals = dict.fromkeys(self.groups, 0.0)
        for item in self.items:
            totals[item.group] += item.total_emission
        return totals

    def monthly_totals(self) -> pd.Series:
        totals = pd.Series(0.0, index=pd.Index(MONTHS, name="month"))
        for item in self.items:
            totals = totals + item.frame()["emission_t"]
        return totals

    @property
    def total_emission(self) -> float:
        return float(self.monthly_totals().sum())

    def _check_group(self, group: str) -> None:
        if group not in self.groups:
            raise ValueError(
                f"Unknown material group '{group}'. Allowed: {', '.join(self.groups)}"
            )

    def _check_indicator(self, indicator: str) -> None:
        if indicator not in MATERIAL_INDICATORS:
            raise ValueError(
                f"Unknown indicator '{indicator}'. Allowed: {', '.join(MATERIAL_INDICATORS)}"
            )

    def _changed(self) -> None:
        self._emitter.emit(self.total_emission, {"materials": len(self.items)})


class SteelProcess(MaterialSheet):
    """Fluxes, electrodes and purchased carbon-bearing materials."""

    def __init__(
        self,
        *,
        callback: EmissionCallback | None = None,
        source: str = "steel.process",
    ) -> None:
        super().__init__(PROCESS_MATERIALS, STEEL_PROCESS, source, callback)


class CarbonSequestration(MaterialSheet):
    """Carbon retained in products; deducted from the plant total."""

    def __init__(
        self,
        *,
        callback: EmissionCallback | None = None,
        source: str = "steel.carbon_sequestration",
    ) -> None:
        super().__init__(SEQUESTRATION_PRODUCTS, CARBON_SEQUESTRATION, source, callback)


__all__ = [
    "CARBON_MATERIAL",
    "ELECTRODE",
    "FLUX",
    "MATERIAL_INDICATORS",
    "PROCESS_MATERIALS",
    "PRODUCT",
    "SEQUESTRATION_PRODUCTS",
    "CarbonSequestration",
    "MaterialDefaults",
    "MaterialItem",
    "MaterialSheet",
    "SteelProcess",
    "material_emission",
]
