"""Industry-level aggregation of component emissions."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Literal, Mapping

from .events import EmissionReport
from .utils.numbers import safe_float

logger = logging.getLogger(__name__)

CategoryKind = Literal["emission", "electricity", "subtraction"]

FOSSIL_FUEL = "fossil_fuel"
FOSSIL_FUEL_GHG = "fossil_fuel_ghg"
TAIL_GAS_PURIFICATION = "tail_gas_purification"
ELECTRICITY_HEAT = "electricity_heat"
SULFUR_HEXAFLUORIDE = "sulfur_hexafluoride"
TRANSMISSION_DISTRIBUTION = "transmission_distribution"
ELECTRONIC_PROCESS = "electronic_process"
STEEL_FOSSIL_FUEL = "steel_fossil_fuel"
STEEL_PROCESS = "process"
STEEL_OTHER = "other"
STEEL_ELECTRICITY = "electricity"
STEEL_HEAT = "heat"
CARBON_SEQUESTRATION = "carbon_sequestration"


@dataclass(frozen=True)
class Category:
    """One line of an industry summary table."""

    key: str
    label: str
    kind: CategoryKind = "emission"


@dataclass(frozen=True)
class IndustryConfig:
    """Summary categories reported by the calculators of one industry."""

    key: str
    name: str
    categories: tuple[Category, ...]

    def kind_of(self, key: str) -> CategoryKind | None:
        for category in self.categories:
            if category.key == key:
                return category.kind
        return None


@dataclass(frozen=True)
class SummaryTotals:
    base_total: float
    grand_total: float


INDUSTRIES: Mapping[str, IndustryConfig] = {
    "land_transportation": IndustryConfig(
        key="land_transportation",
        name="陆上交通运输行业",
        categories=(
            Category(FOSSIL_FUEL, "化石燃料燃烧CO₂排放"),
            Category(FOSSIL_FUEL_GHG, "化石燃料燃烧甲烷和氧化亚氮排放"),
            Category(TAIL_GAS_PURIFICATION, "尾气净化过程CO₂排放"),
            Category(ELECTRICITY_HEAT, "净购入电力和热力隐含的CO₂排放", "electricity"),
        ),
    ),
    "electric_grid": IndustryConfig(
        key="electric_grid",
        name="电网企业",
        categories=(
            Category(FOSSIL_FUEL, "化石燃料燃烧CO₂排放"),
            Category(SULFUR_HEXAFLUORIDE, "使用六氟化硫设备修理与退役过程产生的排放"),
            Category(TRANSMISSION_DISTRIBUTION, "输电与分配过程产生的排放"),
            Category(ELECTRICITY_HEAT, "净购入电力和热力隐含的CO₂排放", "electricity"),
        ),
    ),
    "electronics": IndustryConfig(
        key="electronics",
        name="电子设备制造企业",
        categories=(
            Category(FOSSIL_FUEL, "化石燃料燃烧CO₂排放"),
            Category(ELECTRONIC_PROCESS, "电子设备制造含氟气体排放"),
            Category(ELECTRICITY_HEAT, "净购入电力和热力隐含的CO₂排放", "electricity"),
        ),
    ),
    "steel": IndustryConfig(
        key="steel",
        name="钢铁生产行业",
        categories=(
            Category(STEEL_FOSSIL_FUEL, "钢铁行业化石燃料排放"),
            Category(STEEL_PROCESS, "工业过程排放"),
            Category(STEEL_OTHER, "发电设施及其他排放"),
            Category(CARBON_SEQUESTRATION, "固碳产品隐含排放", "subtraction"),
            Category(STEEL_ELECTRICITY, "工序消耗电力排放", "electricity"),
            Category(STEEL_HEAT, "工序消耗热力排放", "electricity"),
        ),
    ),
}

# Used when no industry is given: every key except purchased electricity/heat
# belongs to the base total.
GENERIC = IndustryConfig(key="generic", name="generic", categories=())


def _kind(config: IndustryConfig, key: str) -> CategoryKind | None:
    if config is GENERIC:
        return "electricity" if key == ELECTRICITY_HEAT else "emission"
    return config.kind_of(key)


def summarize(
    category_values: Mapping[str, Any] | None,
    config: IndustryConfig = GENERIC,
) -> SummaryTotals:
    """Return the base total and the grand total of ``category_values``.

    The base total sums every emission category (subtraction categories are
    deducted) and excludes electricity/heat; the grand total adds those back.
    Missing or non-numeric values count as zero. Sums use :func:`math.fsum`,
    so the result does not depend on insertion order.
    """

    base_terms: list[float] = []
    electricity_terms: list[float] = []
    for key, raw in (category_values or {}).items():
        kind = _kind(config, key)
        if kind is None:
            logger.debug("Ignoring category %r not reported by %s", key, config.key)
            continue
        value = safe_float(raw)
        if kind == "electricity":
            electricity_terms.append(value)
        elif kind == "subtraction":
            base_terms.append(-value)
        else:
            base_terms.append(value)

    base_total = math.fsum(base_terms)
    return SummaryTotals(
        base_total=base_total,
        grand_total=base_total + math.fsum(electricity_terms),
    )


def summary_rows(
    category_values: Mapping[str, Any] | None,
    config: IndustryConfig,
) -> list[dict[str, Any]]:
    """Rows for an industry summary table, including the two totals.

    ``share_percent`` is each category's share of the grand total, or 0 when
    the grand total is not positive.
    """

    values = dict(category_values or {})
    totals = summarize(values, config)
    rows: list[dict[str, Any]] = []
    for category in config.categories:
        value = safe_float(values.get(category.key))
        share = value / totals.grand_total * 100 if totals.grand_total > 0 else 0.0
        rows.append(
            {
                "key": category.key,
                "label": category.label,
                "kind": category.kind,
                "value": value,
                "share_percent": share,
            }
        )
    rows.append(
        {
            "key": "base_total",
            "label": "企业温室气体排放总量（不包括净购入电力和热力）",
            "value": totals.base_total,
            "is_total": True,
        }
    )
    rows.append(
        {
            "key": "grand_total",
            "label": "企业温室气体排放总量（包括净购入电力和热力）",
            "value": totals.grand_total,
            "is_total": True,
        }
    )
    return rows


class IndustryLedger:
    """Collects :class:`EmissionReport` messages for one industry.

    Pass :meth:`receive` as the callback of each component calculator. The
    latest report per category wins; totals are recomputed on every read.
    """

    def __init__(self, config: IndustryConfig) -> None:
        self.config = config
        self._values: dict[str, float] = {}
        self.latest: dict[str, EmissionReport] = {}

    def receive(self, report: EmissionReport) -> None:
        if self.config.kind_of(report.category) is None:
            logger.warning(
                "Category %r from %s is not part of the %s summary",
                report.category,
                report.source,
                self.config.key,
            )
        self._values[report.category] = safe_float(report.total_tco2e)
        self.latest[report.category] = report

    @property
    def values(self) -> dict[str, float]:
        return dict(self._values)

    def summary(self) -> SummaryTotals:
        return summarize(self._values, self.config)

    def rows(self) -> list[dict[str, Any]]:
        return summary_rows(self._values, self.config)


def get_industry(key: str) -> IndustryConfig:
    try:
        return INDUSTRIES[key]
    except KeyError as exc:
        raise KeyError(f"Unknown industry '{key}'.") from exc


__all__ = [
    "Category",
    "IndustryConfig",
    "IndustryLedger",
    "INDUSTRIES",
    "GENERIC",
    "SummaryTotals",
    "get_industry",
    "summarize",
    "summary_rows",
    "FOSSIL_FUEL",
    "FOSSIL_FUEL_GHG",
    "TAIL_GAS_PURIFICATION",
    "ELECTRICITY_HEAT",
    "SULFUR_HEXAFLUORIDE",
    "TRANSMISSION_DISTRIBUTION",
    "ELECTRONIC_PROCESS",
    "STEEL_FOSSIL_FUEL",
    "STEEL_PROCESS",
    "STEEL_OTHER",
    "STEEL_ELECTRICITY",
    "STEEL_HEAT",
    "CARBON_SEQUESTRATION",
]
