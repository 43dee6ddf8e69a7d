"""Production processes of a steel plant and their monthly indicator sheets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Sequence

import pandas as pd

from ..common.monthly import MONTHS, month_values
from ..events import EmissionCallback, ReportEmitter
from ..utils.ids import generate_id

PROCESS_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "coking": "焦化工序",
        "sintering": "烧结工序",
        "pelletizing": "球团工序",
        "blastFurnace": "高炉炼铁工序",
        "converter": "转炉炼钢工序",
        "eaf": "电炉炼钢工序",
        "refining": "精炼工序",
        "continuousCasting": "连铸工序",
        "rolling": "钢压延加工工序",
        "lime": "石灰工序",
    }
)


@dataclass(slots=True)
class ProductionLine:
    """A process (preset or custom) and the monthly values entered for it."""

    process_type: str
    name: str = ""
    id: str = field(default_factory=generate_id)
    values: dict[str, list[Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            self.name = PROCESS_TYPES.get(self.process_type, self.process_type)


class LineSheet(ABC):
    """Monthly indicators per production line, reported as one category.

    Subclasses name the input ``indicators`` and implement :meth:`line_frame`.
    """

    indicators: Sequence[str] = ()

    def __init__(self, category: str, source: str, callback: EmissionCallback | None) -> None:
        self.lines: list[ProductionLine] = []
        self._emitter = ReportEmitter(source, category, callback)

    def _blank_values(self) -> dict[str, list[Any]]:
        return {name: [None] * len(MONTHS) for name in self.indicators}

    def add_line(self, process_type: str, name: str = "") -> ProductionLine:
        line = ProductionLine(process_type=process_type, name=name, values=self._blank_values())
        self.lines.append(line)
        self._changed()
        return line

    def remove_line(self, line_id: str) -> None:
        remaining = [line for line in self.lines if line.id != line_id]
        if len(remaining) == len(self.lines):
            raise KeyError(f"No production line with id '{line_id}'.")
        self.lines = remaining
        self._changed()

    def get_line(self, line_id: str) -> ProductionLine:
        for line in self.lines:
            if line.id == line_id:
                return line
        raise KeyError(f"No production line with id '{line_id}'.")

    def _check_indicator(self, indicator: str) -> None:
        if indicator not in self.indicators:
            raise ValueError(
                f"Unknown indicator '{indicator}'. Allowed: {', '.join(self.indicators)}"
            )

    def set_value(self, line_id: str, indicator: str, month: int, value: Any) -> None:
        self._check_indicator(indicator)
        if month not in MONTHS:
            raise ValueError(f"Month must be between 1 and 12, got {month!r}.")
        self.get_line(line_id).values[indicator][month - 1] = value
        self._changed()

    def fill(self, line_id: str, indicator: str, values: Any) -> None:
        self._check_indicator(indicator)
        self.get_line(line_id).values[indicator] = month_values(values)
        self._changed()

    @abstractmethod
    def line_frame(self, line: ProductionLine) -> pd.DataFrame:
        """Monthly frame of ``line`` with an ``emission_t`` column."""

    def line_totals(self) -> dict[str, float]:
        """Annual emission (tCO2) per production line id."""

        return {line.id: float(self.line_frame(line)["emission_t"].sum()) for line in self.lines}

    def monthly_totals(self) -> pd.Series:
        totals = pd.Series(0.0, index=pd.Index(MONTHS, name="month"))
        for line in self.lines:
            totals = totals + self.line_frame(line)["emission_t"]
        return totals

    @property
    def total_emission(self) -> float:
        return float(self.monthly_totals().sum())

    def _changed(self) -> None:
        self._emitter.emit(self.total_emission, {"lines": len(self.lines)})


__all__ = ["LineSheet", "PROCESS_TYPES", "ProductionLine"]
