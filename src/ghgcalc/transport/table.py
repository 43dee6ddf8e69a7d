"""Editable vehicle combination table with upward emission reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import pandas as pd

from ..events import EmissionCallback, ReportEmitter
from ..summary import FOSSIL_FUEL_GHG
from ..utils.numbers import parse_number
from .calculator import DerivedEmissions, sum_emissions
from .combinations import CombinationRow, FactorTable, generate_rows
from .constants import EMISSION_FACTORS, TYPE_LABEL_MAP
from .rowspan import AnnotatedRow, annotate

EDITABLE_FIELDS = ("vehicle_count", "distance")


@dataclass(slots=True, frozen=True)
class EditEvent:
    """A single user edit: set ``field`` of row ``row_key`` to ``value``."""

    row_key: str
    field: str
    value: Any


class InvalidEdit(ValueError):
    """Raised when an edit value fails field validation; the row is unchanged."""

    def __init__(self, row_key: str, field: str, message: str) -> None:
        super().__init__(f"{row_key}.{field}: {message}")
        self.row_key = row_key
        self.field = field
        self.message = message


class CombinationTable:
    """Owns the combination rows of one view and applies edits to them.

    Rows are generated once from the factor table and never added or removed.
    After each accepted edit the table total is sent to ``callback`` as an
    :class:`~ghgcalc.events.EmissionReport` (only when it changed).
    """

    def __init__(
        self,
        table: FactorTable = EMISSION_FACTORS,
        labels: Mapping[str, str] = TYPE_LABEL_MAP,
        *,
        callback: EmissionCallback | None = None,
        source: str = "transport.fossil_fuel_ghg",
    ) -> None:
        self.rows: list[CombinationRow] = generate_rows(table, labels)
        self._index = {row.key: row for row in self.rows}
        self._emitter = ReportEmitter(source, FOSSIL_FUEL_GHG, callback)

    def __len__(self) -> int:
        return len(self.rows)

    def row(self, row_key: str) -> CombinationRow:
        try:
            return self._index[row_key]
        except KeyError as exc:
            raise KeyError(f"Unknown row '{row_key}'.") from exc

    def apply_edit(self, event: EditEvent) -> CombinationRow:
        """Validate and apply ``event``, then report the new total."""

        if event.field not in EDITABLE_FIELDS:
            raise ValueError(
                f"Field '{event.field}' is not editable. Allowed: {', '.join(EDITABLE_FIELDS)}"
            )
        row = self.row(event.row_key)

        number = parse_number(event.value)
        if number is None:
            raise InvalidEdit(event.row_key, event.field, "请输入有效的非负数")
        if event.field == "vehicle_count":
            if not number.is_integer():
                raise InvalidEdit(event.row_key, event.field, "车辆数必须为整数")
            row.vehicle_count = int(number)
        else:
            row.distance = number

        self._emitter.emit(self.total_co2e_t, {"rows": len(self.rows)})
        return row

    def edit(self, row_key: str, field: str, value: Any) -> CombinationRow:
        return self.apply_edit(EditEvent(row_key, field, value))

    def annotated(self) -> list[AnnotatedRow]:
        return annotate(self.rows)

    def totals(self) -> DerivedEmissions:
        return sum_emissions(self.rows)

    @property
    def total_co2e_t(self) -> float:
        return self.totals().total_co2e_t

    def to_frame(self) -> pd.DataFrame:
        """Flatten rows, spans and derived emissions into a dataframe."""

        records = []
        for item in self.annotated():
            record = item.row.as_dict()
            record.update(
                {
                    "vehicle_type_rowspan": item.span.vehicle_group_size,
                    "fuel_type_rowspan": item.span.fuel_group_size,
                }
            )
            records.append(record)
        return pd.DataFrame.from_records(records)


__all__ = ["CombinationTable", "EditEvent", "InvalidEdit", "EDITABLE_FIELDS"]
