"""Row-span bookkeeping for merging repeated vehicle/fuel cells."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(slots=True, frozen=True)
class RowSpanAnnotation:
    is_first_of_vehicle_group: bool
    vehicle_group_size: int
    is_first_of_fuel_group: bool
    fuel_group_size: int


@dataclass(slots=True, frozen=True)
class AnnotatedRow:
    """A row paired with the spans a tabular renderer needs."""

    row: Any
    span: RowSpanAnnotation


def annotate(rows: Sequence[Any]) -> list[AnnotatedRow]:
    """Attach a :class:`RowSpanAnnotation` to every row.

    The first row of each vehicle-type group (and of each vehicle/fuel group)
    carries the full group size; every later row of the same group carries 0.
    "First" follows input order, so ``rows`` must already be contiguous by
    vehicle type and fuel type as produced by
    :func:`~.combinations.generate_rows`. Non-contiguous input yields spans
    that do not line up with the rows.
    """

    vehicle_sizes: Counter[str] = Counter()
    fuel_sizes: Counter[tuple[str, str]] = Counter()
    for row in rows:
        vehicle_sizes[row.vehicle_type] += 1
        fuel_sizes[(row.vehicle_type, row.fuel_type)] += 1

    seen_vehicles: set[str] = set()
    seen_fuels: set[tuple[str, str]] = set()
    annotated: list[AnnotatedRow] = []
    for row in rows:
        fuel_key = (row.vehicle_type, row.fuel_type)
        first_vehicle = row.vehicle_type not in seen_vehicles
        first_fuel = fuel_key not in seen_fuels
        seen_vehicles.add(row.vehicle_type)
        seen_fuels.add(fuel_key)

        annotated.append(
            AnnotatedRow(
                row=row,
                span=RowSpanAnnotation(
                    is_first_of_vehicle_group=first_vehicle,
                    vehicle_group_size=vehicle_sizes[row.vehicle_type] if first_vehicle else 0,
                    is_first_of_fuel_group=first_fuel,
                    fuel_group_size=fuel_sizes[fuel_key] if first_fuel else 0,
                ),
            )
        )

    return annotated


__all__ = ["AnnotatedRow", "RowSpanAnnotation", "annotate"]
