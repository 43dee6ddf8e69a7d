"""Expansion of the vehicle emission factor table into editable rows."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Callable, Mapping

from .calculator import DerivedEmissions, compute
from .constants import EMISSION_FACTORS, TYPE_LABEL_MAP

FactorTable = Mapping[str, Mapping[str, Mapping[str, float]]]


def _segments_from(index: int) -> Callable[[str], str]:
    def extract(key: str) -> str:
        return "-".join(key.split("-")[index:])

    return extract


def _fixed(value: str) -> Callable[[str], str]:
    return lambda key: value


@dataclass(frozen=True)
class KeyRule:
    """Irregular compound key: ``prefix`` maps to a fixed vehicle type."""

    prefix: str
    vehicle_type: str
    fuel_type: Callable[[str], str]


# Evaluated in order; keys matching none of these split on the first dash.
KEY_RULES: tuple[KeyRule, ...] = (
    KeyRule("car-other-light", "car-other-light", _segments_from(3)),
    KeyRule("heavy-gas-natural", "heavy", _fixed("gas-natural")),
)


def parse_factor_key(key: str) -> tuple[str, str]:
    """Split a compound table key into ``(vehicle_type, fuel_type)``."""

    for rule in KEY_RULES:
        if key.startswith(rule.prefix):
            return rule.vehicle_type, rule.fuel_type(key)
    vehicle_type, _, fuel_type = key.partition("-")
    return vehicle_type, fuel_type


@dataclass(slots=True)
class CombinationRow:
    """One (vehicle type, fuel type, emission standard) line of the table."""

    key: str
    vehicle_type: str
    fuel_type: str
    standard: str
    vehicle_type_name: str
    fuel_type_name: str
    n2o_factor: float
    ch4_factor: float
    vehicle_count: int = 0
    distance: float = 0.0

    @property
    def emissions(self) -> DerivedEmissions:
        return compute(self)

    def as_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload.update(self.emissions.as_dict())
        return payload


def generate_rows(
    table: FactorTable = EMISSION_FACTORS,
    labels: Mapping[str, str] = TYPE_LABEL_MAP,
) -> list[CombinationRow]:
    """Return one fresh row per (key, standard) leaf of ``table``.

    Rows are sorted by vehicle type and then fuel type; the sort is stable so
    standards keep the order in which the table lists them. Every call
    allocates new rows with zeroed vehicle counts and distances.
    """

    rows: list[CombinationRow] = []
    for table_key, standards in table.items():
        vehicle_type, fuel_type = parse_factor_key(table_key)
        for standard, factors in standards.items():
            factors = factors or {}
            rows.append(
                CombinationRow(
                    key=f"{table_key}-{standard}",
                    vehicle_type=vehicle_type,
                    fuel_type=fuel_type,
                    standard=standard,
                    vehicle_type_name=labels.get(vehicle_type, vehicle_type),
                    fuel_type_name=labels.get(fuel_type, fuel_type),
                    n2o_factor=float(factors.get("n2o") or 0),
                    ch4_factor=float(factors.get("ch4") or 0),
                )
            )

    return sorted(rows, key=lambda row: (row.vehicle_type, row.fuel_type))


__all__ = ["CombinationRow", "KeyRule", "KEY_RULES", "generate_rows", "parse_factor_key"]
