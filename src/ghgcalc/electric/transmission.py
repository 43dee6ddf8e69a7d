"""CO2 attributed to transmission and distribution losses of a grid company."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from ..events import EmissionCallback, ReportEmitter
from ..summary import TRANSMISSION_DISTRIBUTION
from ..utils.numbers import parse_number, safe_float

# Average grid supply emission factor, tCO2/MWh.
AVERAGE_EMISSION_FACTOR = 0.5366

INVALID_NUMBER_MESSAGE = "请输入有效的非负数"


@dataclass(slots=True)
class TransmissionInputs:
    """Electricity balance of the grid (all MWh)."""

    power_plant_grid_mwh: float = 0.0
    imported_mwh: float = 0.0
    exported_mwh: float = 0.0
    sold_mwh: float = 0.0

    @property
    def loss_mwh(self) -> float:
        return transmission_distribution_amount(
            self.power_plant_grid_mwh, self.imported_mwh, self.exported_mwh, self.sold_mwh
        )

    @property
    def emission(self) -> float:
        return self.loss_mwh * AVERAGE_EMISSION_FACTOR


FIELD_NAMES = tuple(item.name for item in fields(TransmissionInputs))


def transmission_distribution_amount(
    power_plant_grid_mwh: Any,
    imported_mwh: Any,
    exported_mwh: Any,
    sold_mwh: Any,
) -> float:
    """Grid supply plus imports minus exports and sales, floored at zero."""

    amount = (
        safe_float(power_plant_grid_mwh)
        + safe_float(imported_mwh)
        - safe_float(exported_mwh)
        - safe_float(sold_mwh)
    )
    return max(0.0, amount)


def transmission_emission(
    power_plant_grid_mwh: Any,
    imported_mwh: Any,
    exported_mwh: Any,
    sold_mwh: Any,
    emission_factor: float = AVERAGE_EMISSION_FACTOR,
) -> float:
    amount = transmission_distribution_amount(
        power_plant_grid_mwh, imported_mwh, exported_mwh, sold_mwh
    )
    return amount * emission_factor


def validate_inputs(values: Mapping[str, Any]) -> dict[str, str]:
    """Return field-level messages for negative or non-numeric entries."""

    errors: dict[str, str] = {}
    for name in FIELD_NAMES:
        if name in values and parse_number(values[name]) is None:
            errors[name] = INVALID_NUMBER_MESSAGE
    return errors


class TransmissionForm:
    """Current transmission inputs; invalid edits are refused per field."""

    def __init__(
        self,
        *,
        callback: EmissionCallback | None = None,
        source: str = "electric.transmission",
    ) -> None:
        self.inputs = TransmissionInputs()
        self.errors: dict[str, str] = {}
        self._emitter = ReportEmitter(source, TRANSMISSION_DISTRIBUTION, callback)

    def set_field(self, name: str, value: Any) -> bool:
        """Apply ``value`` to ``name``; returns ``False`` when it was rejected."""

        if name not in FIELD_NAMES:
            raise ValueError(f"Unknown field '{name}'. Allowed: {', '.join(FIELD_NAMES)}")
        number = parse_number(value)
        if number is None:
            self.errors[name] = INVALID_NUMBER_MESSAGE
            return False
        self.errors.pop(name, None)
        setattr(self.inputs, name, number)
        self._emitter.emit(
            self.inputs.emission,
            {"transmission_distribution_mwh": self.inputs.loss_mwh},
        )
        return True


__all__ = [
    "AVERAGE_EMISSION_FACTOR",
    "FIELD_NAMES",
    "TransmissionForm",
    "TransmissionInputs",
    "transmission_distribution_amount",
    "transmission_emission",
    "validate_inputs",
]
