"""SF6 released when gas-insulated equipment is repaired or retired."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Literal

from ..common.evidence import Attachment
from ..events import EmissionCallback, ReportEmitter
from ..summary import SULFUR_HEXAFLUORIDE
from ..utils.ids import generate_id
from ..utils.numbers import safe_float

SF6_GWP = 23900
KG_TO_TONNE = 0.001

DeviceGroup = Literal["repaired", "retired"]
DEVICE_GROUPS: tuple[DeviceGroup, ...] = ("repaired", "retired")


@dataclass(slots=True)
class SF6Device:
    """One piece of equipment; capacity and recovered amount in kg."""

    id: str = field(default_factory=generate_id)
    capacity_kg: Any = ""
    recovered_kg: Any = ""
    proof: Attachment | None = None

    @property
    def released_kg(self) -> float:
        return safe_float(self.capacity_kg) - safe_float(self.recovered_kg)


def released_mass(devices: Iterable[SF6Device]) -> float:
    return sum(device.released_kg for device in devices)


def sf6_emission(repaired: Iterable[SF6Device], retired: Iterable[SF6Device]) -> float:
    """E = sum(capacity - recovered) x GWP_SF6 x 0.001, in tCO2e."""

    return (released_mass(repaired) + released_mass(retired)) * SF6_GWP * KG_TO_TONNE


class SF6Inventory:
    """Repaired and retired device lists with add/update/remove by id."""

    def __init__(
        self,
        *,
        callback: EmissionCallback | None = None,
        source: str = "electric.sf6",
    ) -> None:
        self.repaired: list[SF6Device] = []
        self.retired: list[SF6Device] = []
        self._emitter = ReportEmitter(source, SULFUR_HEXAFLUORIDE, callback)

    def _group(self, group: str) -> list[SF6Device]:
        if group == "repaired":
            return self.repaired
        if group == "retired":
            return self.retired
        raise ValueError(f"Unknown device group '{group}'. Expected one of: {', '.join(DEVICE_GROUPS)}")

    def add_device(
        self,
        group: DeviceGroup,
        capacity_kg: Any = "",
        recovered_kg: Any = "",
        proof: Attachment | None = None,
    ) -> SF6Device:
        device = SF6Device(capacity_kg=capacity_kg, recovered_kg=recovered_kg, proof=proof)
        self._group(group).append(device)
        self._changed()
        return device

    def update_device(self, group: DeviceGroup, device_id: str, **changes: Any) -> SF6Device:
        device = self.get_device(group, device_id)
        for name, value in changes.items():
            if name not in {"capacity_kg", "recovered_kg", "proof"}:
                raise ValueError(f"Field '{name}' cannot be updated.")
            setattr(device, name, value)
        self._changed()
        return device

    def remove_device(self, group: DeviceGroup, device_id: str) -> None:
        devices = self._group(group)
        remaining = [device for device in devices if device.id != device_id]
        if len(remaining) == len(devices):
            raise KeyError(f"No {group} device with id '{device_id}'.")
        devices[:] = remaining
        self._changed()

    def get_device(self, group: DeviceGroup, device_id: str) -> SF6Device:
        for device in self._group(group):
            if device.id == device_id:
                return device
        raise KeyError(f"No {group} device with id '{device_id}'.")

    @property
    def total_emission(self) -> float:
        return sf6_emission(self.repaired, self.retired)

    def _changed(self) -> None:
        self._emitter.emit(
            self.total_emission,
            {"repaired": len(self.repaired), "retired": len(self.retired)},
        )


__all__ = [
    "DEVICE_GROUPS",
    "SF6Device",
    "SF6Inventory",
    "SF6_GWP",
    "released_mass",
    "sf6_emission",
]
