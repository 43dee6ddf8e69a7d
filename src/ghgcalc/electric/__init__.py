"""Electric grid companies: SF6 equipment and transmission losses."""

from .sf6 import SF6Device, SF6Inventory, sf6_emission
from .transmission import (
    TransmissionForm,
    TransmissionInputs,
    transmission_distribution_amount,
    transmission_emission,
    validate_inputs,
)

__all__ = [
    "SF6Device",
    "SF6Inventory",
    "sf6_emission",
    "TransmissionForm",
    "TransmissionInputs",
    "transmission_distribution_amount",
    "transmission_emission",
    "validate_inputs",
]
