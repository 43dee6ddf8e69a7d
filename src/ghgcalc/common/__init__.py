"""Calculators shared by several industries."""

from .electricity_heat import (
    PurchasedEnergy,
    DEFAULT_ELECTRICITY_EMISSION_FACTOR,
    DEFAULT_HEAT_EMISSION_FACTOR,
    electricity_heat_emission,
    grid_emission_factor,
    monthly_electricity_heat,
)
from .evidence import Attachment
from .fossil_fuel import DEFAULT_FUELS, FuelInventory, FuelRow, combustion_emission, fuel_rows
from .monthly import MONTHS, monthly_frame

__all__ = [
    "Attachment",
    "DEFAULT_ELECTRICITY_EMISSION_FACTOR",
    "DEFAULT_FUELS",
    "DEFAULT_HEAT_EMISSION_FACTOR",
    "FuelInventory",
    "FuelRow",
    "PurchasedEnergy",
    "MONTHS",
    "combustion_emission",
    "electricity_heat_emission",
    "fuel_rows",
    "grid_emission_factor",
    "monthly_electricity_heat",
    "monthly_frame",
]
