"""Steel production: per-process electricity and heat, process materials and
carbon-sequestering products."""

from .electricity import (
    SteelElectricity,
    consumed_method1,
    consumed_method2,
    electricity_emission,
    monthly_consumption,
)
from .heat import SteelHeat, heat_emission, monthly_heat
from .lines import PROCESS_TYPES, LineSheet, ProductionLine
from .materials import (
    PROCESS_MATERIALS,
    SEQUESTRATION_PRODUCTS,
    CarbonSequestration,
    MaterialSheet,
    SteelProcess,
    material_emission,
)

__all__ = [
    "CarbonSequestration",
    "LineSheet",
    "MaterialSheet",
    "PROCESS_MATERIALS",
    "PROCESS_TYPES",
    "ProductionLine",
    "SEQUESTRATION_PRODUCTS",
    "SteelElectricity",
    "SteelHeat",
    "SteelProcess",
    "consumed_method1",
    "consumed_method2",
    "electricity_emission",
    "heat_emission",
    "material_emission",
    "monthly_consumption",
    "monthly_heat",
]
