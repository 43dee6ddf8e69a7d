"""Electronics manufacturing: fluorinated feed gases and their by-products."""

from .constants import BYPRODUCT_GASES, DEFAULT_PARAMETERS, MATERIAL_GASES, GasDefaults
from .process import (
    Byproduct,
    FeedGas,
    ProcessInventory,
    byproduct_emission,
    leakage_emission,
)

__all__ = [
    "BYPRODUCT_GASES",
    "Byproduct",
    "DEFAULT_PARAMETERS",
    "FeedGas",
    "GasDefaults",
    "MATERIAL_GASES",
    "ProcessInventory",
    "byproduct_emission",
    "leakage_emission",
]
