"""Land transportation: vehicle CH4/N2O table and tail-gas purification."""

from .calculator import DerivedEmissions, compute, sum_emissions
from .combinations import CombinationRow, KEY_RULES, KeyRule, generate_rows, parse_factor_key
from .config import TransportConfig, default_transport_config, load_transport_config
from .rowspan import AnnotatedRow, RowSpanAnnotation, annotate
from .table import CombinationTable, EditEvent, InvalidEdit
from .tail_gas import emission_factor, monthly_tail_gas_emissions, tail_gas_emission

__all__ = [
    "AnnotatedRow",
    "CombinationRow",
    "CombinationTable",
    "DerivedEmissions",
    "EditEvent",
    "InvalidEdit",
    "KEY_RULES",
    "KeyRule",
    "RowSpanAnnotation",
    "TransportConfig",
    "annotate",
    "compute",
    "default_transport_config",
    "emission_factor",
    "generate_rows",
    "load_transport_config",
    "monthly_tail_gas_emissions",
    "parse_factor_key",
    "sum_emissions",
    "tail_gas_emission",
]
