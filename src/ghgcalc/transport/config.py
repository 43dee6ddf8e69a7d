"""Loading of vehicle emission factor tables from JSON or YAML."""

from __future__ import annotations

import functools
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml
from pint.errors import DimensionalityError, UndefinedUnitError

from ..utils.units import normalize_distance_factor
from .constants import EMISSION_FACTORS, TYPE_LABEL_MAP, freeze_table

logger = logging.getLogger(__name__)

ENV_FACTORS_PATH = "GHGCALC_TRANSPORT_FACTORS"
_CANONICAL_UNIT = "mg/km"
_GASES = ("n2o", "ch4")


@dataclass(frozen=True)
class TransportConfig:
    """Emission factor table (mg/km) and the labels used to display it."""

    factors: Mapping[str, Mapping[str, Mapping[str, float]]]
    labels: Mapping[str, str]

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "TransportConfig":
        raw_factors = payload.get("factors", payload)
        if not isinstance(raw_factors, Mapping) or not raw_factors:
            raise ValueError("Factor table must be a non-empty mapping.")

        unit = str(payload.get("units") or _CANONICAL_UNIT)
        table: dict[str, dict[str, dict[str, float]]] = {}
        for key, standards in raw_factors.items():
            if key in {"units", "labels"} and raw_factors is payload:
                continue
            if not isinstance(standards, Mapping) or not standards:
                raise ValueError(f"Entry '{key}' must map emission standards to factors.")
            table[str(key)] = {
                str(standard): _parse_factors(key, standard, factors, unit)
                for standard, factors in standards.items()
            }

        labels = dict(TYPE_LABEL_MAP)
        raw_labels = payload.get("labels") or {}
        if not isinstance(raw_labels, Mapping):
            raise ValueError("'labels' must be a mapping.")
        labels.update({str(code): str(label) for code, label in raw_labels.items()})

        return cls(factors=freeze_table(table), labels=labels)


def _parse_factors(key: Any, standard: Any, factors: Any, unit: str) -> dict[str, float]:
    if factors is None:
        return {}
    if not isinstance(factors, Mapping):
        raise ValueError(f"Factors for '{key}' / '{standard}' must be a mapping.")

    parsed: dict[str, float] = {}
    for gas in _GASES:
        value = factors.get(gas)
        if value is None:
            continue
        try:
            number = float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Factor {gas} for '{key}' / '{standard}' must be numeric.") from exc
        try:
            parsed[gas] = normalize_distance_factor(number, unit, _CANONICAL_UNIT)
        except (DimensionalityError, UndefinedUnitError) as exc:
            raise ValueError(f"Unit '{unit}' cannot be converted to {_CANONICAL_UNIT}.") from exc
    return parsed


def _load_mapping_from_file(path: Path) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")

    # JSON is a subset of YAML, so try JSON first for clearer error messages.
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text)
    if not isinstance(data, Mapping):
        raise ValueError(f"Factor file '{path}' must contain a mapping.")
    return data


def load_transport_config(source: str | Path | Mapping[str, Any]) -> TransportConfig:
    """Load a :class:`TransportConfig` from a mapping or configuration file."""

    if isinstance(source, Mapping):
        mapping = source
    else:
        path = Path(source)
        logger.debug("Loading transport factors from %s", path)
        mapping = _load_mapping_from_file(path)
    return TransportConfig.from_mapping(mapping)


@functools.lru_cache(maxsize=1)
def default_transport_config() -> TransportConfig:
    """Bundled factors, or the file named by ``GHGCALC_TRANSPORT_FACTORS``."""

    override = os.environ.get(ENV_FACTORS_PATH)
    if override:
        logger.info("Using transport factor override %s", override)
        return load_transport_config(override)
    return TransportConfig(factors=EMISSION_FACTORS, labels=TYPE_LABEL_MAP)


__all__ = [
    "ENV_FACTORS_PATH",
    "TransportConfig",
    "default_transport_config",
    "load_transport_config",
]
