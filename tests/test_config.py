from __future__ import annotations

import json
from pathlib import Path

import pytest

from ghgcalc.transport import generate_rows, load_transport_config
from ghgcalc.transport.config import ENV_FACTORS_PATH, default_transport_config


def test_load_yaml_file(tmp_path: Path) -> None:
    path = tmp_path / "factors.yaml"
    path.write_text(
        "factors:\n"
        "  bus-diesel:\n"
        "    国V:\n"
        "      n2o: 20\n"
        "      ch4: 10\n"
        "labels:\n"
        "  bus: 公交车\n",
        encoding="utf-8",
    )

    config = load_transport_config(path)

    assert config.factors["bus-diesel"]["国V"] == {"n2o": 20.0, "ch4": 10.0}
    assert config.labels["bus"] == "公交车"
    assert config.labels["diesel"] == "柴油"


def test_load_json_file_with_bare_table(tmp_path: Path) -> None:
    path = tmp_path / "factors.json"
    path.write_text(json.dumps({"car-gasoline": {"国VI": {"n2o": 3}}}), encoding="utf-8")

    config = load_transport_config(path)
    rows = generate_rows(config.factors, config.labels)

    assert [row.key for row in rows] == ["car-gasoline-国VI"]
    assert rows[0].ch4_factor == 0


def test_units_are_normalised_to_mg_per_km() -> None:
    config = load_transport_config(
        {"units": "g/km", "factors": {"car-gasoline": {"国I": {"n2o": 0.038, "ch4": 0.045}}}}
    )

    assert config.factors["car-gasoline"]["国I"]["n2o"] == pytest.approx(38)
    assert config.factors["car-gasoline"]["国I"]["ch4"] == pytest.approx(45)


def test_loaded_table_is_read_only() -> None:
    config = load_transport_config({"car-gasoline": {"国I": {"n2o": 1}}})

    with pytest.raises(TypeError):
        config.factors["car-gasoline"]["国I"]["n2o"] = 2  # type: ignore[index]


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"factors": {"car-gasoline": "oops"}},
        {"factors": {"car-gasoline": {"国I": {"n2o": "many"}}}},
        {"units": "kg", "factors": {"car-gasoline": {"国I": {"n2o": 1}}}},
        {"units": "bogus_unit", "factors": {"car-gasoline": {"国I": {"n2o": 1}}}},
    ],
)
def test_malformed_tables_raise_value_error(payload: dict) -> None:
    with pytest.raises(ValueError):
        load_transport_config(payload)


def test_environment_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "override.json"
    path.write_text(json.dumps({"heavy-diesel": {"所有": {"n2o": 1, "ch4": 2}}}), encoding="utf-8")
    monkeypatch.setenv(ENV_FACTORS_PATH, str(path))
    default_transport_config.cache_clear()
    try:
        config = default_transport_config()
    finally:
        default_transport_config.cache_clear()

    assert list(config.factors) == ["heavy-diesel"]
