from __future__ import annotations

from ghgcalc.transport import generate_rows, parse_factor_key
from ghgcalc.transport.constants import EMISSION_FACTORS


def test_one_row_per_key_and_standard() -> None:
    rows = generate_rows()
    expected = sum(len(standards) for standards in EMISSION_FACTORS.values())

    assert len(rows) == expected == 23
    assert len({row.key for row in rows}) == len(rows)
    assert all(row.vehicle_count == 0 and row.distance == 0 for row in rows)


def test_rows_sorted_by_vehicle_then_fuel() -> None:
    rows = generate_rows()
    pairs = [(row.vehicle_type, row.fuel_type) for row in rows]

    assert pairs == sorted(pairs)
    assert [vehicle for vehicle, _ in dict.fromkeys(pairs)] == [
        "car",
        "car",
        "car",
        "car-other-light",
        "car-other-light",
        "heavy",
        "heavy",
        "heavy",
    ]


def test_standards_keep_table_order_within_group() -> None:
    rows = [row for row in generate_rows() if row.vehicle_type == "car" and row.fuel_type == "gasoline"]

    assert [row.standard for row in rows] == ["国I", "国II", "国III", "国IV及以上"]


def test_irregular_keys_are_parsed_by_rules() -> None:
    assert parse_factor_key("car-other-light-gasoline") == ("car-other-light", "gasoline")
    assert parse_factor_key("heavy-gas-natural") == ("heavy", "gas-natural")
    assert parse_factor_key("car-lpg") == ("car", "lpg")
    assert parse_factor_key("bus-fuel-cell") == ("bus", "fuel-cell")


def test_missing_factor_defaults_to_zero() -> None:
    rows = {row.key: row for row in generate_rows()}

    natural_gas = rows["heavy-gas-natural-其他"]
    assert natural_gas.n2o_factor == 0
    assert natural_gas.ch4_factor == 5400
    assert natural_gas.vehicle_type_name == "重型车"
    assert natural_gas.fuel_type_name == "天然气"


def test_generation_returns_fresh_rows() -> None:
    first = generate_rows()
    first[0].vehicle_count = 7

    second = generate_rows()

    assert second[0] is not first[0]
    assert second[0].vehicle_count == 0
    assert [row.key for row in second] == [row.key for row in first]


def test_unknown_codes_fall_back_to_raw_labels() -> None:
    rows = generate_rows({"bus-hydrogen": {"all": {"n2o": 1}}}, labels={})

    assert rows[0].vehicle_type_name == "bus"
    assert rows[0].fuel_type_name == "hydrogen"
    assert rows[0].ch4_factor == 0
