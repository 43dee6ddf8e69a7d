from __future__ import annotations

import itertools

import pytest

from ghgcalc.electric import SF6Inventory, TransmissionForm
from ghgcalc.summary import (
    CARBON_SEQUESTRATION,
    ELECTRICITY_HEAT,
    FOSSIL_FUEL,
    FOSSIL_FUEL_GHG,
    INDUSTRIES,
    STEEL_ELECTRICITY,
    STEEL_FOSSIL_FUEL,
    STEEL_HEAT,
    SULFUR_HEXAFLUORIDE,
    TAIL_GAS_PURIFICATION,
    TRANSMISSION_DISTRIBUTION,
    IndustryLedger,
    get_industry,
    summarize,
    summary_rows,
)

TRANSPORT = INDUSTRIES["land_transportation"]


def test_base_and_grand_totals() -> None:
    values = {
        FOSSIL_FUEL: 10.0,
        FOSSIL_FUEL_GHG: 0.5,
        TAIL_GAS_PURIFICATION: 1.5,
        ELECTRICITY_HEAT: 8.0,
    }

    totals = summarize(values, TRANSPORT)

    assert totals.base_total == pytest.approx(12.0)
    assert totals.grand_total == pytest.approx(20.0)


def test_totals_do_not_depend_on_order() -> None:
    items = [
        (FOSSIL_FUEL, 0.1),
        (FOSSIL_FUEL_GHG, 0.2),
        (TAIL_GAS_PURIFICATION, 0.3),
        (ELECTRICITY_HEAT, 1e-9),
    ]
    results = {summarize(dict(order), TRANSPORT) for order in itertools.permutations(items)}

    assert len(results) == 1


def test_zero_categories_can_be_omitted() -> None:
    full = summarize({FOSSIL_FUEL: 3, FOSSIL_FUEL_GHG: 0, ELECTRICITY_HEAT: 0}, TRANSPORT)
    sparse = summarize({FOSSIL_FUEL: 3}, TRANSPORT)

    assert full == sparse


def test_invalid_values_count_as_zero() -> None:
    totals = summarize(
        {FOSSIL_FUEL: None, FOSSIL_FUEL_GHG: "abc", TAIL_GAS_PURIFICATION: 10**400, ELECTRICITY_HEAT: "2"}
    )

    assert totals.base_total == 0
    assert totals.grand_total == 2


def test_generic_summary_without_industry() -> None:
    assert summarize(None).grand_total == 0
    assert summarize({"anything": 1, ELECTRICITY_HEAT: 2}).base_total == 1


def test_steel_subtracts_sequestration_and_keeps_energy_out_of_base() -> None:
    steel = get_industry("steel")
    values = {
        STEEL_FOSSIL_FUEL: 100,
        CARBON_SEQUESTRATION: 20,
        STEEL_ELECTRICITY: 30,
        STEEL_HEAT: 5,
    }

    totals = summarize(values, steel)

    assert totals.base_total == pytest.approx(80)
    assert totals.grand_total == pytest.approx(115)


def test_summary_rows_share() -> None:
    rows = summary_rows({FOSSIL_FUEL: 3, ELECTRICITY_HEAT: 1}, TRANSPORT)

    by_key = {row["key"]: row for row in rows}
    assert by_key[FOSSIL_FUEL]["share_percent"] == pytest.approx(75)
    assert by_key[TAIL_GAS_PURIFICATION]["value"] == 0
    assert by_key["base_total"]["value"] == 3
    assert by_key["grand_total"]["value"] == 4
    assert [row["key"] for row in rows][-2:] == ["base_total", "grand_total"]


def test_summary_rows_with_zero_total() -> None:
    rows = summary_rows({}, TRANSPORT)

    assert all(row.get("share_percent", 0) == 0 for row in rows)


def test_ledger_collects_component_reports() -> None:
    ledger = IndustryLedger(get_industry("electric_grid"))
    inventory = SF6Inventory(callback=ledger.receive)
    form = TransmissionForm(callback=ledger.receive)

    inventory.add_device("repaired", 10, 2)
    inventory.add_device("retired", 5, 1)
    form.set_field("power_plant_grid_mwh", 100)

    expected = 286.8 + 100 * 0.5366
    assert ledger.summary().base_total == pytest.approx(expected)
    assert ledger.summary() == summarize(ledger.values, ledger.config)
    assert set(ledger.latest) == {SULFUR_HEXAFLUORIDE, TRANSMISSION_DISTRIBUTION}
    assert ledger.latest[SULFUR_HEXAFLUORIDE].total_tco2e == pytest.approx(286.8)


def test_unknown_industry() -> None:
    with pytest.raises(KeyError):
        get_industry("shipbuilding")
