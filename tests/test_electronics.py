from __future__ import annotations

import pytest

from ghgcalc.electronics import FeedGas, ProcessInventory, byproduct_emission, leakage_emission
from ghgcalc.events import EmissionReport
from ghgcalc.summary import ELECTRONIC_PROCESS

# NF3 defaults: residual 10 %, utilisation 80 %, collection 90 %, removal 95 %.
NF3_LEAKAGE = 0.9 * 1 * 0.2 * (1 - 0.9 * 0.95) * 17200
CF4_FROM_NF3 = 0.9 * 1 * 0.09 * (1 - 0.9 * 0.95) * 7390


def test_leakage_formula() -> None:
    result = leakage_emission(
        1, 17200, utilization_percent=80, collection_percent=90, removal_percent=95
    )

    assert result == pytest.approx(NF3_LEAKAGE)


def test_leakage_residual_defaults_to_ten_percent() -> None:
    assert leakage_emission(1, 100) == pytest.approx(90)
    assert leakage_emission(1, 100, residual_percent=0) == pytest.approx(100)


def test_byproduct_uses_default_factor_when_blank() -> None:
    explicit = byproduct_emission(1, 7390, 0.09, collection_percent=90, removal_percent=95)
    defaulted = byproduct_emission(
        1, 7390, "", collection_percent=90, removal_percent=95, default_factor=0.09
    )

    assert explicit == pytest.approx(CF4_FROM_NF3)
    assert defaulted == pytest.approx(explicit)


def test_feed_gas_frame_with_byproduct() -> None:
    gas = FeedGas.create("NF3")
    gas.values["usage_t"] = [1] + [None] * 11
    gas.byproducts.append(gas.new_byproduct("CF4"))

    frame = gas.frame()

    assert frame.loc[1, "leakage_t"] == pytest.approx(NF3_LEAKAGE)
    assert frame.loc[1, "byproduct_t"] == pytest.approx(CF4_FROM_NF3)
    assert frame.loc[2:, "emission_t"].sum() == 0
    assert gas.total_emission == pytest.approx(NF3_LEAKAGE + CF4_FROM_NF3)


def test_byproduct_blank_factor_falls_back_to_default() -> None:
    gas = FeedGas.create("NF3")
    gas.values["usage_t"] = [1] + [None] * 11
    byproduct = gas.new_byproduct("CF4")
    byproduct.values["conversion_factor"] = [""] * 12
    gas.byproducts.append(byproduct)

    assert gas.frame().loc[1, "byproduct_t"] == pytest.approx(CF4_FROM_NF3)


def test_byproduct_uses_its_own_removal_efficiency() -> None:
    gas = FeedGas.create("NF3")
    gas.values["usage_t"] = [1] + [None] * 11
    byproduct = gas.new_byproduct("CF4")
    byproduct.values["removal_percent"] = [0] * 12
    gas.byproducts.append(byproduct)

    assert gas.frame().loc[1, "byproduct_t"] == pytest.approx(0.9 * 0.09 * 7390)


def test_gas_without_published_defaults() -> None:
    gas = FeedGas.create("CH3F")
    gas.values["usage_t"] = [2] * 12

    assert gas.total_emission == pytest.approx(12 * 0.9 * 2 * 92)


def test_custom_gas_needs_gwp() -> None:
    with pytest.raises(ValueError):
        FeedGas.create("C6F14")
    assert FeedGas.create("C6F14", gwp=7910).gwp == 7910


def test_inventory_reports_and_validates() -> None:
    reports: list[EmissionReport] = []
    inventory = ProcessInventory(callback=reports.append)

    gas = inventory.add_gas("NF3")
    inventory.set_value(gas.id, "usage_t", 1, 1)
    byproduct = inventory.add_byproduct(gas.id, "CF4")

    assert inventory.total_emission == pytest.approx(NF3_LEAKAGE + CF4_FROM_NF3)
    assert reports[-1].category == ELECTRONIC_PROCESS
    assert reports[-1].total_tco2e == pytest.approx(NF3_LEAKAGE + CF4_FROM_NF3)

    with pytest.raises(ValueError):
        inventory.add_gas("NF3")
    with pytest.raises(ValueError):
        inventory.add_byproduct(gas.id, "CF4")
    with pytest.raises(ValueError):
        inventory.set_value(gas.id, "gwp", 1, 1)
    with pytest.raises(ValueError):
        inventory.set_value(gas.id, "usage_t", 0, 1)

    inventory.remove_byproduct(gas.id, byproduct.id)
    assert inventory.total_emission == pytest.approx(NF3_LEAKAGE)
    inventory.remove_gas(gas.id)
    assert inventory.total_emission == 0
    with pytest.raises(KeyError):
        inventory.get_gas(gas.id)


def test_inventory_fill_broadcasts_scalars() -> None:
    inventory = ProcessInventory()
    gas = inventory.add_gas("SF6")

    inventory.fill(gas.id, "usage_t", 1)

    expected = 0.9 * 0.2 * (1 - 0.81) * 23500
    assert inventory.monthly_totals().tolist() == pytest.approx([expected] * 12)
