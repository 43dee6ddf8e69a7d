from __future__ import annotations

import pytest

from ghgcalc.common import (
    PurchasedEnergy,
    electricity_heat_emission,
    grid_emission_factor,
    monthly_electricity_heat,
)
from ghgcalc.events import EmissionReport
from ghgcalc.summary import ELECTRICITY_HEAT


def test_annual_formula() -> None:
    assert electricity_heat_emission(100, 50) == pytest.approx(100 * 0.5366 + 50 * 0.11)
    assert electricity_heat_emission("", None) == 0


def test_grid_factor_lookup() -> None:
    assert grid_emission_factor() == 0.5366
    assert grid_emission_factor("北京", "2021") == 0.5688
    assert grid_emission_factor("北京") == 0.558
    assert grid_emission_factor("火星") == 0.5366


def test_monthly_frame() -> None:
    frame = monthly_electricity_heat([10, 20], heat_gj={12: 100})

    assert frame.loc[1, "electricity_t"] == pytest.approx(5.366)
    assert frame.loc[2, "emission_t"] == pytest.approx(10.732)
    assert frame.loc[12, "heat_t"] == pytest.approx(11)
    assert frame["emission_t"].sum() == pytest.approx(30 * 0.5366 + 11)


def test_purchased_energy_reports() -> None:
    reports: list[EmissionReport] = []
    energy = PurchasedEnergy(province="广东", callback=reports.append)

    energy.set_month(1, electricity_mwh=100)
    energy.set_month(2, heat_gj="10")

    assert energy.total_emission == pytest.approx(100 * 0.4403 + 1.1)
    assert reports[-1].category == ELECTRICITY_HEAT
    with pytest.raises(ValueError):
        energy.set_month(13, electricity_mwh=1)


def test_set_month_keeps_omitted_and_clears_none() -> None:
    energy = PurchasedEnergy()
    energy.set_month(3, electricity_mwh=10, heat_gj=10)

    energy.set_month(3, heat_gj=20)
    assert energy.electricity_mwh[2] == 10
    assert energy.heat_gj[2] == 20

    energy.set_month(3, electricity_mwh=None)
    assert energy.electricity_mwh[2] is None
    assert energy.total_emission == pytest.approx(20 * 0.11)
