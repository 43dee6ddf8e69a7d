from __future__ import annotations

import pytest

from ghgcalc.transport import emission_factor, monthly_tail_gas_emissions, tail_gas_emission


def test_reference_value() -> None:
    assert tail_gas_emission(1000, 99.6) == pytest.approx(0.7304)


@pytest.mark.parametrize("purity", [None, "", "n/a"])
def test_default_purity_matches_explicit(purity: object) -> None:
    assert tail_gas_emission(1000, purity) == pytest.approx(tail_gas_emission(1000, 99.6))


def test_purity_is_clamped() -> None:
    assert tail_gas_emission(1000, 150) == pytest.approx(tail_gas_emission(1000, 100))
    assert tail_gas_emission(1000, -5) == 0
    assert emission_factor(100) == pytest.approx(12 / 60 * 44 / 12 * 0.001)


def test_explicit_zero_purity_gives_zero() -> None:
    assert tail_gas_emission(1000, 0) == 0


def test_negative_or_missing_mass_counts_as_zero() -> None:
    assert tail_gas_emission(-100) == 0
    assert tail_gas_emission(None) == 0
    assert tail_gas_emission(10**400) == 0


def test_monthly_frame() -> None:
    frame = monthly_tail_gas_emissions([1000, 2000, None, "bad"], purity_percent={2: 50})

    assert list(frame.index) == list(range(1, 13))
    assert frame.loc[1, "purity_percent"] == pytest.approx(99.6)
    assert frame.loc[1, "emission_t"] == pytest.approx(0.7304)
    assert frame.loc[2, "emission_t"] == pytest.approx(2000 * 0.2 * 0.5 * 44 / 12 * 0.001)
    assert frame.loc[3:, "emission_t"].sum() == 0
