from __future__ import annotations

import pytest

from ghgcalc.electric import (
    TransmissionForm,
    transmission_distribution_amount,
    transmission_emission,
    validate_inputs,
)
from ghgcalc.events import EmissionReport


def test_loss_and_emission() -> None:
    assert transmission_distribution_amount(1000, 200, 100, 1000) == pytest.approx(100)
    assert transmission_emission(1000, 200, 100, 1000) == pytest.approx(53.66)


def test_negative_balance_is_clamped() -> None:
    assert transmission_distribution_amount(100, 0, 50, 200) == 0
    assert transmission_emission(100, 0, 50, 200) == 0


def test_validation_messages_per_field() -> None:
    errors = validate_inputs({"imported_mwh": "-3", "sold_mwh": "x", "exported_mwh": ""})

    assert set(errors) == {"imported_mwh", "sold_mwh"}
    assert errors["sold_mwh"] == "请输入有效的非负数"


def test_form_rejects_invalid_and_reports_valid() -> None:
    reports: list[EmissionReport] = []
    form = TransmissionForm(callback=reports.append)

    assert form.set_field("power_plant_grid_mwh", "1000")
    assert not form.set_field("sold_mwh", "-1")
    assert form.errors == {"sold_mwh": "请输入有效的非负数"}
    assert form.inputs.sold_mwh == 0

    assert form.set_field("sold_mwh", 900)
    assert form.errors == {}
    assert reports[-1].total_tco2e == pytest.approx(100 * 0.5366)
    assert reports[-1].detail == {"transmission_distribution_mwh": pytest.approx(100)}


def test_form_unknown_field() -> None:
    with pytest.raises(ValueError):
        TransmissionForm().set_field("losses", 1)
