from __future__ import annotations

import pytest

from ghgcalc.common import Attachment
from ghgcalc.electric import SF6Device, SF6Inventory, sf6_emission
from ghgcalc.events import EmissionReport
from ghgcalc.summary import SULFUR_HEXAFLUORIDE


def test_reference_value() -> None:
    repaired = [SF6Device(capacity_kg=10, recovered_kg=2)]
    retired = [SF6Device(capacity_kg=5, recovered_kg=1)]

    assert sf6_emission(repaired, retired) == pytest.approx(286.8)


def test_blank_entries_count_as_zero() -> None:
    assert sf6_emission([SF6Device()], [SF6Device(capacity_kg="", recovered_kg=None)]) == 0


def test_inventory_add_update_remove() -> None:
    reports: list[EmissionReport] = []
    inventory = SF6Inventory(callback=reports.append)

    first = inventory.add_device("repaired", 10, 2)
    second = inventory.add_device("retired", 5, 1)
    assert first.id != second.id
    assert inventory.total_emission == pytest.approx(286.8)
    assert reports[-1].category == SULFUR_HEXAFLUORIDE
    assert reports[-1].total_tco2e == pytest.approx(286.8)

    inventory.update_device("retired", second.id, recovered_kg=5)
    assert inventory.total_emission == pytest.approx(8 * 23.9)

    inventory.remove_device("repaired", first.id)
    assert inventory.total_emission == 0
    assert reports[-1].total_tco2e == 0


def test_inventory_errors() -> None:
    inventory = SF6Inventory()
    device = inventory.add_device("repaired", 1, 0)

    with pytest.raises(ValueError):
        inventory.add_device("scrapped", 1, 0)  # type: ignore[arg-type]
    with pytest.raises(KeyError):
        inventory.remove_device("retired", device.id)
    with pytest.raises(ValueError):
        inventory.update_device("repaired", device.id, gwp=1)


def test_proof_attachment_is_kept() -> None:
    inventory = SF6Inventory()
    proof = Attachment.from_mapping(
        {"filename": "nameplate.pdf", "size": 2048, "content_type": "application/pdf"}
    )

    device = inventory.add_device("retired", 3, 1, proof=proof)

    assert inventory.get_device("retired", device.id).proof == proof
