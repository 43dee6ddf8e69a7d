from __future__ import annotations

import pytest

from ghgcalc.events import EmissionReport
from ghgcalc.summary import FOSSIL_FUEL_GHG
from ghgcalc.transport import CombinationTable, EditEvent, InvalidEdit

ROW = "car-gasoline-国I"


def test_edits_update_row_and_report_total() -> None:
    reports: list[EmissionReport] = []
    table = CombinationTable(callback=reports.append)

    table.apply_edit(EditEvent(ROW, "vehicle_count", "2"))
    table.apply_edit(EditEvent(ROW, "distance", 100))

    row = table.row(ROW)
    assert row.vehicle_count == 2
    assert row.distance == 100.0
    assert table.total_co2e_t == pytest.approx(0.0023268)
    assert reports[-1].category == FOSSIL_FUEL_GHG
    assert reports[-1].total_tco2e == pytest.approx(0.0023268)


def test_unchanged_total_is_not_reported_again() -> None:
    reports: list[EmissionReport] = []
    table = CombinationTable(callback=reports.append)

    table.edit(ROW, "vehicle_count", 2)
    table.edit(ROW, "distance", 100)
    table.edit(ROW, "distance", 100)

    # The first edit leaves the total at 0, the third repeats the second.
    assert [report.total_tco2e for report in reports] == pytest.approx([0.0, 0.0023268])


@pytest.mark.parametrize("value", ["-1", "abc", -5, float("nan"), 10**400])
def test_invalid_values_are_rejected(value: object) -> None:
    table = CombinationTable()
    table.edit(ROW, "distance", 50)

    with pytest.raises(InvalidEdit) as excinfo:
        table.edit(ROW, "distance", value)

    assert excinfo.value.field == "distance"
    assert excinfo.value.message == "请输入有效的非负数"
    assert table.row(ROW).distance == 50


def test_fractional_vehicle_count_is_rejected() -> None:
    table = CombinationTable()

    with pytest.raises(InvalidEdit, match="车辆数必须为整数"):
        table.edit(ROW, "vehicle_count", 1.5)
    assert table.row(ROW).vehicle_count == 0


def test_blank_value_resets_to_zero() -> None:
    table = CombinationTable()
    table.edit(ROW, "vehicle_count", 3)

    table.edit(ROW, "vehicle_count", "")

    assert table.row(ROW).vehicle_count == 0


def test_unknown_field_and_row() -> None:
    table = CombinationTable()

    with pytest.raises(ValueError, match="not editable"):
        table.edit(ROW, "n2o_factor", 1)
    with pytest.raises(KeyError):
        table.edit("bus-gasoline-国I", "distance", 1)


def test_frame_has_spans_and_emissions() -> None:
    table = CombinationTable()
    table.edit(ROW, "vehicle_count", 2)
    table.edit(ROW, "distance", 100)

    frame = table.to_frame()

    assert len(frame) == len(table) == 23
    assert frame["vehicle_type_rowspan"].sum() == 23
    assert frame.loc[frame["key"] == ROW, "total_co2e_t"].iloc[0] == pytest.approx(0.0023268)
