from __future__ import annotations

from itertools import groupby

from ghgcalc.transport import annotate, generate_rows


def test_first_row_of_each_group_carries_full_span() -> None:
    annotated = annotate(generate_rows())

    for _, group in groupby(annotated, key=lambda item: item.row.vehicle_type):
        items = list(group)
        assert items[0].span.is_first_of_vehicle_group
        assert items[0].span.vehicle_group_size == len(items)
        assert all(not item.span.is_first_of_vehicle_group for item in items[1:])
        assert all(item.span.vehicle_group_size == 0 for item in items[1:])

    for _, group in groupby(annotated, key=lambda item: (item.row.vehicle_type, item.row.fuel_type)):
        items = list(group)
        assert items[0].span.fuel_group_size == len(items)
        assert sum(item.span.fuel_group_size for item in items) == len(items)


def test_vehicle_group_sizes() -> None:
    sizes = {
        item.row.vehicle_type: item.span.vehicle_group_size
        for item in annotate(generate_rows())
        if item.span.is_first_of_vehicle_group
    }

    assert sizes == {"car": 11, "car-other-light": 8, "heavy": 4}


def test_spans_sum_to_row_count() -> None:
    rows = generate_rows()
    annotated = annotate(rows)

    assert [item.row for item in annotated] == rows
    assert sum(item.span.vehicle_group_size for item in annotated) == len(rows)
    assert sum(item.span.fuel_group_size for item in annotated) == len(rows)


def test_empty_input() -> None:
    assert annotate([]) == []
