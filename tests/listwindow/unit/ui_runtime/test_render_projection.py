from __future__ import annotations

import pytest

from listwindow.api.window import WindowResult
from listwindow.ui_runtime.offset_index import OffsetIndex
from listwindow.ui_runtime.render import diff_keys, project_window
from listwindow.ui_runtime.windowing import compute_window


def test_projection_materializes_exactly_the_window(rows_factory) -> None:
    rows = rows_factory(500)
    window = compute_window(500, 32, 20, 3200, 300)

    projection = project_window(rows, window, item_height=32)

    assert projection.total_height == 16000
    assert projection.offset_top == 2560
    assert len(projection.rows) == 50
    assert projection.rows[0].index == 80
    assert projection.rows[0].top == 2560
    assert projection.rows[-1].index == 129
    assert projection.keys()[0] == "row-80"


def test_rows_keyed_by_item_key_not_window_position(rows_factory) -> None:
    rows = rows_factory(500)
    before = project_window(rows, compute_window(500, 32, 2, 3200, 300), item_height=32)
    after = project_window(rows, compute_window(500, 32, 2, 3232, 300), item_height=32)

    mounted, unmounted = diff_keys(before, after)

    assert mounted == {"row-112"}
    assert unmounted == {"row-98"}
    shared = set(before.keys()) & set(after.keys())
    assert "row-105" in shared


def test_row_geometry_and_hit_testing(rows_factory) -> None:
    rows = rows_factory(10)
    projection = project_window(rows, compute_window(10, 32, 0, 0, 100), item_height=32)

    assert projection.rows[1].rect(200).y == 32
    assert projection.rows[1].rect(200).contains(10, 40)
    assert projection.row_at(70).key == "row-2"
    assert projection.row_at(5_000) is None


def test_projection_uses_variable_offsets(rows_factory) -> None:
    rows = rows_factory(5)
    offsets = OffsetIndex([10, 50, 10, 10, 10])
    window = offsets.compute_window(0, 20, 30)

    projection = project_window(rows, window, offsets=offsets)

    assert [(row.key, row.top, row.height) for row in projection.rows] == [("row-1", 10, 50)]


def test_projection_bounds_window_to_sequence(rows_factory) -> None:
    rows = rows_factory(3)

    projection = project_window(rows, WindowResult(1, 10, 32, 96), item_height=32)

    assert projection.keys() == ("row-1", "row-2")


def test_projection_requires_geometry(rows_factory) -> None:
    with pytest.raises(ValueError):
        project_window(rows_factory(3), WindowResult(0, 1, 0, 96))
