from __future__ import annotations

from datetime import UTC, datetime, timedelta

from demochart.io import ChartSettings, Dataset, load_dataset
from demochart.viz.interaction import ChartInteraction, DragState


def _interaction() -> ChartInteraction:
    return ChartInteraction.for_dataset(load_dataset(), ChartSettings())


def test_initial_state_is_idle_full_window() -> None:
    it = _interaction()
    assert it.drag_state is DragState.IDLE
    assert it.selected_row is None
    assert it.visible_range == it.dataset.total_range
    assert len(it.visible_rows()) == 71


def test_drag_selects_nearest_row_and_end_clears() -> None:
    it = _interaction()

    it.begin_drag()
    row = it.drag_to(datetime(2024, 10, 20, 15, tzinfo=UTC))

    assert it.drag_state is DragState.DRAGGING
    assert row is not None
    assert row.sample_date.date().isoformat() == "2024-10-20"
    assert it.readout() is not None and "2024-10-20" in it.readout()  # type: ignore[operator]

    it.end_drag()

    assert it.drag_state is DragState.IDLE
    assert it.selected_row is None
    assert it.readout() is None


def test_move_while_idle_is_ignored() -> None:
    it = _interaction()
    assert it.drag_to(datetime(2024, 11, 1, tzinfo=UTC)) is None
    assert it.selected_row is None


def test_selection_limited_to_visible_window() -> None:
    it = _interaction()
    window = it.update_zoom(0.0, 5.0)
    it.end_zoom()
    assert window is not None

    it.begin_drag()
    # Far right of the dataset, outside the zoomed-in left window
    row = it.drag_to(datetime(2024, 12, 24, tzinfo=UTC))

    assert row is not None
    assert window.contains(row.sample_date)
    assert row.sample_date == it.visible_rows()[-1].sample_date


def test_zoom_gesture_and_reset() -> None:
    it = _interaction()
    total = it.dataset.total_range
    assert total is not None

    it.begin_zoom()
    first = it.update_zoom(0.5, 3.0)
    again = it.update_zoom(0.5, 3.0)
    it.end_zoom()

    assert first == again
    assert first is not None and first.span < total.span
    assert len(it.axis_ticks(6)) >= 1

    it.reset_window()
    assert it.visible_range == total


def test_axis_ticks_for_full_window() -> None:
    it = _interaction()
    ticks = it.axis_ticks(6)
    assert len(ticks) == 6
    assert ticks[1] - ticks[0] == timedelta(days=14)


def test_empty_dataset_has_no_window_and_no_selection() -> None:
    it = ChartInteraction.for_dataset(Dataset.empty(), ChartSettings())
    assert it.window is None
    assert it.update_zoom(0.5, 2.0) is None
    assert it.axis_ticks() == []
    it.begin_drag()
    assert it.drag_to(datetime(2024, 1, 1, tzinfo=UTC)) is None
    it.end_drag()
    assert it.selected_row is None
