from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta

import pytest

from demochart.core.dates import DateRange
from demochart.core.errors import WindowError
from demochart.viz.window import DataWindow, zoom

TOTAL = DateRange(datetime(2024, 1, 1, tzinfo=UTC), datetime(2024, 3, 31, tzinfo=UTC))
BASE = DateRange(datetime(2024, 2, 1, tzinfo=UTC), datetime(2024, 2, 21, tzinfo=UTC))


def test_unit_magnification_overshoots_by_twenty_percent() -> None:
    out = zoom(0.5, 1.0, BASE, TOTAL)
    # base half-width is 10 days -> 12 days around the midpoint
    assert out.half_width == timedelta(days=12)
    assert out.midpoint == BASE.midpoint


def test_unit_magnification_is_idempotent_for_same_base() -> None:
    assert zoom(0.3, 1.0, BASE, TOTAL) == zoom(0.3, 1.0, BASE, TOTAL)


def test_half_width_never_below_two_days() -> None:
    out = zoom(0.5, 1000.0, BASE, TOTAL)
    assert out.half_width == timedelta(days=2)


def test_result_always_inside_total() -> None:
    for anchor in (0.0, 0.1, 0.5, 0.9, 1.0):
        for mag in (0.01, 0.25, 0.5, 1.0, 2.0, 10.0):
            for base in (BASE, TOTAL):
                out = zoom(anchor, mag, base, TOTAL)
                assert TOTAL.start <= out.start <= out.end <= TOTAL.end, (anchor, mag, base)


def test_anchor_near_edge_shifts_window_inward() -> None:
    out = zoom(0.0, 4.0, TOTAL, TOTAL)
    assert out.start == TOTAL.start
    # total half-width 45 days * 1.2 / 4 = 13.5 days, width kept after shifting
    assert out.span == timedelta(days=27)


def test_zoom_out_past_total_collapses_to_total() -> None:
    assert zoom(0.5, 0.1, BASE, TOTAL) == TOTAL


def test_total_narrower_than_minimum_width() -> None:
    narrow = DateRange(datetime(2024, 1, 1, tzinfo=UTC), datetime(2024, 1, 3, tzinfo=UTC))
    assert zoom(0.5, 50.0, narrow, narrow) == narrow


def test_anchor_fraction_is_clamped() -> None:
    assert zoom(-2.0, 2.0, BASE, TOTAL) == zoom(0.0, 2.0, BASE, TOTAL)
    assert zoom(5.0, 2.0, BASE, TOTAL) == zoom(1.0, 2.0, BASE, TOTAL)


@pytest.mark.parametrize("mag", [0.0, -1.0, math.nan, math.inf])
def test_invalid_magnification_raises(mag: float) -> None:
    with pytest.raises(WindowError):
        zoom(0.5, mag, BASE, TOTAL)


def test_data_window_starts_at_total() -> None:
    w = DataWindow(total=TOTAL)
    assert w.current == TOTAL
    assert not w.zooming


def test_gesture_updates_do_not_compound() -> None:
    w = DataWindow(total=TOTAL)
    w.begin()
    first = w.update(0.5, 2.0)
    second = w.update(0.5, 2.0)
    assert first == second
    assert w.base == TOTAL


def test_next_gesture_starts_from_current_window() -> None:
    w = DataWindow(total=TOTAL)
    first = w.update(0.5, 2.0)
    w.end()
    assert w.base is None
    second = w.update(0.5, 2.0)
    assert second.span < first.span
    assert w.base == first


def test_reset_restores_total_and_clears_gesture() -> None:
    w = DataWindow(total=TOTAL)
    w.update(0.2, 3.0)
    w.reset()
    assert w.current == TOTAL
    assert w.base is None


def test_custom_tuning() -> None:
    w = DataWindow(total=TOTAL, overshoot=1.0, min_half_width=timedelta(days=1))
    out = w.update(0.5, 1.0)
    assert out.half_width == TOTAL.half_width
