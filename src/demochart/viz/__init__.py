"""
demochart.viz — axis ticks, zoom window, row selection, and the Altair bar spec.

## Public API
- x_axis_date_values — noon-anchored, stride-sampled tick dates for a range.
- zoom / DataWindow — pinch zoom clamped to the dataset's total range.
- nearest_to — nearest row by date (ties go to the earlier row).
- ChartInteraction — view-owned drag/zoom state machine.
- build_user_chart — stacked bar chart (active below new users).
"""

from __future__ import annotations

from .axis import daily_noons, x_axis_date_values
from .bars import PICK_PARAM, build_user_chart, to_long_frame
from .interaction import ChartInteraction, DragState
from .selection import nearest_to
from .window import DataWindow, zoom

__all__ = [
    "daily_noons",
    "x_axis_date_values",
    "PICK_PARAM",
    "build_user_chart",
    "to_long_frame",
    "ChartInteraction",
    "DragState",
    "nearest_to",
    "DataWindow",
    "zoom",
]
