"""
Chart interaction state: zoom window plus drag-to-inspect selection.

Drag state machine:
    Idle --begin_drag()--> Dragging
    Dragging --drag_to(when)--> Dragging   (selected_row = nearest visible row)
    Dragging --end_drag()--> Idle          (selected_row cleared)

Zoom gestures are delegated to DataWindow (begin_zoom / update_zoom / end_zoom).
The object is owned by the view (st.session_state in the app) and mutated only
from UI callbacks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from enum import Enum

from demochart.core.constants import DEFAULT_TICK_COUNT
from demochart.core.dates import DateRange
from demochart.core.schema import Row
from demochart.io.config import ChartSettings
from demochart.io.dataset import Dataset

from .axis import x_axis_date_values
from .selection import nearest_to
from .window import DataWindow

__all__ = ["DragState", "ChartInteraction"]

logger = logging.getLogger(__name__)


class DragState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class ChartInteraction:
    """
    View-owned mutable state for one chart.

    Attributes:
        dataset (Dataset): Rows being charted (not owned; never mutated).
        window (DataWindow | None): Zoom window; None when the dataset is empty.
        selected_row (Row | None): Row under the pointer while dragging.
        drag_state (DragState): IDLE or DRAGGING.
        tz (tzinfo | None): Zone used for tick calendars; defaults to the data's zone.
    """

    dataset: Dataset
    window: DataWindow | None = None
    selected_row: Row | None = None
    drag_state: DragState = DragState.IDLE
    tz: tzinfo | None = None

    @classmethod
    def for_dataset(
        cls, dataset: Dataset, settings: ChartSettings | None = None
    ) -> ChartInteraction:
        s = settings or ChartSettings()
        total = dataset.total_range
        window = None
        if total is not None:
            window = DataWindow(
                total=total,
                overshoot=s.zoom_overshoot,
                min_half_width=s.min_half_width,
            )
        return cls(dataset=dataset, window=window, tz=s.tzinfo())

    # ---------- window ----------

    @property
    def visible_range(self) -> DateRange | None:
        return self.window.current if self.window is not None else None

    def visible_rows(self) -> list[Row]:
        return self.dataset.rows_in(self.visible_range)

    def axis_ticks(self, count: int = DEFAULT_TICK_COUNT) -> list[datetime]:
        return x_axis_date_values(self.visible_range, count, self.tz)

    def begin_zoom(self) -> None:
        if self.window is not None:
            self.window.begin()

    def update_zoom(self, anchor_fraction: float, magnification: float) -> DateRange | None:
        """Apply one pinch update; begins a gesture implicitly if none is active."""
        if self.window is None:
            return None
        return self.window.update(anchor_fraction, magnification)

    def end_zoom(self) -> None:
        if self.window is not None:
            self.window.end()

    def reset_window(self) -> None:
        if self.window is not None:
            self.window.reset()

    # ---------- selection ----------

    def begin_drag(self) -> None:
        self.drag_state = DragState.DRAGGING

    def drag_to(self, when: datetime) -> Row | None:
        """Select the visible row nearest `when`; ignored unless dragging."""
        if self.drag_state is not DragState.DRAGGING:
            return self.selected_row
        self.selected_row = nearest_to(self.visible_rows(), when)
        logger.debug("drag_to %s -> %s", when, self.selected_row)
        return self.selected_row

    def end_drag(self) -> None:
        self.drag_state = DragState.IDLE
        self.selected_row = None

    def readout(self) -> str | None:
        """Detail line for the selected row, or None when nothing is selected."""
        row = self.selected_row
        if row is None:
            return None
        when = row.sample_date.astimezone(self.tz) if self.tz is not None else row.sample_date
        return (
            f"{when:%Y-%m-%d}: {row.total_users} users "
            f"({row.active_users} active, {row.new_users} new)"
        )
