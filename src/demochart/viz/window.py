"""
Zoomable date window.

A pinch gesture maps to zoom(): the gesture's horizontal position picks an anchor
date inside the range captured when the gesture began, and the magnification
shrinks (or grows) the half-width around that anchor. The result always lies
inside the dataset's total range.

Every update of one gesture is computed from the same captured base range, so a
continuous pinch does not compound frame over frame.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import timedelta

from demochart.core.constants import MIN_HALF_WIDTH, ZOOM_OVERSHOOT
from demochart.core.dates import DateRange
from demochart.core.errors import WindowError

__all__ = ["zoom", "DataWindow"]

logger = logging.getLogger(__name__)


def zoom(
    anchor_fraction: float,
    magnification: float,
    base_range: DateRange,
    total_range: DateRange,
    *,
    overshoot: float = ZOOM_OVERSHOOT,
    min_half_width: timedelta = MIN_HALF_WIDTH,
) -> DateRange:
    """Compute the window for one zoom update.

    Args:
        anchor_fraction (float): Gesture position across the chart, 0 = left edge,
            1 = right edge. Clamped into [0, 1].
        magnification (float): Gesture scale relative to its start (> 0).
        base_range (DateRange): Window captured when the gesture began.
        total_range (DateRange): Full span of the dataset.
        overshoot (float): Factor applied to the base half-width (default 1.2).
        min_half_width (timedelta): Floor for the resulting half-width (default 2 days).

    Returns:
        DateRange: New window, inside total_range.

    Raises:
        WindowError: If magnification is not a positive number.
    """
    if not magnification > 0 or math.isinf(magnification):
        raise WindowError(f"magnification must be a positive finite number, got {magnification!r}")

    anchor = base_range.at_fraction(anchor_fraction)
    half_width = max(min_half_width, (base_range.half_width * overshoot) / magnification)
    return DateRange.around(anchor, half_width).clamp_into(total_range)


@dataclass
class DataWindow:
    """
    Visible sub-range of the dataset, mutated by zoom gestures.

    Attributes:
        total (DateRange): Full span of the dataset.
        current (DateRange): Visible window; starts as `total`.
        base (DateRange | None): Window captured at gesture start; None between gestures.
        overshoot (float): See zoom().
        min_half_width (timedelta): See zoom().
    """

    total: DateRange
    current: DateRange = None  # type: ignore[assignment]
    base: DateRange | None = None
    overshoot: float = ZOOM_OVERSHOOT
    min_half_width: timedelta = MIN_HALF_WIDTH

    def __post_init__(self) -> None:
        if self.current is None:
            self.current = self.total
        else:
            self.current = self.current.clamp_into(self.total)

    @property
    def zooming(self) -> bool:
        return self.base is not None

    def begin(self) -> None:
        """Capture the base range for a new gesture (no-op if one is in progress)."""
        if self.base is None:
            self.base = self.current
            logger.debug("zoom begin base=%s..%s", self.base.start, self.base.end)

    def update(self, anchor_fraction: float, magnification: float) -> DateRange:
        """Apply one gesture update relative to the captured base."""
        self.begin()
        assert self.base is not None
        self.current = zoom(
            anchor_fraction,
            magnification,
            self.base,
            self.total,
            overshoot=self.overshoot,
            min_half_width=self.min_half_width,
        )
        return self.current

    def end(self) -> None:
        """Discard the captured base; the next gesture starts from the current window."""
        self.base = None
        logger.debug("zoom end window=%s..%s", self.current.start, self.current.end)

    def reset(self) -> None:
        self.base = None
        self.current = self.total
