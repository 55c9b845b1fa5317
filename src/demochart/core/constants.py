"""
demochart core defaults.

Defines the tick, zoom, and palette defaults consumed by the io and viz layers. This
module is zero-IO and uses only the Python standard library.

Notes:
    - Tick dates are anchored at TICK_HOUR (local wall clock) so day-wide bars center
      under their label.
    - Changing defaults should be done here; ChartSettings simply consumes them.
"""

from __future__ import annotations

from datetime import timedelta

__all__ = [
    "DEFAULT_TICK_COUNT",
    "TICK_HOUR",
    "ZOOM_OVERSHOOT",
    "MIN_HALF_WIDTH",
    "DEFAULT_TIMEZONE",
    "CSV_COLUMNS",
]

# Number of labeled ticks requested for the date axis.
DEFAULT_TICK_COUNT: int = 6

# Hour of the day (wall clock) each tick lands on.
TICK_HOUR: int = 12

# Slight overshoot so the first perceptible pinch registers as a zoom.
ZOOM_OVERSHOOT: float = 1.2

# Narrowest half-width a zoomed window may reach.
MIN_HALF_WIDTH: timedelta = timedelta(days=2)

DEFAULT_TIMEZONE: str = "UTC"

# Header of the embedded sample CSV, in order.
CSV_COLUMNS: tuple[str, str, str] = ("sample_date", "total_users", "new_users")
