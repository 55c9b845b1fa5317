"""Nearest-row lookup for tap/drag inspection."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from demochart.core.dates import elapsed
from demochart.core.schema import Row

__all__ = ["nearest_to"]


def nearest_to(rows: Sequence[Row], query: datetime) -> Row | None:
    """Return the row whose sample_date is closest to `query`.

    Ties go to the earliest row in sequence order. Returns None for no rows.
    """
    if not rows:
        return None
    # min() keeps the first of equal keys
    return min(rows, key=lambda r: abs(elapsed(query, r.sample_date)))
