"""
Shared UI helper utilities for the demochart Streamlit application.

This module centralizes small helpers used by the page: turning a Vega-Lite
selection payload back into a datetime, and formatting dates.

Notes:
    - No Streamlit state manipulation happens here.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime, tzinfo
from typing import Any

from demochart.core.constants import TICK_HOUR
from demochart.core.dates import at_wall_clock, local_date


def coerce_datetime(value: Any, tz: tzinfo | None = None) -> datetime | None:
    """Convert a Vega-Lite temporal value into an aware datetime.

    Vega-Lite reports temporal selections as epoch milliseconds; ISO strings and
    datetime instances are accepted too.

    Args:
        value (Any): Epoch milliseconds, ISO-8601 string, or datetime.
        tz (tzinfo | None): Zone to convert the result into (UTC if None).

    Returns:
        datetime | None: Aware datetime, or None if the value cannot be interpreted.
    """
    zone = tz or UTC
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        when = value if value.tzinfo is not None else value.replace(tzinfo=UTC)
        return when.astimezone(zone)
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(float(value) / 1000.0, tz=UTC).astimezone(zone)
    if isinstance(value, str):
        try:
            when = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
        return coerce_datetime(when, zone)
    return None


def picked_datetime(
    selection: Mapping[str, Any] | None, param: str, tz: tzinfo | None = None
) -> datetime | None:
    """Extract the selected date from a Streamlit chart selection state.

    Args:
        selection (Mapping[str, Any] | None): event.selection from st.altair_chart.
        param (str): Selection parameter name.
        tz (tzinfo | None): Zone for the returned datetime.

    Returns:
        datetime | None: Date of the first selected point, or None if nothing is selected.

    Notes:
        The projected field may carry a timeUnit prefix (e.g.
        "yearmonthdate_sample_date"). Such a value is the start of the bar's day
        bucket, so it is moved to noon of that day; a raw sample_date is returned as-is.
    """
    if not selection:
        return None
    points = selection.get(param)
    if not isinstance(points, Sequence) or isinstance(points, str) or not points:
        return None
    first = points[0]
    if not isinstance(first, Mapping):
        return None
    for key, value in first.items():
        if "sample_date" not in str(key):
            continue
        when = coerce_datetime(value, tz)
        if when is None or str(key) == "sample_date":
            return when
        return at_wall_clock(local_date(when, tz), TICK_HOUR, when.tzinfo)
    return None


def format_day(when: datetime) -> str:
    """Format a datetime as "Mon DD, YYYY"."""
    return when.strftime("%b %d, %Y")
