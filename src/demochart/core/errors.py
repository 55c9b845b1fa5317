"""
Core exception types raised by date-range construction and window arithmetic.

Provides typed exceptions for core-domain failures:
- DateRangeError for inverted or naive date ranges.
- WindowError for invalid zoom requests (non-positive magnification).

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Out-of-bounds zoom requests are not errors; they clamp silently.

Examples:
    >>> from datetime import datetime, UTC
    >>> from demochart.core.dates import DateRange
    >>> from demochart.core.errors import DateRangeError
    >>> try:
    ...     DateRange(datetime(2024, 2, 1, tzinfo=UTC), datetime(2024, 1, 1, tzinfo=UTC))
    ... except DateRangeError as e:
    ...     msg = str(e)
    >>> "start" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "DateRangeError",
    "WindowError",
]


class DateRangeError(ValueError):
    """Date range violates start <= end or mixes naive and aware datetimes."""


class WindowError(ValueError):
    """Zoom request cannot be evaluated (e.g., magnification <= 0)."""
