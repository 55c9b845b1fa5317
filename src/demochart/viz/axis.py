"""Date-axis tick sampling."""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo

from demochart.core.constants import DEFAULT_TICK_COUNT, TICK_HOUR
from demochart.core.dates import DateRange, at_wall_clock, iter_calendar_days, local_date

__all__ = ["daily_noons", "x_axis_date_values"]

MIN_TICK_SPAN = timedelta(days=2)


def daily_noons(date_range: DateRange, tz: tzinfo | None = None) -> list[datetime]:
    """Noon (wall clock in `tz`) of every calendar day from start's day through end's day."""
    zone = tz if tz is not None else date_range.start.tzinfo
    first = local_date(date_range.start, tz)
    last = local_date(date_range.end, tz)
    return [at_wall_clock(day, TICK_HOUR, zone) for day in iter_calendar_days(first, last)]


def x_axis_date_values(
    date_range: DateRange | None,
    count: int = DEFAULT_TICK_COUNT,
    tz: tzinfo | None = None,
) -> list[datetime]:
    """Extract evenly strided, noon-anchored tick dates from a date range.

    The step is always a whole number of days. The first tick is noon of the
    range's first day; the last day is included only when the days divide evenly.

    Args:
        date_range (DateRange | None): Closed range to label.
        count (int): Maximum number of ticks (default 6). One returns only the first day.
        tz (tzinfo | None): Zone whose calendar and wall clock are used. Defaults to the
            zone of date_range.start.

    Returns:
        list[datetime]: At most `count` strictly increasing dates, each at 12:00:00.
        Empty when the range is None, count <= 0, or the range lasts less than 48 hours
        of elapsed time.

    Examples:
        >>> from datetime import datetime, UTC
        >>> r = DateRange(datetime(2024, 1, 1, 8, tzinfo=UTC), datetime(2024, 1, 11, 8, tzinfo=UTC))
        >>> [d.day for d in x_axis_date_values(r, 6)]
        [1, 3, 5, 7, 9, 11]
    """
    if count <= 0 or date_range is None or date_range.span < MIN_TICK_SPAN:
        return []

    noons = daily_noons(date_range, tz)
    if count == 1:
        return noons[:1]

    stride = max(1, len(noons) // (count - 1))
    return noons[::stride][:count]
