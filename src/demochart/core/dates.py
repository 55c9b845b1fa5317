"""
Closed date ranges and calendar-day helpers.

Responsibilities
- DateRange: immutable closed interval [start, end] over datetimes (start <= end).
- Calendar helpers that step by calendar day rather than by fixed 86400-second
  increments, so DST transitions and leap days land on the correct wall clock.

Notes
- Zero-IO (stdlib only).
- Aware datetimes are converted into the requested tz before taking calendar dates;
  naive datetimes are used as-is.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta, tzinfo

from .errors import DateRangeError

__all__ = [
    "DateRange",
    "local_date",
    "iter_calendar_days",
    "at_wall_clock",
    "elapsed",
    "shift",
]


def local_date(when: datetime, tz: tzinfo | None = None) -> date:
    """Return the calendar date of `when` as seen in `tz` (or its own zone if None)."""
    if tz is not None and when.tzinfo is not None:
        when = when.astimezone(tz)
    return when.date()


def iter_calendar_days(first: date, last: date) -> Iterator[date]:
    """Yield every calendar date from `first` through `last` inclusive."""
    day = first
    while day <= last:
        yield day
        day = day + timedelta(days=1)


def elapsed(start: datetime, end: datetime) -> timedelta:
    """Exact time from `start` to `end`.

    Subtracting two aware datetimes that share a tzinfo compares wall clocks; going
    through UTC counts the real hours across a DST change.
    """
    if start.tzinfo is not None and end.tzinfo is not None:
        return end.astimezone(UTC) - start.astimezone(UTC)
    return end - start


def shift(when: datetime, delta: timedelta) -> datetime:
    """Move `when` by an exact `delta`, keeping its zone."""
    if when.tzinfo is None:
        return when + delta
    return (when.astimezone(UTC) + delta).astimezone(when.tzinfo)


def at_wall_clock(day: date, hour: int, tz: tzinfo | None) -> datetime:
    """Return `day` at `hour`:00:00 wall-clock time in `tz`.

    Combining a date with a wall-clock time (instead of adding seconds to a
    previous timestamp) keeps the hour stable across DST changes.
    """
    return datetime.combine(day, time(hour=hour), tzinfo=tz)


@dataclass(frozen=True)
class DateRange:
    """
    Closed interval of datetimes.

    Attributes:
        start (datetime): Lower bound (inclusive).
        end (datetime): Upper bound (inclusive).

    Raises:
        DateRangeError: If start > end, or exactly one bound is timezone-aware.

    Examples:
        >>> from datetime import datetime, UTC
        >>> r = DateRange(datetime(2024, 1, 1, tzinfo=UTC), datetime(2024, 1, 11, tzinfo=UTC))
        >>> r.span.days
        10
        >>> r.at_fraction(0.5).day
        6
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if (self.start.tzinfo is None) != (self.end.tzinfo is None):
            raise DateRangeError("start and end must both be naive or both be timezone-aware")
        if self.start > self.end:
            raise DateRangeError(f"start ({self.start}) must be <= end ({self.end})")

    @property
    def span(self) -> timedelta:
        return elapsed(self.start, self.end)

    @property
    def half_width(self) -> timedelta:
        return self.span / 2

    @property
    def midpoint(self) -> datetime:
        return shift(self.start, self.half_width)

    def contains(self, when: datetime) -> bool:
        return self.start <= when <= self.end

    def calendar_days(self, tz: tzinfo | None = None) -> int:
        """Number of calendar-day boundaries between start and end in `tz`."""
        return (local_date(self.end, tz) - local_date(self.start, tz)).days

    def at_fraction(self, fraction: float) -> datetime:
        """Map a normalized position (clamped into [0, 1]) onto the range."""
        fraction = min(max(float(fraction), 0.0), 1.0)
        return shift(self.start, self.span * fraction)

    def fraction_of(self, when: datetime) -> float:
        """Inverse of at_fraction; 0.0 for a zero-width range."""
        if self.span <= timedelta(0):
            return 0.0
        return elapsed(self.start, when) / self.span

    def clamp_into(self, outer: DateRange) -> DateRange:
        """Shift this range to lie inside `outer`, keeping its width when it fits.

        A range wider than `outer` collapses to `outer` itself.
        """
        if self.span >= outer.span:
            return outer
        start, end = self.start, self.end
        if start < outer.start:
            end = shift(end, elapsed(start, outer.start))
            start = outer.start
        elif end > outer.end:
            start = shift(start, -elapsed(outer.end, end))
            end = outer.end
        return DateRange(start, end)

    @classmethod
    def around(cls, anchor: datetime, half_width: timedelta) -> DateRange:
        return cls(shift(anchor, -half_width), shift(anchor, half_width))
