from __future__ import annotations

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from demochart.core.schema import Row
from demochart.viz.selection import nearest_to


def _row(day: int, total: int = 10) -> Row:
    return Row(sample_date=datetime(2024, 1, day, tzinfo=UTC), total_users=total, new_users=1)


def test_empty_rows_return_none() -> None:
    assert nearest_to([], datetime(2024, 1, 1, tzinfo=UTC)) is None


def test_equidistant_query_returns_earlier_row() -> None:
    rows = [_row(1), _row(3), _row(5)]
    assert nearest_to(rows, datetime(2024, 1, 4, tzinfo=UTC)) is rows[1]


def test_closer_later_row_wins() -> None:
    rows = [_row(1), _row(3), _row(5)]
    assert nearest_to(rows, datetime(2024, 1, 4, 13, tzinfo=UTC)) is rows[2]


def test_query_outside_range_snaps_to_ends() -> None:
    rows = [_row(1), _row(3), _row(5)]
    assert nearest_to(rows, datetime(2023, 12, 1, tzinfo=UTC)) is rows[0]
    assert nearest_to(rows, datetime(2024, 3, 1, tzinfo=UTC)) is rows[2]


def test_duplicate_dates_keep_first_occurrence() -> None:
    rows = [_row(2, total=10), _row(2, total=20)]
    assert nearest_to(rows, datetime(2024, 1, 2, tzinfo=UTC)) is rows[0]


def test_distance_is_real_time_across_dst() -> None:
    ny = ZoneInfo("America/New_York")
    # Nov 3 2024 has 25 hours in New York
    a = Row(sample_date=datetime(2024, 11, 3, 0, tzinfo=ny), total_users=1, new_users=0)
    b = Row(sample_date=datetime(2024, 11, 4, 0, tzinfo=ny), total_users=1, new_users=0)
    # 12 real hours after midnight Nov 3 is 11:00 wall clock; closer to `a` by an hour
    query = (a.sample_date.astimezone(UTC) + timedelta(hours=12)).astimezone(ny)
    assert query.hour == 11
    assert nearest_to([a, b], query) is a
    # Exactly midway in real time (12.5 hours) ties and keeps the first
    mid = (a.sample_date.astimezone(UTC) + timedelta(hours=12, minutes=30)).astimezone(ny)
    assert nearest_to([a, b], mid) is a
