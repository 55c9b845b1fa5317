from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from app.ui.helpers import coerce_datetime, format_day, picked_datetime

_MS = 1729008013000  # 2024-10-15 16:00:13 UTC


def test_coerce_datetime_from_epoch_ms() -> None:
    when = coerce_datetime(_MS)
    assert when == datetime(2024, 10, 15, 16, 0, 13, tzinfo=UTC)


def test_coerce_datetime_converts_zone() -> None:
    when = coerce_datetime(_MS, ZoneInfo("Asia/Tokyo"))
    assert when is not None
    assert (when.day, when.hour) == (16, 1)


@pytest.mark.parametrize(
    "value",
    ["2024-10-15T16:00:13Z", "2024-10-15T16:00:13+00:00", datetime(2024, 10, 15, 16, 0, 13)],
)
def test_coerce_datetime_accepts_iso_and_datetime(value) -> None:
    assert coerce_datetime(value) == datetime(2024, 10, 15, 16, 0, 13, tzinfo=UTC)


@pytest.mark.parametrize("value", [None, True, "yesterday", [1, 2]])
def test_coerce_datetime_rejects_garbage(value) -> None:
    assert coerce_datetime(value) is None


def test_picked_datetime_reads_raw_sample_date_as_is() -> None:
    selection = {"pick": [{"sample_date": _MS}, {"sample_date": 0}]}
    assert picked_datetime(selection, "pick") == datetime(2024, 10, 15, 16, 0, 13, tzinfo=UTC)


def test_picked_datetime_moves_day_bucket_to_noon() -> None:
    # Vega-Lite reports the start of the bar's day for a timeUnit projection
    midnight = int(datetime(2024, 10, 20, tzinfo=UTC).timestamp() * 1000)
    selection = {"pick": [{"yearmonthdate_sample_date": midnight}]}

    assert picked_datetime(selection, "pick") == datetime(2024, 10, 20, 12, tzinfo=UTC)


def test_picked_datetime_day_bucket_in_local_zone() -> None:
    berlin = ZoneInfo("Europe/Berlin")
    midnight = int(datetime(2024, 10, 20, tzinfo=berlin).timestamp() * 1000)
    selection = {"pick": [{"yearmonthdate_sample_date": midnight}]}

    assert picked_datetime(selection, "pick", berlin) == datetime(2024, 10, 20, 12, tzinfo=berlin)


@pytest.mark.parametrize(
    "selection",
    [None, {}, {"pick": []}, {"other": [{"sample_date": _MS}]}, {"pick": [{"value": 3}]}],
)
def test_picked_datetime_none_without_a_point(selection) -> None:
    assert picked_datetime(selection, "pick") is None


def test_format_day() -> None:
    assert format_day(datetime(2024, 12, 4, tzinfo=UTC)) == "Dec 04, 2024"
