from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from demochart.core.schema import Row, UserType, legend


def _row(total: int, new: int) -> Row:
    return Row(sample_date=datetime(2024, 10, 15, 16, tzinfo=UTC), total_users=total, new_users=new)


def test_active_users_is_derived() -> None:
    r = _row(660, 47)
    assert r.active_users == 613


def test_user_types_stack_active_below_new() -> None:
    segs = _row(660, 47).user_types
    assert [s.user_type for s in segs] == [UserType.ACTIVE, UserType.NEW]
    assert [s.value for s in segs] == [613, 47]
    assert [s.color for s in segs] == ["green", "blue"]


def test_new_users_cannot_exceed_total() -> None:
    with pytest.raises(ValidationError):
        _row(10, 11)


def test_negative_counts_rejected() -> None:
    with pytest.raises(ValidationError):
        _row(-1, 0)
    with pytest.raises(ValidationError):
        _row(5, -2)


def test_rows_are_frozen() -> None:
    r = _row(5, 1)
    with pytest.raises(ValidationError):
        r.total_users = 7  # type: ignore[misc]


def test_legend_order_and_descriptions() -> None:
    assert legend() == [("Active Users", "green"), ("New Users", "blue")]
    assert UserType.ACTIVE.order == 0
    assert UserType.NEW.order == 1
