"""
Pydantic v2 models for sample rows and the user-type legend.

Responsibilities
- Row: one daily sample (date, total users, new users) with the derived active count.
- UserType: the two stacked bar segments, their display names and colors.
- PlottableUserType: one (user type, value) segment of a Row's bar.

Style
- Zero-IO (stdlib + pydantic only).
- Rows are frozen; a dataset is loaded once and never mutated.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

__all__ = [
    "UserType",
    "PlottableUserType",
    "LegendElement",
    "Row",
    "legend",
]

LegendElement = tuple[str, str]


class UserType(str, Enum):
    """
    Kind of user represented by one bar segment.

    The declaration order is the stacking order: earlier members are drawn
    below later ones.
    """

    ACTIVE = "active_users"
    NEW = "new_users"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

    @property
    def order(self) -> int:
        return list(UserType).index(self)


_DESCRIPTIONS: dict[UserType, str] = {
    UserType.ACTIVE: "Active Users",
    UserType.NEW: "New Users",
}

_COLORS: dict[UserType, str] = {
    UserType.ACTIVE: "green",
    UserType.NEW: "blue",
}


def legend() -> list[LegendElement]:
    """Return (description, color) pairs, active users first."""
    return [(ut.description, ut.color) for ut in UserType]


class PlottableUserType(BaseModel):
    """
    One stacked segment of a daily bar.

    Attributes:
        user_type (UserType): Segment kind.
        value (int): Number of users in the segment.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    user_type: UserType
    value: int = Field(..., ge=0)

    @property
    def description(self) -> str:
        return self.user_type.description

    @property
    def color(self) -> str:
        return self.user_type.color


class Row(BaseModel):
    """
    One daily sample of registered users.

    Attributes:
        sample_date (datetime): When the sample was taken.
        total_users (int): Registered users (>= 0).
        new_users (int): Users included in total_users that never signed in (>= 0).

    Raises:
        pydantic.ValidationError: If a count is negative or new_users > total_users.

    Examples:
        >>> from datetime import datetime, UTC
        >>> r = Row(sample_date=datetime(2024, 10, 15, 16, tzinfo=UTC), total_users=660, new_users=47)
        >>> r.active_users
        613
        >>> [seg.description for seg in r.user_types]
        ['Active Users', 'New Users']
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    sample_date: datetime
    total_users: int = Field(..., ge=0)
    new_users: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _new_within_total(self) -> Row:
        if self.new_users > self.total_users:
            raise ValueError(
                f"new_users ({self.new_users}) exceeds total_users ({self.total_users})"
            )
        return self

    @property
    def active_users(self) -> int:
        return self.total_users - self.new_users

    @property
    def user_types(self) -> list[PlottableUserType]:
        """Plottable segments in stacking order (active below new)."""
        return [
            PlottableUserType(user_type=UserType.ACTIVE, value=self.active_users),
            PlottableUserType(user_type=UserType.NEW, value=self.new_users),
        ]
