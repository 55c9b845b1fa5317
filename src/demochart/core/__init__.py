"""
Core package for demochart contracts (constants, errors, date ranges, row models).

## Contracts (single source of truth)
- Constants — tick count, tick hour, zoom overshoot, minimum half-width.
- Dates — DateRange and calendar-day helpers.
- Schema — Row, UserType, and the legend.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Downstream: demochart.io builds Rows from the embedded CSV; demochart.viz samples,
  windows, and selects over them.

## Examples
```python
from datetime import datetime, UTC
from demochart.core import DateRange, Row

r = DateRange(datetime(2024, 10, 15, tzinfo=UTC), datetime(2024, 12, 24, tzinfo=UTC))
r.calendar_days()  # 70
Row(sample_date=r.start, total_users=660, new_users=47).active_users  # 613
```
"""

from __future__ import annotations

from .dates import DateRange
from .errors import DateRangeError, WindowError
from .schema import PlottableUserType, Row, UserType, legend

__all__ = [
    "DateRange",
    "DateRangeError",
    "WindowError",
    "PlottableUserType",
    "Row",
    "UserType",
    "legend",
]
