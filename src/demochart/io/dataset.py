"""
Dataset facade over the embedded sample CSV.

Responsibilities
- Parse CSV text (header sample_date,total_users,new_users) into a Polars frame with a
  timezone-aware sample_date column and a derived active_users column.
- Drop malformed rows (non-numeric, negative, new_users > total_users) with a warning.
- Expose the rows as immutable demochart.core.schema.Row models sorted by date.

Notes
- parse_csv() raises DatasetLoadError when the text cannot be read at all; load_dataset()
  turns that into an empty Dataset so the presentation layer can render "no data".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import polars as pl
from pydantic import ValidationError

from demochart.core.constants import CSV_COLUMNS, DEFAULT_TIMEZONE
from demochart.core.dates import DateRange
from demochart.core.schema import Row

from .config import ChartSettings
from .embedded import SAMPLE_CSV
from .errors import DatasetLoadError

__all__ = ["Dataset", "parse_csv", "load_dataset"]

logger = logging.getLogger(__name__)


def _empty_frame(tz: str) -> pl.DataFrame:
    return pl.DataFrame(
        {
            "sample_date": pl.Series([], dtype=pl.Datetime("us", time_zone=tz)),
            "total_users": pl.Series([], dtype=pl.Int64),
            "new_users": pl.Series([], dtype=pl.Int64),
            "active_users": pl.Series([], dtype=pl.Int64),
        }
    )


def parse_csv(text: str, *, timezone: str = DEFAULT_TIMEZONE) -> pl.DataFrame:
    """Parse sample CSV text into a typed frame sorted by sample_date.

    Args:
        text (str): CSV text with header sample_date,total_users,new_users.
        timezone (str): IANA zone the epoch timestamps are converted into.

    Returns:
        pl.DataFrame: Columns sample_date (Datetime, tz-aware), total_users, new_users,
        active_users (Int64). Malformed rows are dropped.

    Raises:
        DatasetLoadError: If the text is empty, unreadable, or lacks a required column.
    """
    try:
        raw = pl.read_csv(text.encode("utf-8"), infer_schema=False)
    except pl.exceptions.PolarsError as e:
        raise DatasetLoadError(f"Failed to read sample CSV: {e}") from e

    missing = [c for c in CSV_COLUMNS if c not in raw.columns]
    if missing:
        raise DatasetLoadError(f"Sample CSV missing required columns: {missing}")

    typed = raw.select(
        [pl.col(c).str.strip_chars().cast(pl.Int64, strict=False) for c in CSV_COLUMNS]
    )
    valid = typed.filter(
        pl.all_horizontal([pl.col(c).is_not_null() for c in CSV_COLUMNS])
        & (pl.col("total_users") >= 0)
        & (pl.col("new_users") >= 0)
        & (pl.col("new_users") <= pl.col("total_users"))
    )
    dropped = typed.height - valid.height
    if dropped:
        logger.warning("Dropped %d malformed sample row(s)", dropped)

    try:
        return (
            valid.with_columns(
                pl.from_epoch("sample_date", time_unit="s")
                .dt.replace_time_zone("UTC")
                .dt.convert_time_zone(timezone),
                (pl.col("total_users") - pl.col("new_users")).alias("active_users"),
            )
            .sort("sample_date")
        )
    except pl.exceptions.PolarsError as e:
        raise DatasetLoadError(f"Failed to convert sample dates: {e}") from e


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    Immutable, date-ordered collection of sample rows.

    Attributes:
        frame (pl.DataFrame): Typed frame (see parse_csv).
        rows (tuple[Row, ...]): One Row per frame row, ascending by sample_date.
    """

    frame: pl.DataFrame
    rows: tuple[Row, ...] = field(default_factory=tuple)

    @classmethod
    def from_frame(cls, frame: pl.DataFrame) -> Dataset:
        rows: list[Row] = []
        for rec in frame.iter_rows(named=True):
            try:
                rows.append(
                    Row(
                        sample_date=rec["sample_date"],
                        total_users=rec["total_users"],
                        new_users=rec["new_users"],
                    )
                )
            except ValidationError as e:
                logger.warning("Skipping invalid row %r: %s", rec, e)
        rows.sort(key=lambda r: r.sample_date)
        return cls(frame=frame, rows=tuple(rows))

    @classmethod
    def empty(cls, timezone: str = DEFAULT_TIMEZONE) -> Dataset:
        return cls(frame=_empty_frame(timezone), rows=())

    def __len__(self) -> int:
        return len(self.rows)

    def is_empty(self) -> bool:
        return not self.rows

    @property
    def total_range(self) -> DateRange | None:
        """Closed range from the first to the last sample date; None when empty."""
        if not self.rows:
            return None
        return DateRange(self.rows[0].sample_date, self.rows[-1].sample_date)

    def rows_in(self, window: DateRange | None) -> list[Row]:
        """Rows whose sample_date lies inside `window` (all rows when window is None)."""
        if window is None:
            return list(self.rows)
        return [r for r in self.rows if window.contains(r.sample_date)]

    def frame_in(self, window: DateRange | None) -> pl.DataFrame:
        if window is None or self.frame.is_empty():
            return self.frame
        return self.frame.filter(pl.col("sample_date").is_between(window.start, window.end))


def load_dataset(
    settings: ChartSettings | None = None, *, text: str = SAMPLE_CSV
) -> Dataset:
    """Load the embedded dataset, returning an empty Dataset on parse failure.

    Args:
        settings (ChartSettings | None): Source of the timezone (defaults if None).
        text (str): CSV text; the embedded sample by default.

    Returns:
        Dataset: Possibly empty dataset.

    Raises:
        ChartConfigError: If the configured timezone is unknown.
    """
    s = settings or ChartSettings()
    s.tzinfo()  # unknown zones surface as ChartConfigError, not as "no data"
    try:
        frame = parse_csv(text, timezone=s.timezone)
    except DatasetLoadError as e:
        logger.error("Sample data unavailable, rendering empty chart: %s", e)
        return Dataset.empty(s.timezone)
    ds = Dataset.from_frame(frame)
    logger.info("Loaded %d sample rows", len(ds))
    return ds
