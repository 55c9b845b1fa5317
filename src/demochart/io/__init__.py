"""
demochart.io — configuration and the embedded dataset.

## Public API
- ChartSettings — runtime configuration (env > TOML > defaults).
- Dataset — immutable, date-ordered rows plus the backing Polars frame.
- load_dataset — parse the embedded CSV, returning an empty Dataset on failure.

## Import DAG discipline
- Depends only on stdlib, polars, pydantic, and demochart.core.*.
- MUST NOT import viz or app.
"""

from __future__ import annotations

from .config import ChartSettings
from .dataset import Dataset, load_dataset, parse_csv
from .errors import ChartConfigError, ChartIoError, DatasetLoadError

__all__ = [
    "ChartSettings",
    "Dataset",
    "load_dataset",
    "parse_csv",
    "ChartIoError",
    "ChartConfigError",
    "DatasetLoadError",
]
