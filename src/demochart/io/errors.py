"""
Custom exceptions for the demochart.io module.

Purpose
- Provide IO-layer error types for configuration and dataset loading.
- Keep demochart.core.errors as the source of truth for range/window errors.

Mapping
- ChartConfigError: invalid or unsupported configuration (e.g., unknown timezone).
- DatasetLoadError: the embedded CSV could not be parsed into a frame.

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class ChartIoError(Exception):
    """
    Base class for IO-related errors in demochart.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from demochart.core errors.
    """


class ChartConfigError(ChartIoError):
    """
    Raised when chart configuration is invalid or unsupported.

    Examples:
        - Unknown IANA timezone name
    """


class DatasetLoadError(ChartIoError):
    """
    Raised when CSV text cannot be parsed into the expected columns.

    Notes:
        load_dataset() catches this and returns an empty Dataset; parse_csv() raises it.
    """
