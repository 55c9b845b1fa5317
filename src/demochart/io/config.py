"""
Configuration for demochart.

Defines ChartSettings, a frozen dataclass carrying runtime configuration for the
chart: the timezone ticks are anchored in, the tick count, and the zoom tuning.
Defaults are sourced from demochart.core.constants (the single source of truth).

Source of truth
- demochart.core.constants.DEFAULT_TICK_COUNT, ZOOM_OVERSHOOT, MIN_HALF_WIDTH, DEFAULT_TIMEZONE

Import DAG discipline
- Depends only on stdlib and demochart.core.constants.
- Does not import higher layers (viz, app).

Notes
- Precedence: environment > TOML > defaults.
- Invalid values are ignored and the previous value is kept.
"""

from __future__ import annotations

import math
import os
import tomllib
from dataclasses import dataclass, replace
from datetime import timedelta, tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from demochart.core.constants import DEFAULT_TICK_COUNT, DEFAULT_TIMEZONE, MIN_HALF_WIDTH
from demochart.core.constants import ZOOM_OVERSHOOT

from .errors import ChartConfigError

__all__ = ["ChartSettings"]


@dataclass(frozen=True)
class ChartSettings:
    """
    Runtime settings for the demo chart.

    Attributes:
        timezone (str): IANA zone name whose wall clock anchors tick dates (default "UTC").
        tick_count (int): Number of date-axis ticks requested (>= 1).
        zoom_overshoot (float): Factor applied to the base half-width before dividing by
            the magnification (> 0).
        min_half_width_days (float): Narrowest half-width of a zoomed window, in days (> 0).
        title (str): Heading shown above the chart.

    Examples:
        >>> ChartSettings(timezone="America/New_York").tzinfo().key
        'America/New_York'
        >>> ChartSettings().min_half_width
        datetime.timedelta(days=2)
    """

    timezone: str = DEFAULT_TIMEZONE
    tick_count: int = DEFAULT_TICK_COUNT
    zoom_overshoot: float = ZOOM_OVERSHOOT
    min_half_width_days: float = MIN_HALF_WIDTH / timedelta(days=1)
    title: str = "User Types, Over Time"

    @property
    def min_half_width(self) -> timedelta:
        return timedelta(days=self.min_half_width_days)

    def tzinfo(self) -> tzinfo:
        """Resolve the configured zone name.

        Raises:
            ChartConfigError: If the zone is unknown.
        """
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ChartConfigError(f"Unknown timezone: {self.timezone!r}") from e

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: ChartSettings, cfg: dict[str, Any] | None) -> ChartSettings:
        """Apply a loose config mapping onto ChartSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _positive_float(v: Any) -> float | None:
            try:
                f = float(v)
            except (TypeError, ValueError):
                return None
            if math.isnan(f) or f <= 0:
                return None
            return f

        if "timezone" in cfg and isinstance(cfg["timezone"], str) and cfg["timezone"].strip():
            s = replace(s, timezone=cfg["timezone"].strip())

        if "tick_count" in cfg:
            try:
                n = int(cfg["tick_count"])
            except (TypeError, ValueError):
                n = 0
            if n >= 1:
                s = replace(s, tick_count=n)

        if "zoom_overshoot" in cfg:
            f = _positive_float(cfg["zoom_overshoot"])
            if f is not None:
                s = replace(s, zoom_overshoot=f)

        if "min_half_width_days" in cfg:
            f = _positive_float(cfg["min_half_width_days"])
            if f is not None:
                s = replace(s, min_half_width_days=f)

        if "title" in cfg and isinstance(cfg["title"], str):
            s = replace(s, title=cfg["title"])

        return s

    @classmethod
    def from_env(
        cls, base: ChartSettings | None = None, prefix: str = "DEMOCHART_"
    ) -> ChartSettings:
        """
        Build ChartSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - DEMOCHART_TIMEZONE
            - DEMOCHART_TICK_COUNT
            - DEMOCHART_ZOOM_OVERSHOOT
            - DEMOCHART_MIN_HALF_WIDTH_DAYS
            - DEMOCHART_TITLE
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("timezone", "tick_count", "zoom_overshoot", "min_half_width_days", "title"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> ChartSettings:
        """
        Build ChartSettings from a TOML file.

        Search order when `path` is None:
            1) ./demochart.toml (with either a [chart] table or direct keys)
            2) ./pyproject.toml under [tool.demochart]

        Returns defaults if no file is present or none parses.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "demochart.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("demochart") if isinstance(tool, dict) else None
            elif isinstance(data.get("chart"), dict):
                cfg = data["chart"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> ChartSettings:
        """
        Load ChartSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (demochart.toml, pyproject.toml).

        Returns:
            ChartSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
