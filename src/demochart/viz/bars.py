"""
Altair spec for the stacked user-type bar chart.

One bar per day; each bar is split into UserType segments (active users below new
users), colored by the legend. The x axis is restricted to the visible window and
labeled with the sampled tick dates. A point selection named PICK_PARAM carries
taps back to the host (Streamlit returns it from st.altair_chart(on_select=...)).

Notes
- Dates are passed to Vega-Lite as epoch milliseconds.
- Rendering itself is Vega-Lite's job; this module only builds the spec.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

import altair as alt
import polars as pl

from demochart.core.dates import DateRange
from demochart.core.schema import Row, UserType, legend
from demochart.io.dataset import Dataset

__all__ = [
    "PICK_PARAM",
    "epoch_ms",
    "to_long_frame",
    "to_values",
    "layer_with_rule_x",
    "build_user_chart",
]

PICK_PARAM = "pick"


def epoch_ms(when: datetime) -> int:
    return int(round(when.timestamp() * 1000))


def to_long_frame(frame: pl.DataFrame) -> pl.DataFrame:
    """Unpivot per-day counts into one row per (day, user type) segment.

    Args:
        frame (pl.DataFrame): Dataset frame with sample_date, active_users, new_users.

    Returns:
        pl.DataFrame: Columns sample_date (epoch ms), user_type (description),
        value, order (stacking position, 0 = bottom). Sorted by date then order.
    """
    kinds = [ut.value for ut in UserType]
    return (
        frame.select(["sample_date", *kinds])
        .unpivot(index="sample_date", on=kinds, variable_name="kind", value_name="value")
        .with_columns(
            pl.col("sample_date").dt.epoch("ms"),
            pl.col("kind")
            .replace_strict({ut.value: ut.description for ut in UserType})
            .alias("user_type"),
            pl.col("kind")
            .replace_strict({ut.value: ut.order for ut in UserType}, return_dtype=pl.Int64)
            .alias("order"),
        )
        .drop("kind")
        .sort(["sample_date", "order"])
    )


def to_values(df: pl.DataFrame) -> list[dict[str, Any]]:
    return df.to_dicts()


def layer_with_rule_x(base: object, when: datetime, *, color: str = "#999") -> alt.LayerChart:
    """Overlay a vertical rule at `when` on the base chart."""
    rule = (
        alt.Chart(alt.Data(values=[{"sample_date": epoch_ms(when)}]))
        .mark_rule(color=color, strokeWidth=2)
        .encode(x="sample_date:T")
    )
    return alt.layer(base, rule)  # type: ignore


def build_user_chart(
    dataset: Dataset,
    *,
    window: DateRange | None = None,
    ticks: Sequence[datetime] | None = None,
    selected: Row | None = None,
) -> alt.Chart | alt.LayerChart:
    """Build the stacked bar chart for the rows inside `window`.

    Args:
        dataset (Dataset): Rows to chart.
        window (DateRange | None): Visible range; the full dataset when None.
        ticks (Sequence[datetime] | None): Axis label dates (Vega-Lite picks if None/empty).
        selected (Row | None): Row to mark with a rule.

    Returns:
        alt.Chart | alt.LayerChart: Bar chart, layered with a rule when a row is selected,
        or a text placeholder when there is nothing to draw.
    """
    frame = dataset.frame_in(window)
    if frame.is_empty():
        return alt.Chart(alt.Data(values=[{}])).mark_text().encode(text=alt.value("No data"))

    descriptions = [d for d, _ in legend()]
    colors = [c for _, c in legend()]
    pick = alt.selection_point(
        name=PICK_PARAM, encodings=["x"], nearest=True, on="click", clear="dblclick"
    )

    axis_kwargs: dict[str, Any] = {"format": "%b %d", "labelAngle": 0}
    if ticks:
        axis_kwargs["values"] = [epoch_ms(t) for t in ticks]
    x_scale = alt.Undefined
    if window is not None:
        x_scale = alt.Scale(domain=[epoch_ms(window.start), epoch_ms(window.end)])

    chart = (
        alt.Chart(alt.Data(values=to_values(to_long_frame(frame))))
        .mark_bar(clip=True)
        .encode(
            x=alt.X(
                "sample_date:T",
                timeUnit="yearmonthdate",
                title="Date",
                axis=alt.Axis(**axis_kwargs),
                scale=x_scale,
            ),
            y=alt.Y("value:Q", stack="zero", title="Users"),
            color=alt.Color(
                "user_type:N",
                scale=alt.Scale(domain=descriptions, range=colors),
                legend=alt.Legend(title=None, orient="bottom"),
            ),
            order=alt.Order("order:Q", sort="ascending"),
            tooltip=[
                alt.Tooltip("sample_date:T", title="Date", format="%Y-%m-%d"),
                alt.Tooltip("user_type:N", title="Type"),
                alt.Tooltip("value:Q", title="Users"),
            ],
        )
        .add_params(pick)
    )
    if selected is not None:
        return layer_with_rule_x(chart, selected.sample_date)
    return chart
