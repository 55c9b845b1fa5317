from __future__ import annotations

import altair as alt

from demochart.viz import ChartInteraction, build_user_chart


# Uniform chart defaults for a professional look
def _apply_chart_defaults(ch: alt.TopLevelMixin) -> alt.TopLevelMixin:
    try:
        return (
            ch.configure_axis(labelFontSize=12, titleFontSize=12, grid=True)
            .configure_legend(labelFontSize=12, titleFontSize=12)
            .configure_title(fontSize=14)
            .configure_view(strokeOpacity=0)
        )
    except Exception:
        # If configuration fails (e.g., non-top-level), return chart as-is
        return ch


def user_types_chart(
    interaction: ChartInteraction, *, tick_count: int, height: int = 420
) -> alt.TopLevelMixin:
    """Stacked user-type bars for the current window, ticks, and selection."""
    ch = build_user_chart(
        interaction.dataset,
        window=interaction.visible_range,
        ticks=interaction.axis_ticks(tick_count),
        selected=interaction.selected_row,
    )
    return _apply_chart_defaults(ch.properties(height=height))
