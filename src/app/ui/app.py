"""
Streamlit application orchestrator for demochart.

This module composes the global header and the chart page while delegating
supporting concerns to focused modules (app.ui.header, app.ui.helpers, app.data,
app.charts).

Responsibilities:
    - Configure Streamlit page.
    - Render global header (timezone, tick count, cache prefs).
    - Load the embedded dataset via app.data with configurable caching.
    - Keep one ChartInteraction per session in st.session_state.
    - Translate widget events into zoom gestures and chart clicks into drag selection.

Notes:
    - Zoom: the anchor/magnification sliders act as one continuous pinch; the first
      change captures the base window, "Done" ends the gesture.
    - Selection: a selected point on the chart is the Dragging state; clearing it
      (double-click) returns to Idle and clears the readout.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, cast

import streamlit as st

from app import charts as app_charts
from app.data import load_dataset
from demochart.io import ChartConfigError, ChartSettings, Dataset
from demochart.viz import PICK_PARAM, ChartInteraction, DragState

from .header import render_header
from .helpers import format_day, picked_datetime

logger = logging.getLogger(__name__)

_STATE_KEY = "chart_interaction"
_STATE_TZ_KEY = "chart_interaction_tz"
_CHART_KEY = "user_types_chart"


def get_interaction(dataset: Dataset, settings: ChartSettings) -> ChartInteraction:
    """Return the session's ChartInteraction, rebuilding it when the timezone changes."""
    current = st.session_state.get(_STATE_KEY)
    if current is None or st.session_state.get(_STATE_TZ_KEY) != settings.timezone:
        current = ChartInteraction.for_dataset(dataset, settings)
        st.session_state[_STATE_KEY] = current
        st.session_state[_STATE_TZ_KEY] = settings.timezone
    return cast(ChartInteraction, current)


def sync_selection(interaction: ChartInteraction, when: datetime | None) -> None:
    """Drive the drag state machine from the chart's current selection.

    A picked date starts (or continues) a drag and selects the nearest row; no
    pick ends any drag in progress, clearing the selection.
    """
    if when is not None:
        if interaction.drag_state is DragState.IDLE:
            interaction.begin_drag()
        interaction.drag_to(when)
    elif interaction.drag_state is DragState.DRAGGING:
        interaction.end_drag()


def _reset_zoom_widgets() -> None:
    st.session_state["zoom_anchor"] = 0.5
    st.session_state["zoom_magnification"] = 1.0


def _on_zoom_change() -> None:
    interaction = cast(ChartInteraction | None, st.session_state.get(_STATE_KEY))
    if interaction is None:
        return
    interaction.update_zoom(
        float(st.session_state["zoom_anchor"]),
        float(st.session_state["zoom_magnification"]),
    )


def _on_zoom_done() -> None:
    interaction = cast(ChartInteraction | None, st.session_state.get(_STATE_KEY))
    if interaction is not None:
        interaction.end_zoom()
    _reset_zoom_widgets()


def _on_zoom_reset() -> None:
    interaction = cast(ChartInteraction | None, st.session_state.get(_STATE_KEY))
    if interaction is not None:
        interaction.reset_window()
    _reset_zoom_widgets()


def streamlit_app(
    default_timezone: str | None = None,
    default_tick_count: int | None = None,
) -> None:
    """Render the demochart Streamlit application.

    Args:
        default_timezone (str | None): Optional timezone override (e.g. from the CLI).
        default_tick_count (int | None): Optional axis tick count override.

    Returns:
        None
    """
    st.set_page_config(page_title="User Types, Over Time", layout="centered")

    settings, cache_cfg = render_header(
        default_timezone=default_timezone,
        default_tick_count=default_tick_count,
    )

    try:
        with st.spinner("Loading sample data ..."):
            dataset = load_dataset(settings, cfg=cache_cfg)
        interaction = get_interaction(dataset, settings)
    except ChartConfigError as e:
        st.error(str(e))
        return

    if dataset.is_empty():
        st.warning("No sample data available.")

    # Zoom controls (one pinch gesture per Done)
    if "zoom_anchor" not in st.session_state:
        _reset_zoom_widgets()
    with st.sidebar.expander("Zoom", expanded=True):
        st.slider(
            "Anchor (left to right)",
            min_value=0.0,
            max_value=1.0,
            step=0.01,
            key="zoom_anchor",
            on_change=_on_zoom_change,
            disabled=interaction.window is None,
        )
        st.slider(
            "Magnification",
            min_value=0.25,
            max_value=8.0,
            step=0.25,
            key="zoom_magnification",
            on_change=_on_zoom_change,
            disabled=interaction.window is None,
        )
        b1, b2 = st.columns(2)
        with b1:
            st.button("Done", on_click=_on_zoom_done, use_container_width=True)
        with b2:
            st.button("Reset", on_click=_on_zoom_reset, use_container_width=True)

    # Apply the chart's selection before drawing so the rule and readout match it
    chart_state: Any = st.session_state.get(_CHART_KEY)
    selection = None
    if chart_state is not None:
        selection = chart_state.get("selection") if hasattr(chart_state, "get") else None
    sync_selection(interaction, picked_datetime(selection, PICK_PARAM, interaction.tz))

    with st.container(border=True):
        st.markdown(f"**{settings.title}**")
        window = interaction.visible_range
        if window is not None:
            st.caption(
                f"Showing {format_day(window.start)} to {format_day(window.end)} "
                f"({len(interaction.visible_rows())} days)"
            )
        try:
            ch = app_charts.user_types_chart(interaction, tick_count=settings.tick_count)
            if dataset.is_empty():
                # Placeholder chart carries no selection param
                st.altair_chart(cast(Any, ch), theme=None, use_container_width=True)
                return
            st.altair_chart(
                cast(Any, ch),
                theme=None,
                use_container_width=True,
                on_select="rerun",
                selection_mode=PICK_PARAM,
                key=_CHART_KEY,
            )
        except Exception as e:  # pragma: no cover
            logger.exception("Chart rendering failed")
            st.error(f"Failed to render chart: {e}")

        readout = interaction.readout()
        if readout:
            st.info(readout)
        else:
            st.caption("Click a bar to inspect a day; double-click to clear.")
