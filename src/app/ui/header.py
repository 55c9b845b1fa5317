"""
Header (global controls) for the demochart Streamlit application.

This module renders the top-of-page controls, including:
- Page title (from ChartSettings).
- Preferences: timezone used for tick calendars and the number of axis ticks.
- Cache preferences, turned into a CacheConfig used by data loaders.

Notes:
    - Settings start from ChartSettings.load() (env > TOML > defaults); CLI defaults and
      the preference widgets override them for the session.
"""

from __future__ import annotations

from dataclasses import replace

import streamlit as st

from app.data import CacheConfig
from demochart.io import ChartConfigError, ChartSettings


def render_header(
    *,
    default_timezone: str | None,
    default_tick_count: int | None,
) -> tuple[ChartSettings, CacheConfig]:
    """Render the global header and return the effective settings and cache config.

    Args:
        default_timezone (str | None): Optional timezone override from the CLI.
        default_tick_count (int | None): Optional tick count override from the CLI.

    Returns:
        tuple[ChartSettings, CacheConfig]: (settings, cache_config)

    Notes:
        - An unknown timezone entered in Preferences is reported and the previous
          valid zone is kept.
    """
    base = ChartSettings.load()
    if default_timezone:
        base = replace(base, timezone=default_timezone)
    if default_tick_count:
        base = replace(base, tick_count=int(default_tick_count))

    # Session defaults
    if "pref_timezone" not in st.session_state:
        st.session_state["pref_timezone"] = base.timezone
    if "pref_tick_count" not in st.session_state:
        st.session_state["pref_tick_count"] = base.tick_count
    if "cache_ttl" not in st.session_state:
        st.session_state["cache_ttl"] = 600
    if "cache_persist" not in st.session_state:
        st.session_state["cache_persist"] = False

    st.markdown(f"### {base.title}")

    c1, c2 = st.columns([0.6, 0.4])
    with c1:
        with st.expander("Preferences", expanded=False):
            tz_name = st.text_input(
                "Timezone (IANA)",
                value=str(st.session_state["pref_timezone"]),
                help="Tick dates land at noon in this zone.",
                key="pref_timezone_header",
            )
            candidate = replace(base, timezone=tz_name.strip() or base.timezone)
            try:
                candidate.tzinfo()
                st.session_state["pref_timezone"] = candidate.timezone
            except ChartConfigError as e:
                st.caption(str(e))
            ticks = st.number_input(
                "Axis ticks",
                min_value=1,
                max_value=20,
                value=int(st.session_state["pref_tick_count"]),
                step=1,
                key="pref_tick_count_header",
            )
            st.session_state["pref_tick_count"] = int(ticks)

    with c2:
        with st.expander("Cache", expanded=False):
            ttl = st.number_input(
                "Cache TTL (seconds)",
                min_value=0,
                value=int(st.session_state["cache_ttl"]),
                step=60,
                help="0 disables TTL",
                key="cache_ttl_header",
            )
            persist = st.checkbox(
                "Persist to disk",
                value=bool(st.session_state["cache_persist"]),
                key="cache_persist_header",
            )
            st.session_state["cache_ttl"] = int(ttl)
            st.session_state["cache_persist"] = bool(persist)

    settings = replace(
        base,
        timezone=str(st.session_state["pref_timezone"]),
        tick_count=int(st.session_state["pref_tick_count"]),
    )
    cache_cfg = CacheConfig(
        ttl=int(st.session_state["cache_ttl"]) if int(st.session_state["cache_ttl"]) > 0 else None,
        persist=bool(st.session_state["cache_persist"]),
    )
    return settings, cache_cfg
