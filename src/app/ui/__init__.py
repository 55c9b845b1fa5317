"""
demochart App UI package.

This package contains the Streamlit UI for the demo chart. It exposes the page
orchestrator and focused modules for separate concerns (header, helpers).

Modules:
    - app: Streamlit application orchestrator (streamlit_app).
    - header: Global header (title, timezone/tick preferences, cache preferences).
    - helpers: Small helpers (selection payload parsing, date formatting).

Usage:
    from app.ui import streamlit_app
    streamlit_app(default_timezone="America/New_York", default_tick_count=6)
"""

from __future__ import annotations

from .app import streamlit_app
from .header import render_header

__all__ = [
    "streamlit_app",
    "render_header",
]
