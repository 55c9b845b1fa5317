from __future__ import annotations

"""
Top-level Streamlit app package.

This package hosts the interactive demo chart (Streamlit) decoupled from the
demochart.* library modules. Sampling, windowing, and selection live under
demochart.viz; the Streamlit UI shell and app-specific helpers live here.

CLI entrypoint (configured in pyproject.toml):
    demochart-app = app.main:main
"""
