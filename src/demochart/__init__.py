"""
demochart — stacked user-type bar chart with date windowing and tap-to-inspect.

Subpackages:
    - demochart.core: constants, errors, DateRange, Row/UserType models (zero-IO).
    - demochart.io: ChartSettings and the embedded dataset loader.
    - demochart.viz: tick sampling, zoom window, row selection, interaction state,
      and the Altair chart spec.

The Streamlit shell lives in the top-level `app` package.
"""

from __future__ import annotations

__version__ = "0.1.0"
