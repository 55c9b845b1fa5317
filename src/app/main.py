"""
demochart App entrypoint.

This module provides the CLI entrypoint to launch the Streamlit UI. It defers
all UI composition to the app.ui package and exists solely to start Streamlit
programmatically or render directly when already running under Streamlit.

Usage:
    - Python execution (hands process to Streamlit):
        python -m app.main --tz America/New_York --ticks 6

    - Streamlit direct:
        streamlit run src/app/main.py -- --tz America/New_York --ticks 6
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from app.ui import streamlit_app


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """Console entrypoint that launches Streamlit with the demo chart UI.

    If already executing within a Streamlit server (environment variable
    STREAMLIT_SERVER_PORT is set), this function renders the app directly.
    Otherwise, it execs "python -m streamlit run <this_module>" to leverage
    Streamlit's reloader and argument parsing, passing through any supported
    options after "--".

    Args:
        argv (list[str] | None): Optional list of CLI arguments. If None,
            sys.argv[1:] is used.

    Examples:
        python -m app.main --tz Europe/Berlin --ticks 8
        streamlit run src/app/main.py -- --tz Europe/Berlin --ticks 8
    """
    args = list(sys.argv[1:] if argv is None else argv)

    parser = argparse.ArgumentParser(description="demochart Streamlit App")
    parser.add_argument("--tz", default=None, help="IANA timezone for tick dates.")
    parser.add_argument("--ticks", type=int, default=None, help="Number of date-axis ticks.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the demochart loggers.",
    )
    ns = parser.parse_args(args)

    # If invoked within Streamlit, just render
    if os.environ.get("STREAMLIT_SERVER_PORT"):
        _configure_logging(ns.log_level)
        streamlit_app(default_timezone=ns.tz, default_tick_count=ns.ticks)
        return

    # Otherwise, exec streamlit run on this module to take over the process
    app_path = Path(__file__).resolve()
    cmd = [sys.executable, "-m", "streamlit", "run", str(app_path)]

    passthrough: list[str] = []
    if ns.tz:
        passthrough += ["--tz", ns.tz]
    if ns.ticks is not None:
        passthrough += ["--ticks", str(int(ns.ticks))]
    passthrough += ["--log-level", ns.log_level]
    cmd += ["--"] + passthrough

    try:
        os.execv(sys.executable, cmd)
    except OSError:
        import subprocess

        subprocess.run(cmd, check=False)


if __name__ == "__main__":
    # Support: --tz, --ticks, --log-level after '--' when using `streamlit run`
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--tz", default=None)
    parser.add_argument("--ticks", type=int, default=None)
    parser.add_argument("--log-level", default="INFO")
    try:
        ns, _ = parser.parse_known_args(sys.argv[1:])
        _configure_logging(ns.log_level)
        streamlit_app(default_timezone=ns.tz, default_tick_count=ns.ticks)
    except SystemExit:
        # Fallback to no-arg render
        streamlit_app()
