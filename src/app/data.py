from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import streamlit as st

from demochart.io import ChartSettings, Dataset
from demochart.io import load_dataset as _load_dataset

__all__ = [
    "CacheConfig",
    "load_dataset",
]

# ---------- Cache configuration (factory of cached callables) ----------


@dataclass(frozen=True)
class CacheConfig:
    """Hashable cache configuration for Streamlit @st.cache_data.

    Note: Streamlit's decorator parameters (ttl, persist) are fixed at decoration
    time. We build and memoize decorated callables per (name, ttl, persist) so the
    app can switch these at runtime while still benefiting from caching.
    """

    ttl: int | None = None
    persist: bool = False


# Registry of decorated functions by (loader_name, CacheConfig)
_CACHE_REGISTRY: dict[tuple[str, CacheConfig], Callable[..., Any]] = {}


def _get_cached(loader_name: str, cfg: CacheConfig, fn: Callable[..., Any]) -> Callable[..., Any]:
    key = (loader_name, cfg)
    if key in _CACHE_REGISTRY:
        return _CACHE_REGISTRY[key]
    if cfg.persist:
        wrapped = st.cache_data(persist="disk", ttl=cfg.ttl)(fn)
    else:
        wrapped = st.cache_data(ttl=cfg.ttl)(fn)
    _CACHE_REGISTRY[key] = wrapped
    return wrapped


# ---------- Loaders (internal implementations) ----------


def _load_dataset_impl(timezone: str) -> Dataset:
    # Keyed on primitives so Streamlit can hash the arguments
    return _load_dataset(ChartSettings(timezone=timezone))


# ---------- Public loader APIs (dispatch to cached implementations) ----------


def load_dataset(settings: ChartSettings, *, cfg: CacheConfig = CacheConfig()) -> Dataset:
    fn = _get_cached("load_dataset", cfg, _load_dataset_impl)
    return fn(settings.timezone)  # type: ignore[no-any-return]
