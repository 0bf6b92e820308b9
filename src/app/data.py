from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

import polars as pl
import streamlit as st

from vizwalk.core.grammar import DatasetName, dataset_name_from_value
from vizwalk.io.config import WalkSettings
from vizwalk.io.read import load_dataset as _read_dataset

__all__ = [
    "CacheConfig",
    "load_dataset",
    "cached_loader",
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


# ---------- Loaders ----------


def _load_dataset_impl(name: str, data_dir: str | None, strict_schema: bool) -> pl.DataFrame:
    # Cache keys are plain values; settings are rebuilt from them
    settings = replace(WalkSettings(), data_dir=data_dir, strict_schema=strict_schema)
    return _read_dataset(name, settings)


def load_dataset(
    name: DatasetName | str,
    settings: WalkSettings | None = None,
    *,
    cfg: CacheConfig = CacheConfig(),
) -> pl.DataFrame:
    """Cached vizwalk.io.load_dataset keyed on (name, data_dir, strict_schema)."""
    s = settings or WalkSettings.load()
    fn = _get_cached("load_dataset", cfg, _load_dataset_impl)
    return fn(dataset_name_from_value(name).value, s.data_dir, s.strict_schema)


def cached_loader(cfg: CacheConfig) -> Callable[[DatasetName, WalkSettings], pl.DataFrame]:
    """Loader with the LessonContext signature that goes through the Streamlit cache."""

    def _load(name: DatasetName, settings: WalkSettings) -> pl.DataFrame:
        return load_dataset(name, settings, cfg=cfg)

    return _load
