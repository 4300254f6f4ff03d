"""Unified configuration layer for lifecycle controllers.

Merge order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional external config file (JSON or YAML) pointed to by
       ``ASYNC_TRACKER_CONFIG_FILE``; only its ``tracker`` section is read
    3. Environment variables (``ASYNC_TRACKER_LAZY`` and friends)
    4. In-code overrides passed to the helper

External config file example::

    tracker:
      lazy: false
      log_rejections: true
      cancel_on_teardown: true

Public API
----------
* get_tracker_config(overrides: dict | None = None) -> dict
* load_settings(overrides: dict | None = None) -> TrackerSettings
* reset_config_cache()
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

import yaml

from ..base.dto import TrackerSettings
from .env import CONFIG_FILE_ENV, env_overrides
from .defaults import (
    TRACKER_DEFAULT_LAZY,
    TRACKER_DEFAULT_LOG_REJECTIONS,
    TRACKER_DEFAULT_CANCEL_ON_TEARDOWN,
    TRACKER_DEFAULT_JSON_LOGS,
    TRACKER_DEFAULT_LOG_LEVEL,
)

DEFAULTS: Dict[str, Any] = {
    "lazy": TRACKER_DEFAULT_LAZY,
    "log_rejections": TRACKER_DEFAULT_LOG_REJECTIONS,
    "cancel_on_teardown": TRACKER_DEFAULT_CANCEL_ON_TEARDOWN,
    "json_logs": TRACKER_DEFAULT_JSON_LOGS,
    "log_level": TRACKER_DEFAULT_LOG_LEVEL,
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


def _load_external_config() -> Dict[str, Any]:
    """Read the external config file once per path.

    JSON is tried first, then YAML. A missing file, unparseable content or a
    non-mapping document yields an empty mapping.
    """
    global _FILE_CACHE, _FILE_CACHE_PATH
    path = os.getenv(CONFIG_FILE_ENV) or ""
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    _FILE_CACHE_PATH = path
    data: Any = {}
    p = Path(path) if path else None
    if p is not None and p.is_file():
        text = p.read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except ValueError:
            try:
                data = yaml.safe_load(text) or {}
            except yaml.YAMLError:
                data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def reset_config_cache() -> None:
    """Forget the cached external config file (tests, hot reload)."""
    global _FILE_CACHE, _FILE_CACHE_PATH
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None


def get_tracker_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged controller configuration as a plain dict."""
    cfg: Dict[str, Any] = dict(DEFAULTS)

    file_cfg = _load_external_config().get("tracker")
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= env_overrides()

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> TrackerSettings:
    """Return merged configuration validated as :class:`TrackerSettings`."""
    return TrackerSettings(**get_tracker_config(overrides))


__all__ = [
    "DEFAULTS",
    "get_tracker_config",
    "load_settings",
    "reset_config_cache",
]
