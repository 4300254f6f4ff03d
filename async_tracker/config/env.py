"""async_tracker.config.env
========================

Environment variable mapping and parsing helpers for tracker settings.

Design Notes
------------
- ``ENV_MAP`` maps each settings field to its environment variable.
- Boolean parsing accepts the usual spellings; unknown values are ignored
  (treated as unset) rather than raising, so a stray value never prevents a
  controller from being created.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

CONFIG_FILE_ENV = "ASYNC_TRACKER_CONFIG_FILE"

# Settings field → env var name
ENV_MAP: Dict[str, str] = {
    "lazy": "ASYNC_TRACKER_LAZY",
    "log_rejections": "ASYNC_TRACKER_LOG_REJECTIONS",
    "cancel_on_teardown": "ASYNC_TRACKER_CANCEL_ON_TEARDOWN",
    "json_logs": "ASYNC_TRACKER_JSON_LOGS",
}

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def parse_bool(val: Optional[str]) -> Optional[bool]:
    """Parse a boolean-ish string.

    Returns
    -------
    Optional[bool]
        True/False for recognised spellings (case-insensitive, surrounding
        spaces ignored), None for ``None``, empty or unrecognised values.
    """
    if val is None:
        return None
    v = val.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def env_overrides() -> Dict[str, bool]:
    """Return settings fields set through the environment."""
    out: Dict[str, bool] = {}
    for field, name in ENV_MAP.items():
        parsed = parse_bool(os.environ.get(name))
        if parsed is not None:
            out[field] = parsed
    return out


__all__ = ["CONFIG_FILE_ENV", "ENV_MAP", "parse_bool", "env_overrides"]
