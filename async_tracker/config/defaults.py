"""async_tracker.config.defaults
=============================

Central place for the small, stable default values used by lifecycle
controllers. These can be overridden via an external config file,
environment variables, or explicit overrides, but provide sensible fallbacks
for applications and tests.

This module intentionally imports nothing from the rest of the package.
"""

from __future__ import annotations

# ---- Controller behaviour ----
# Controllers start their producer on activation unless created lazy.
TRACKER_DEFAULT_LAZY = False
# Committed rejections get an error-level diagnostic line.
TRACKER_DEFAULT_LOG_REJECTIONS = True
# In-flight producer tasks run to completion after teardown, unobserved.
TRACKER_DEFAULT_CANCEL_ON_TEARDOWN = False

# ---- Logging ----
TRACKER_DEFAULT_JSON_LOGS = True
TRACKER_DEFAULT_LOG_LEVEL = "INFO"

# Prefix for generated controller names ("controller-1", "controller-2", ...)
TRACKER_DEFAULT_NAME_PREFIX = "controller"


__all__ = [
    "TRACKER_DEFAULT_LAZY",
    "TRACKER_DEFAULT_LOG_REJECTIONS",
    "TRACKER_DEFAULT_CANCEL_ON_TEARDOWN",
    "TRACKER_DEFAULT_JSON_LOGS",
    "TRACKER_DEFAULT_LOG_LEVEL",
    "TRACKER_DEFAULT_NAME_PREFIX",
]
