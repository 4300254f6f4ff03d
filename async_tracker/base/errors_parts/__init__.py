"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `async_tracker.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .tracker_error import TrackerError
from .classification import classify_rejection

__all__ = ["ErrorCode", "TrackerError", "classify_rejection"]
