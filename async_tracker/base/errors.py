"""Unified tracker error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``async_tracker.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.tracker_error import TrackerError
from .errors_parts.classification import classify_rejection

__all__ = ["ErrorCode", "TrackerError", "classify_rejection"]
