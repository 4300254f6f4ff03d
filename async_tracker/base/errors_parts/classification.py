"""
Rejection classification helpers.

Maps the opaque value a producer rejected with onto a normalized `ErrorCode`
for structured logs and failure counters. Classification never changes what
is committed: the raw value is always stored in `Failed.error` as is.
"""
from __future__ import annotations

import asyncio

from .error_code import ErrorCode
from .tracker_error import TrackerError


def classify_rejection(error: object) -> ErrorCode:
    """Classify a rejection value into a normalized :class:`ErrorCode`.

    Precedence:
        1. TrackerError passthrough.
        2. Cancellation (``asyncio.CancelledError``).
        3. Timeout exceptions (sync/async).
        4. ``PRODUCER_REJECTED`` for any other exception or plain value.
    """
    if isinstance(error, TrackerError):
        return error.code
    if isinstance(error, asyncio.CancelledError):
        return ErrorCode.CANCELLED
    if isinstance(error, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    return ErrorCode.PRODUCER_REJECTED


__all__ = ["classify_rejection"]
