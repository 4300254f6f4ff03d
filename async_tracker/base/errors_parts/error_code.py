"""
Normalized tracker error codes (taxonomy).

Defines the `ErrorCode` enumeration used to classify producer rejections and
construction-time misuse. Values are lowercase snake_case and are considered a
stable public contract for logging and metrics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    PRODUCER_REJECTED = "producer_rejected"
    CANCELLED = "cancelled"
    TIMEOUT = "timeout"
    VALIDATION = "validation"


__all__ = ["ErrorCode"]
