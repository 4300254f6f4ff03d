"""
Structured tracker error exception type.

Raised for caller programming errors at controller construction, and used as
the ``error`` payload of a `Failed` state when a producer misbehaves (for
example returns something that cannot be awaited).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class TrackerError(Exception):
    """Represents a structured tracker error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        controller: Name of the controller where the error originated.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    controller: Optional[str] = None
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining controller, code, and message."""
        return f"{self.controller or '-'} {self.code.value}: {self.message}"


__all__ = ["TrackerError"]
