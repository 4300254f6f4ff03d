"""
Lifecycle status discriminator.

Defines the `Status` enumeration carried by every `AsyncState` variant. Values
are uppercase strings and are considered a stable public contract for callers
that switch on ``state.status`` and for structured logging.
"""
from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """Enumerated lifecycle statuses, one per `AsyncState` variant."""

    INIT = "INIT"
    PENDING = "PENDING"
    OK = "OK"
    ERROR = "ERROR"
    RELOADING = "RELOADING"


__all__ = ["Status"]
