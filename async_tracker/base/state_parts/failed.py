"""Failed state variant.

The most recent committed invocation rejected. ``error`` is the opaque value
the producer raised; no previously held data survives into this variant.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from .status import Status


class Failed(BaseModel):
    """Most recent committed invocation rejected with ``error``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: Literal[Status.ERROR] = Status.ERROR
    error: Any


__all__ = ["Failed"]
