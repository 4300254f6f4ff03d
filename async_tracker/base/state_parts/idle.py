"""Idle state variant (no invocation has ever started)."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .status import Status


class Idle(BaseModel):
    """Nothing has been started yet.

    Only reachable when the controller was created in lazy mode.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal[Status.INIT] = Status.INIT


__all__ = ["Idle"]
