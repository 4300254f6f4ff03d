"""Pending state variant (first result outstanding)."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .status import Status


class Pending(BaseModel):
    """An invocation is outstanding and no successful result is held."""

    model_config = ConfigDict(frozen=True)

    status: Literal[Status.PENDING] = Status.PENDING


__all__ = ["Pending"]
