"""Reloading state variant.

A fresh invocation is outstanding while the previous successful payload is
kept for display continuity. Built only from a `Succeeded` state.
"""

from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

from .status import Status
from .succeeded import Succeeded

T = TypeVar("T")


class Reloading(BaseModel, Generic[T]):
    """New invocation outstanding; ``data`` is the last committed payload."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: Literal[Status.RELOADING] = Status.RELOADING
    data: T

    @classmethod
    def from_succeeded(cls, state: Succeeded[T]) -> "Reloading[T]":
        """Carry the payload of ``state`` into a new reloading variant."""
        return cls(data=state.data)


__all__ = ["Reloading"]
