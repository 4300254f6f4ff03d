"""Succeeded state variant.

Holds the resolved value of the most recently committed invocation. The model
is generic over the payload type; unparametrized use accepts any value.
"""

from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

from .status import Status

T = TypeVar("T")


class Succeeded(BaseModel, Generic[T]):
    """Most recent committed invocation resolved with ``data``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: Literal[Status.OK] = Status.OK
    data: T


__all__ = ["Succeeded"]
