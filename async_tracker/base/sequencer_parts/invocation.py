"""Invocation record captured when a producer call starts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Invocation:
    """Immutable identity of one producer call.

    Attributes:
        ticket: Strictly increasing number assigned at start; the latest
            issued ticket is the only one allowed to commit.
        generation: Rerun generation active when the call started.
        is_rerun: True iff the call was triggered by an explicit rerun.
    """

    ticket: int
    generation: int
    is_rerun: bool


__all__ = ["Invocation"]
