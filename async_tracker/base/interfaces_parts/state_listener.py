"""StateListener Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..state import AsyncState


@runtime_checkable
class StateListener(Protocol):
    """Observer notified with every state a controller moves into.

    Called synchronously on the controller's event loop thread, in the order
    the states were entered.
    """

    def __call__(self, state: AsyncState) -> None:  # pragma: no cover - interface
        ...


__all__ = ["StateListener"]
