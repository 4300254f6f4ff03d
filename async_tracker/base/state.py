"""Async lifecycle state (public API facade).

Purpose
-------
Expose the `AsyncState` tagged union via the canonical
``async_tracker.base.state`` import path while the concrete variants live
under ``state_parts`` (one class per file).

Notes
-----
- Exactly one variant is active at a time; there is no mixed state such as
  "pending with an error" or "failed with stale data".
- Variants are frozen pydantic models. A transition always builds a fresh,
  fully specified variant rather than patching fields of the previous one.
- ``AsyncState`` is a plain ``Union`` alias for annotations;
  ``STATE_TYPES`` is the matching tuple for ``isinstance`` checks.
"""

from __future__ import annotations

from typing import Any, Union

from .state_parts import Failed, Idle, Pending, Reloading, Status, Succeeded

AsyncState = Union[Idle, Pending, Succeeded[Any], Reloading[Any], Failed]

STATE_TYPES = (Idle, Pending, Succeeded, Reloading, Failed)


def is_async_state(value: object) -> bool:
    """Return True when ``value`` is one of the five lifecycle variants."""
    return isinstance(value, STATE_TYPES)


def initial_state(lazy: bool) -> AsyncState:
    """State a fresh controller starts in: `Idle` when lazy, else `Pending`."""
    return Idle() if lazy else Pending()


__all__ = [
    "AsyncState",
    "STATE_TYPES",
    "Status",
    "Idle",
    "Pending",
    "Succeeded",
    "Reloading",
    "Failed",
    "is_async_state",
    "initial_state",
]
