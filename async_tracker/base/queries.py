"""Pure query helpers over `AsyncState` values.

These are the predicates rendering code branches on. Each is total over the
five variants and free of side effects. Checks go through ``status`` so that
parametrized generic variants (``Succeeded[int]``) match as well.
"""

from __future__ import annotations

from .state import AsyncState, Status

_PENDING_STATUSES = frozenset({Status.INIT, Status.PENDING})
_DATA_STATUSES = frozenset({Status.OK, Status.RELOADING})


def is_pending(state: AsyncState) -> bool:
    """True iff ``state`` is `Idle` or `Pending`."""
    return state.status in _PENDING_STATUSES


def has_data(state: AsyncState) -> bool:
    """True iff ``state`` is `Succeeded` or `Reloading` (``state.data`` is set)."""
    return state.status in _DATA_STATUSES


def has_error(state: AsyncState) -> bool:
    """True iff ``state`` is `Failed` (``state.error`` is set)."""
    return state.status == Status.ERROR


__all__ = ["is_pending", "has_data", "has_error"]
