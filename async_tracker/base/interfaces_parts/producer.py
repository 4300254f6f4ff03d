"""Producer Protocol (single-class module).

Structural type of the caller-supplied asynchronous operation a controller
sequences. The controller never inspects what the producer does.
"""

from __future__ import annotations

from typing import Awaitable, Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Producer(Protocol[T_co]):
    """Callable returning an awaitable of the tracked value.

    ``is_rerun`` is True iff the call was triggered by an explicit rerun
    rather than by initial activation or a trigger change.
    """

    def __call__(self, is_rerun: bool) -> Awaitable[T_co]:  # pragma: no cover - interface
        ...


__all__ = ["Producer"]
