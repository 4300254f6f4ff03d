"""Activity token implementation.

Exposes the ``ActivityToken`` class shared between a lifecycle controller and
the teardown hook of its owning context. The controller commits under
``guard()``; the teardown hook writes the flag exactly once.
"""

from __future__ import annotations

import contextlib
from threading import RLock
from typing import Iterator

from .state import State


class ActivityToken:
    """A one-shot liveness flag for the owning context.

    False while the context is live, set irreversibly at teardown and never
    reset. A teardown issued from another OS thread waits for any commit
    running under ``guard()`` and every commit that starts afterwards sees
    the token torn down.
    """

    def __init__(self) -> None:
        self._state = State()
        # reentrant: a listener notified inside guard() may tear down
        self._lock = RLock()

    @property
    def torn_down(self) -> bool:  # noqa: D401 - short form
        """Whether the owning context has been torn down."""
        with self._lock:
            return self._state.torn_down

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at teardown time (if any)."""
        return self._state.reason

    @contextlib.contextmanager
    def guard(self) -> Iterator[bool]:
        """Hold the token lock and yield whether the context is still live.

        ``tear_down`` from another thread blocks until the block exits.
        """
        with self._lock:
            yield not self._state.torn_down

    def tear_down(self, reason: str | None = None) -> bool:
        """Mark the context as torn down.

        Returns True on the first call and False on every later call; the
        reason recorded by the first call is kept.
        """
        with self._lock:
            if self._state.torn_down:
                return False
            self._state.torn_down = True
            self._state.reason = reason
            return True

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"ActivityToken(torn_down={self._state.torn_down}, reason={self._state.reason!r})"


__all__ = ["ActivityToken"]
