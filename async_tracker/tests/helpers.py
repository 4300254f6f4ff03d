"""Helper harnesses for lifecycle controller tests.

``DeferredProducer`` hands out one unresolved future per call so tests decide
exactly when and in which order invocations settle. ``StateRecorder`` keeps
every state a controller enters.
"""
from __future__ import annotations

import asyncio
from typing import Any, List

from async_tracker.base.state import AsyncState


class DeferredProducer:
    """Producer whose invocations settle only when the test says so."""

    def __init__(self) -> None:
        self.calls: List[bool] = []
        self.futures: List[asyncio.Future] = []

    def __call__(self, is_rerun: bool) -> asyncio.Future:
        fut = asyncio.get_running_loop().create_future()
        self.calls.append(is_rerun)
        self.futures.append(fut)
        return fut

    def resolve(self, index: int, value: Any) -> None:
        self.futures[index].set_result(value)

    def reject(self, index: int, error: BaseException) -> None:
        self.futures[index].set_exception(error)


class StateRecorder:
    """Listener collecting every state entered, in order."""

    def __init__(self) -> None:
        self.states: List[AsyncState] = []

    def __call__(self, state: AsyncState) -> None:
        self.states.append(state)

    @property
    def statuses(self) -> List[str]:
        return [s.status.value for s in self.states]


def delayed(value: Any, delay: float = 0.01):
    """Producer resolving ``value`` after ``delay`` seconds."""

    async def _producer(is_rerun: bool) -> Any:
        await asyncio.sleep(delay)
        return value

    return _producer


def delayed_failure(error: BaseException, delay: float = 0.01):
    """Producer rejecting with ``error`` after ``delay`` seconds."""

    async def _producer(is_rerun: bool) -> Any:
        await asyncio.sleep(delay)
        raise error

    return _producer
