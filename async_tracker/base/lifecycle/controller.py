"""Lifecycle controller for one slot of asynchronous work.

The controller owns the current `AsyncState`, decides when to call the
producer, tags every call with an `Invocation` from its sequencer and commits
a settlement only when the invocation is still the latest one issued and the
owning context has not been torn down. Stale and post-teardown settlements
are dropped.

All state changes happen on the event loop thread that calls ``start``,
``on_trigger_changed`` and ``rerun``. Ordering is enforced by the sequencer
alone. ``teardown`` may come from any thread; state writes run under the
activity token's guard so none lands after a teardown has returned.

Producer rejections are stored as `Failed` and never raised out of the
controller. The only exceptions it raises are `TrackerError` for misuse
(bad construction arguments, evaluation outside a running event loop).
"""
from __future__ import annotations

import asyncio
import inspect
import itertools
import logging
from typing import Any, Awaitable, Callable, Generic, List, Set, TypeVar

from ..activity import ActivityToken
from ..dto import TrackerSettings
from ..errors import ErrorCode, TrackerError, classify_rejection
from ..interfaces import Producer, StateListener
from ..logging import LogContext, get_logger, log_event
from ..metrics import ControllerCountersSnapshot, InvocationCounters
from ..sequencer import Invocation, InvocationSequencer
from ..state import AsyncState, Failed, Pending, Reloading, Succeeded, initial_state, is_async_state

T = TypeVar("T")

LOGGER_NAME = "async_tracker.controller"

_UNSET: Any = object()
_NAME_COUNTER = itertools.count(1)


class LifecycleController(Generic[T]):
    """Tracks one producer through ``Idle/Pending/Succeeded/Reloading/Failed``.

    Responsibilities:
      * Start invocations on activation, trigger changes and reruns.
      * Commit only the latest invocation's outcome while the context is live.
      * Notify listeners of every state entered, in order.
      * Keep invocation counters for diagnostics.
    """

    def __init__(
        self,
        producer: Producer[T],
        *,
        settings: TrackerSettings | None = None,
        initial: AsyncState | None = None,
        name_prefix: str = "controller",
    ) -> None:
        settings = settings or TrackerSettings()
        self._name = settings.name or f"{name_prefix}-{next(_NAME_COUNTER)}"
        if not isinstance(producer, Producer):
            raise TrackerError(ErrorCode.VALIDATION, "producer must be callable", controller=self._name)
        if initial is not None and not is_async_state(initial):
            raise TrackerError(
                ErrorCode.VALIDATION,
                f"initial state must be an AsyncState variant, got {type(initial).__name__}",
                controller=self._name,
            )
        self._producer = producer
        self._settings = settings
        self._state: AsyncState = initial if initial is not None else initial_state(settings.lazy)
        self._sequencer = InvocationSequencer()
        self._token = ActivityToken()
        self._counters = InvocationCounters(self._name)
        self._listeners: List[StateListener] = []
        self._tasks: Set[asyncio.Task[None]] = set()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._trigger: Any = _UNSET
        self._logger = get_logger(LOGGER_NAME, json_mode=settings.json_logs, level=settings.log_level)

    # Read-only views ------------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def lazy(self) -> bool:
        return self._settings.lazy

    @property
    def state(self) -> AsyncState:
        """Snapshot of the current state (variants are immutable)."""
        return self._state

    def current_state(self) -> AsyncState:
        return self._state

    @property
    def generation(self) -> int:
        """Number of rerun requests seen so far."""
        return self._sequencer.generation

    @property
    def is_torn_down(self) -> bool:
        return self._token.torn_down

    @property
    def activity_token(self) -> ActivityToken:
        """Token shared with the owning context's teardown hook."""
        return self._token

    @property
    def in_flight(self) -> int:
        """Number of producer tasks that have not finished yet."""
        return len(self._tasks)

    def metrics(self, reset: bool = False) -> ControllerCountersSnapshot:
        return self._counters.snapshot(reset=reset)

    # Observation ----------------------------------------------------------
    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for every state entered; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # Binding-layer API ----------------------------------------------------
    def start(self, trigger: Any = None) -> None:
        """First activation of the owning context.

        Later calls behave like ``on_trigger_changed``.
        """
        if self._trigger is not _UNSET:
            self.on_trigger_changed(trigger)
            return
        loop = self._running_loop()
        self._trigger = trigger
        self._evaluate(loop)

    def on_trigger_changed(self, trigger: Any) -> None:
        """Re-evaluate after the binding layer's dependency set changed.

        A trigger equal to the previous one is ignored, so re-rendering
        without a dependency change never calls the producer.
        """
        if self._trigger is _UNSET:
            self.start(trigger)
            return
        if trigger == self._trigger:
            return
        loop = self._running_loop()
        self._trigger = trigger
        self._evaluate(loop)

    def rerun(self) -> None:
        """Request a fresh invocation, also in lazy mode.

        Each call supersedes every invocation issued before it; when called
        repeatedly only the last one can commit.
        """
        if self._token.torn_down:
            log_event(self._logger, "controller.rerun_ignored", self._ctx(), level=logging.DEBUG, reason="torn_down")
            return
        loop = self._running_loop()
        self._sequencer.bump()
        if self._trigger is _UNSET:
            # a rerun counts as activation; a later start() with no trigger is a no-op
            self._trigger = None
        self._evaluate(loop, force_rerun=True)

    def teardown(self, reason: str | None = None) -> None:
        """Mark the owning context as gone; no commit happens afterwards.

        Idempotent and callable from any thread. When called off the event
        loop thread, listener release and task cancellation are scheduled on
        the loop. Outstanding producer tasks keep running unless
        ``cancel_on_teardown`` is set, in which case they are cancelled.
        """
        if not self._token.tear_down(reason):
            return
        log_event(
            self._logger,
            "controller.teardown",
            self._ctx(),
            level=logging.DEBUG,
            reason=reason,
            in_flight=len(self._tasks),
            status=self._state.status.value,
        )
        loop = self._loop
        if loop is None or loop.is_closed() or self._on_loop_thread(loop):
            self._release()
        else:
            loop.call_soon_threadsafe(self._release)

    async def wait_settled(self) -> AsyncState:
        """Wait until no producer task is outstanding and return the state.

        Never raises producer errors; those are already reflected in the
        committed state (or discarded).
        """
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
        return self._state

    # Internals ------------------------------------------------------------
    def _ctx(self, invocation: Invocation | None = None) -> LogContext:
        if invocation is None:
            return LogContext(controller=self._name, generation=self._sequencer.generation)
        return LogContext(
            controller=self._name,
            ticket=invocation.ticket,
            generation=invocation.generation,
            is_rerun=invocation.is_rerun,
        )

    def _running_loop(self) -> asyncio.AbstractEventLoop:
        try:
            return asyncio.get_running_loop()
        except RuntimeError as exc:
            raise TrackerError(
                ErrorCode.VALIDATION,
                "controller must be driven from a running event loop",
                controller=self._name,
                raw=exc,
            ) from exc

    @staticmethod
    def _on_loop_thread(loop: asyncio.AbstractEventLoop) -> bool:
        try:
            return asyncio.get_running_loop() is loop
        except RuntimeError:
            return False

    def _release(self) -> None:
        """Loop-side part of teardown."""
        self._listeners.clear()
        if self._settings.cancel_on_teardown:
            for task in list(self._tasks):
                task.cancel()

    def _evaluate(self, loop: asyncio.AbstractEventLoop, force_rerun: bool = False) -> None:
        self._loop = loop
        with self._token.guard() as live:
            if not live:
                return

            is_rerun = self._sequencer.observe() or force_rerun
            if self._settings.lazy and not is_rerun:
                return

            if isinstance(self._state, Succeeded):
                self._enter(Reloading.from_succeeded(self._state))
            else:
                self._enter(Pending())

            invocation = self._sequencer.issue(is_rerun)
        self._counters.record_start()
        started_ms = self._counters.monotonic_ms()
        log_event(self._logger, "controller.start", self._ctx(invocation), level=logging.DEBUG)

        awaitable = self._call_producer(loop, invocation)
        task = loop.create_task(self._run(invocation, awaitable, started_ms))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _call_producer(self, loop: asyncio.AbstractEventLoop, invocation: Invocation) -> Awaitable[T]:
        """Call the producer; synchronous failures become an already-failed future."""
        try:
            result = self._producer(invocation.is_rerun)
            if not inspect.isawaitable(result):
                raise TrackerError(
                    ErrorCode.VALIDATION,
                    f"producer returned {type(result).__name__}, expected an awaitable",
                    controller=self._name,
                )
            return result
        except Exception as exc:  # noqa: BLE001 - stored as Failed, never propagated
            failed: asyncio.Future[T] = loop.create_future()
            failed.set_exception(exc)
            return failed

    async def _run(self, invocation: Invocation, awaitable: Awaitable[T], started_ms: int) -> None:
        try:
            value = await awaitable
        except asyncio.CancelledError as exc:
            if not self._token.torn_down:
                # cancelled by its owner while live: a rejection like any other
                self._settle(invocation, Failed(error=exc), started_ms)
                return
            self._counters.record_cancelled()
            log_event(self._logger, "controller.cancelled", self._ctx(invocation), level=logging.DEBUG)
            raise
        except Exception as exc:  # noqa: BLE001 - rejection is data
            self._settle(invocation, Failed(error=exc), started_ms)
        else:
            self._settle(invocation, Succeeded(data=value), started_ms)

    def _settle(self, invocation: Invocation, outcome: AsyncState, started_ms: int) -> None:
        """Commit ``outcome`` if ``invocation`` is still current and the context is live.

        The liveness check and the state write happen under the token guard,
        so a concurrent teardown lands either before the check or after the
        commit.
        """
        with self._token.guard() as live:
            if not live:
                self._discard(invocation, "torn_down")
                return
            if not self._sequencer.is_current(invocation):
                self._discard(invocation, "superseded")
                return

            latency_ms = self._counters.monotonic_ms() - started_ms
            if isinstance(outcome, Failed):
                code = classify_rejection(outcome.error)
                self._counters.record_failure(code.value, latency_ms=latency_ms)
                if self._settings.log_rejections:
                    log_event(
                        self._logger,
                        "controller.rejected",
                        self._ctx(invocation),
                        level=logging.ERROR,
                        error_code=code.value,
                        error=repr(outcome.error),
                    )
            else:
                self._counters.record_success(latency_ms)
            log_event(
                self._logger,
                "controller.commit",
                self._ctx(invocation),
                level=logging.DEBUG,
                status=outcome.status.value,
                latency_ms=latency_ms,
            )
            self._enter(outcome)

    def _discard(self, invocation: Invocation, reason: str) -> None:
        self._counters.record_discarded(reason)
        log_event(self._logger, "controller.discard", self._ctx(invocation), level=logging.DEBUG, reason=reason)

    def _enter(self, state: AsyncState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as exc:  # noqa: BLE001 - a broken observer must not break the controller
                log_event(
                    self._logger,
                    "controller.listener_error",
                    LogContext(controller=self._name),
                    level=logging.ERROR,
                    error=repr(exc),
                )

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"LifecycleController(name={self._name!r}, status={self._state.status.value}, "
            f"generation={self._sequencer.generation}, torn_down={self._token.torn_down})"
        )


__all__ = ["LifecycleController", "LOGGER_NAME"]
