"""Thread-safe in-memory counters for producer invocations.

Counts starts, committed outcomes, discarded settlements and cancellations
for one lifecycle controller, with latency aggregates over committed
settlements.
"""

from __future__ import annotations

from threading import RLock
from typing import Dict, Optional, Any
import time

from .latency_stats_snapshot import LatencyStatsSnapshot
from .controller_counters_snapshot import ControllerCountersSnapshot


class InvocationCounters:
    """Thread-safe in-memory counters for producer invocations."""

    __slots__ = (
        "_controller",
        "_lock",
        "_total",
        "_success",
        "_failure",
        "_discarded",
        "_cancelled",
        "_in_flight",
        "_failure_by_code",
        "_discarded_by_reason",
        # latency aggregates
        "_latency_count",
        "_latency_total",
        "_latency_min",
        "_latency_max",
    )

    def __init__(self, controller: str):
        """Initialize counters for a named controller."""
        self._controller = controller
        self._lock = RLock()
        self._total = 0
        self._success = 0
        self._failure = 0
        self._discarded = 0
        self._cancelled = 0
        self._in_flight = 0
        self._failure_by_code: Dict[str, int] = {}
        self._discarded_by_reason: Dict[str, int] = {}
        self._latency_count = 0
        self._latency_total = 0
        self._latency_min: Optional[int] = None
        self._latency_max: Optional[int] = None

    @staticmethod
    def monotonic_ms() -> int:
        """Return current monotonic time in milliseconds for latency measurement."""
        return int(time.monotonic() * 1000)

    # -------------------------- Record Methods -------------------------- #
    def record_start(self) -> None:
        with self._lock:
            self._total += 1
            self._in_flight += 1

    def record_success(self, latency_ms: int) -> None:
        """Record a committed successful settlement."""
        with self._lock:
            self._success += 1
            self._in_flight = max(0, self._in_flight - 1)
            self._update_latency(latency_ms)

    def record_failure(self, error_code: str, latency_ms: Optional[int] = None) -> None:
        """Record a committed rejection bucketed by ``error_code``."""
        with self._lock:
            self._failure += 1
            self._failure_by_code[error_code] = self._failure_by_code.get(error_code, 0) + 1
            self._in_flight = max(0, self._in_flight - 1)
            if latency_ms is not None:
                self._update_latency(latency_ms)

    def record_discarded(self, reason: str) -> None:
        """Record a settlement that was dropped (``superseded`` or ``torn_down``)."""
        with self._lock:
            self._discarded += 1
            self._discarded_by_reason[reason] = self._discarded_by_reason.get(reason, 0) + 1
            self._in_flight = max(0, self._in_flight - 1)

    def record_cancelled(self) -> None:
        """Record a producer task that was cancelled before settling."""
        with self._lock:
            self._cancelled += 1
            self._in_flight = max(0, self._in_flight - 1)

    def _update_latency(self, latency_ms: int) -> None:
        if latency_ms < 0:
            return
        if self._latency_min is None or latency_ms < self._latency_min:
            self._latency_min = latency_ms
        if self._latency_max is None or latency_ms > self._latency_max:
            self._latency_max = latency_ms
        self._latency_count += 1
        self._latency_total += latency_ms

    # -------------------------- Snapshot API -------------------------- #
    def snapshot(self, reset: bool = False) -> ControllerCountersSnapshot:
        """Return an immutable snapshot of current counters.

        Args:
            reset: If True, zero counters & latency aggregates after creating snapshot
                (except in_flight which is preserved as active invocations).
        """
        with self._lock:
            avg_ms: Optional[float]
            if self._latency_count:
                avg_ms = self._latency_total / self._latency_count
            else:
                avg_ms = None
            latency_snapshot = LatencyStatsSnapshot(
                count=self._latency_count,
                total_ms=self._latency_total,
                min_ms=self._latency_min,
                max_ms=self._latency_max,
                avg_ms=avg_ms,
            )
            snapshot = ControllerCountersSnapshot(
                controller=self._controller,
                total=self._total,
                success=self._success,
                failure=self._failure,
                discarded=self._discarded,
                cancelled=self._cancelled,
                in_flight=self._in_flight,
                failure_by_code=dict(self._failure_by_code),
                discarded_by_reason=dict(self._discarded_by_reason),
                latency=latency_snapshot,
                generated_at_ms=self.monotonic_ms(),
            )
            if reset:
                self._total = 0
                self._success = 0
                self._failure = 0
                self._discarded = 0
                self._cancelled = 0
                self._failure_by_code.clear()
                self._discarded_by_reason.clear()
                self._latency_count = 0
                self._latency_total = 0
                self._latency_min = None
                self._latency_max = None
            return snapshot

    def as_dict(self, reset: bool = False) -> Dict[str, Any]:
        """Convenience wrapper returning snapshot converted to dictionary."""
        return self.snapshot(reset=reset).to_dict()


__all__ = ["InvocationCounters"]
