"""One-class-per-file parts for controller invocation counters."""

from .latency_stats_snapshot import LatencyStatsSnapshot
from .controller_counters_snapshot import ControllerCountersSnapshot
from .invocation_counters import InvocationCounters

__all__ = [
    "LatencyStatsSnapshot",
    "ControllerCountersSnapshot",
    "InvocationCounters",
]
