"""Controller metrics package.

Exports invocation counters and snapshots.
"""

from .counters import (
    InvocationCounters,
    ControllerCountersSnapshot,
    LatencyStatsSnapshot,
)

__all__ = [
    "InvocationCounters",
    "ControllerCountersSnapshot",
    "LatencyStatsSnapshot",
]
