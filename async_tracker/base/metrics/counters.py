"""In-memory invocation counters (public facade).

Re-exports the counters implementation and its snapshot types from
``counters_parts``. There is no exporter: counters are read through
``snapshot()`` by whatever sink the host application wires up.
"""

from .counters_parts import (
    ControllerCountersSnapshot,
    InvocationCounters,
    LatencyStatsSnapshot,
)

__all__ = [
    "InvocationCounters",
    "ControllerCountersSnapshot",
    "LatencyStatsSnapshot",
]
