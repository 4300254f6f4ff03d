"""Controller counters snapshot dataclass.

Immutable snapshot of invocation counters, designed for serialization and
logging.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, Any

from .latency_stats_snapshot import LatencyStatsSnapshot


@dataclass(frozen=True)
class ControllerCountersSnapshot:
    """Immutable point-in-time snapshot of controller invocation counters.

    ``success`` and ``failure`` count committed settlements only. Settlements
    that arrived for a superseded invocation or after teardown are counted in
    ``discarded_by_reason`` instead.
    """

    controller: str
    total: int
    success: int
    failure: int
    discarded: int
    cancelled: int
    in_flight: int
    failure_by_code: Dict[str, int]
    discarded_by_reason: Dict[str, int]
    latency: LatencyStatsSnapshot
    generated_at_ms: int

    def to_dict(self) -> Dict[str, Any]:
        """Return a dictionary representation suitable for JSON serialization."""
        return asdict(self)


__all__ = ["ControllerCountersSnapshot"]
