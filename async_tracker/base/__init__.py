"""
Tracker Base Package

Exports the state model, query helpers, sequencing and liveness primitives,
error taxonomy and the lifecycle controller.

Layering:
- State & queries: pure values and predicates, no dependencies on the rest
- Primitives: activity token, invocation sequencer, counters
- Controller: wires the primitives together around a producer
"""

from .state import (
    AsyncState,
    Failed,
    Idle,
    Pending,
    Reloading,
    Status,
    Succeeded,
    initial_state,
    is_async_state,
)
from .queries import has_data, has_error, is_pending
from .activity import ActivityToken
from .sequencer import Invocation, InvocationSequencer
from .errors import ErrorCode, TrackerError, classify_rejection
from .interfaces import Producer, StateListener
from .dto import TrackerSettings
from .metrics import ControllerCountersSnapshot, InvocationCounters
from .lifecycle import LifecycleController, create

__all__ = [
    # State
    "AsyncState",
    "Status",
    "Idle",
    "Pending",
    "Succeeded",
    "Reloading",
    "Failed",
    "initial_state",
    "is_async_state",
    # Queries
    "is_pending",
    "has_data",
    "has_error",
    # Primitives
    "ActivityToken",
    "Invocation",
    "InvocationSequencer",
    "InvocationCounters",
    "ControllerCountersSnapshot",
    # Errors
    "ErrorCode",
    "TrackerError",
    "classify_rejection",
    # Interfaces & settings
    "Producer",
    "StateListener",
    "TrackerSettings",
    # Controller
    "LifecycleController",
    "create",
]
