"""Public factory for lifecycle controllers.

Resolves settings through the configuration layer (defaults, config file,
environment) and applies explicit arguments on top before building the
controller.
"""
from __future__ import annotations

from typing import Optional, TypeVar

from ...config import load_settings
from ...config.defaults import TRACKER_DEFAULT_NAME_PREFIX
from ..dto import TrackerSettings
from ..interfaces import Producer
from ..state import AsyncState
from .controller import LifecycleController

T = TypeVar("T")


def create(
    producer: Producer[T],
    lazy: Optional[bool] = None,
    initial_state: Optional[AsyncState] = None,
    *,
    name: Optional[str] = None,
    settings: Optional[TrackerSettings] = None,
) -> LifecycleController[T]:
    """Build a controller around ``producer``.

    Parameters
    ----------
    producer:
        ``producer(is_rerun)`` returning an awaitable of the tracked value.
    lazy:
        Start in ``Idle`` and only invoke the producer on ``rerun()``.
        ``None`` defers to configuration (default ``False``).
    initial_state:
        Explicit starting state; overrides the lazy-derived ``Idle``/``Pending``.
    name:
        Controller name for logs and metrics.
    settings:
        Fully resolved settings. When given, configuration lookup is skipped
        and only ``lazy``/``name`` arguments that are not ``None`` are applied.

    Raises
    ------
    TrackerError
        If ``producer`` is not callable or ``initial_state`` is not a state.
    """
    overrides = {k: v for k, v in {"lazy": lazy, "name": name}.items() if v is not None}
    if settings is None:
        settings = load_settings(overrides)
    elif overrides:
        settings = settings.model_copy(update=overrides)
    return LifecycleController(
        producer,
        settings=settings,
        initial=initial_state,
        name_prefix=TRACKER_DEFAULT_NAME_PREFIX,
    )


__all__ = ["create"]
