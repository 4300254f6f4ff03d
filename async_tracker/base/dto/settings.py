"""Typed settings object for lifecycle controllers.

Purpose
-------
Capture the knobs that shape a controller's behaviour in one validated
object, so the factory and the configuration layer share a stable contract.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()``.

Failure modes
-------------
- Pure data container. ``pydantic.ValidationError`` is raised for inputs of
  the wrong type (for example a non-boolean string for ``lazy``).
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class TrackerSettings(BaseModel):
    """Controller behaviour settings.

    Attributes
    ----------
    lazy:
        Start in ``Idle`` and only invoke the producer on explicit rerun.
    log_rejections:
        Emit a ``controller.rejected`` error-level log line for every
        committed rejection.
    cancel_on_teardown:
        Cancel outstanding producer tasks at teardown instead of letting them
        run to completion unobserved.
    log_level:
        Level name for the shared base logger, applied when the first
        controller initializes it. ``ASYNC_TRACKER_LOG_LEVEL`` takes precedence.
    json_logs:
        Use the JSON formatter for the shared console handler.
    name:
        Controller name used in logs and metrics. A name is generated when
        omitted.
    """

    model_config = ConfigDict(frozen=True)

    lazy: bool = False
    log_rejections: bool = True
    cancel_on_teardown: bool = False
    json_logs: bool = True
    log_level: str = "INFO"
    name: Optional[str] = None


__all__ = ["TrackerSettings"]
