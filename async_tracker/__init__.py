"""async_tracker package

Lifecycle tracking for a single slot of asynchronous work.

Purpose:
    Wrap a caller-supplied producer ``producer(is_rerun) -> Awaitable[T]``,
    expose its progress as one immutable state value, and commit settlements
    only for the latest invocation while the owning context is live.

Public API (re-exported):
    - Version: ``__version__``
    - Factory: :func:`create`
    - Controller: :class:`LifecycleController`
    - States: ``AsyncState``, :class:`Status`, :class:`Idle`, :class:`Pending`,
      :class:`Succeeded`, :class:`Reloading`, :class:`Failed`
    - Queries: :func:`is_pending`, :func:`has_data`, :func:`has_error`
    - Errors: :class:`TrackerError`, :class:`ErrorCode`
    - Settings: :class:`TrackerSettings`

Example::

    controller = create(lambda is_rerun: fetch_profile(user_id))
    controller.start(user_id)
    ...
    if has_data(controller.state):
        render(controller.state.data)
"""

from .base import (
    AsyncState,
    ErrorCode,
    Failed,
    Idle,
    LifecycleController,
    Pending,
    Reloading,
    Status,
    Succeeded,
    TrackerError,
    TrackerSettings,
    create,
    has_data,
    has_error,
    is_pending,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "create",
    "LifecycleController",
    "AsyncState",
    "Status",
    "Idle",
    "Pending",
    "Succeeded",
    "Reloading",
    "Failed",
    "is_pending",
    "has_data",
    "has_error",
    "TrackerError",
    "ErrorCode",
    "TrackerSettings",
]
