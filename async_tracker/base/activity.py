"""Owning-context liveness primitive (public API facade).

Purpose
-------
Expose ``ActivityToken`` via the canonical ``async_tracker.base.activity``
import path while the implementation lives under ``activity_parts``.

Notes
-----
- A controller checks the token at every commit decision; once set, no
  further state is committed, even for invocations already in flight.
- The in-flight awaitable itself is not aborted by the token; its outcome is
  simply not observed.
"""

from .activity_parts.activity_token import ActivityToken

__all__ = ["ActivityToken"]
