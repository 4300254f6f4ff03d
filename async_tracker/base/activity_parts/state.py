"""Internal state holder for activity tokens.

Dataclass used by ``ActivityToken`` to track the teardown flag and the
optional reason supplied with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class State:
    """Internal state for activity tokens."""

    torn_down: bool = False
    reason: Optional[str] = None


__all__ = ["State"]
