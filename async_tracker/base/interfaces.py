"""Structural interfaces at the controller boundary.

Re-exports the Protocols for producers and state listeners from
``interfaces_parts``.
"""

from .interfaces_parts.producer import Producer
from .interfaces_parts.state_listener import StateListener

__all__ = ["Producer", "StateListener"]
