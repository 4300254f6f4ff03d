"""Interfaces parts package (one Protocol per file)."""

from .producer import Producer
from .state_listener import StateListener

__all__ = ["Producer", "StateListener"]
