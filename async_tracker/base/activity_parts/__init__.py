"""One-class-per-file parts for the activity token."""

from .activity_token import ActivityToken
from .state import State

__all__ = ["ActivityToken", "State"]
