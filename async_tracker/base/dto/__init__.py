"""DTO validation package for the tracker."""

from .settings import TrackerSettings

__all__ = ["TrackerSettings"]
