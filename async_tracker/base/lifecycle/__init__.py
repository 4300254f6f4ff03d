"""Lifecycle controller package: the controller and its factory."""

from .controller import LifecycleController
from .factory import create

__all__ = ["LifecycleController", "create"]
