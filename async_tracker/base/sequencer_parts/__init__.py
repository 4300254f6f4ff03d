"""One-class-per-file parts for invocation sequencing."""

from .invocation import Invocation
from .invocation_sequencer import InvocationSequencer

__all__ = ["Invocation", "InvocationSequencer"]
