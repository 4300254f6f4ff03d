"""Invocation sequencing (public API facade).

Re-exports ``Invocation`` and ``InvocationSequencer`` from
``sequencer_parts`` under a stable import path.
"""

from .sequencer_parts.invocation import Invocation
from .sequencer_parts.invocation_sequencer import InvocationSequencer

__all__ = ["Invocation", "InvocationSequencer"]
