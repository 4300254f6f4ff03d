"""Generation-tagged invocation sequencer.

Tracks the rerun generation and hands out invocation tickets. Settlements are
admitted only for the latest ticket whose generation is still current, which
keeps commits totally ordered even when an older call settles last.
"""

from __future__ import annotations

from .invocation import Invocation


class InvocationSequencer:
    """Counter pair deciding ``is_rerun`` and which settlement may commit.

    ``generation`` moves only on explicit rerun requests. ``issued`` moves on
    every started invocation, whatever caused it.
    """

    __slots__ = ("_generation", "_seen_generation", "_issued")

    def __init__(self) -> None:
        self._generation = 0
        self._seen_generation = 0
        self._issued = 0

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def issued(self) -> int:
        return self._issued

    def bump(self) -> int:
        """Advance the generation for a rerun request and return it."""
        self._generation += 1
        return self._generation

    def observe(self) -> bool:
        """Return whether the generation changed since the last evaluation.

        Records the current generation as seen, so a second evaluation without
        an intervening ``bump`` reports False.
        """
        is_rerun = self._seen_generation != self._generation
        self._seen_generation = self._generation
        return is_rerun

    def issue(self, is_rerun: bool) -> Invocation:
        """Allocate the next ticket under the current generation."""
        self._issued += 1
        return Invocation(ticket=self._issued, generation=self._generation, is_rerun=is_rerun)

    def is_current(self, invocation: Invocation) -> bool:
        """True iff ``invocation`` is the latest issued one of this generation."""
        return invocation.ticket == self._issued and invocation.generation == self._generation


__all__ = ["InvocationSequencer"]
