"""Unit tests for the invocation sequencer.

Covers rerun detection, ticket allocation and the currency check used to
admit or drop settlements.
"""
from __future__ import annotations

from async_tracker.base.sequencer import Invocation, InvocationSequencer


def test_first_observation_is_not_a_rerun():
    seq = InvocationSequencer()
    assert seq.generation == 0  # nosec B101 - pytest assert in tests
    assert seq.observe() is False  # nosec B101 - pytest assert in tests


def test_bump_is_reported_once_by_observe():
    seq = InvocationSequencer()
    seq.observe()
    assert seq.bump() == 1  # nosec B101 - pytest assert in tests
    assert seq.observe() is True  # nosec B101 - pytest assert in tests
    assert seq.observe() is False  # nosec B101 - pytest assert in tests


def test_issue_allocates_increasing_tickets_with_current_generation():
    seq = InvocationSequencer()
    first = seq.issue(is_rerun=False)
    seq.bump()
    second = seq.issue(is_rerun=True)
    assert first == Invocation(ticket=1, generation=0, is_rerun=False)  # nosec B101 - pytest assert in tests
    assert second == Invocation(ticket=2, generation=1, is_rerun=True)  # nosec B101 - pytest assert in tests
    assert seq.issued == 2  # nosec B101 - pytest assert in tests


def test_only_latest_ticket_is_current():
    seq = InvocationSequencer()
    first = seq.issue(is_rerun=False)
    assert seq.is_current(first)  # nosec B101 - pytest assert in tests
    second = seq.issue(is_rerun=False)
    assert not seq.is_current(first)  # nosec B101 - pytest assert in tests
    assert seq.is_current(second)  # nosec B101 - pytest assert in tests


def test_bump_alone_supersedes_outstanding_invocation():
    seq = InvocationSequencer()
    inv = seq.issue(is_rerun=False)
    seq.bump()
    assert not seq.is_current(inv)  # nosec B101 - pytest assert in tests
