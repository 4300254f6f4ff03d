"""Unit tests for the activity token.

Covers the one-shot teardown flag, reason retention and visibility of a
teardown performed on another thread.
"""
from __future__ import annotations

import threading

from async_tracker.base.activity import ActivityToken


def test_token_starts_live():
    token = ActivityToken()
    assert token.torn_down is False and token.reason is None  # nosec B101 - pytest assert in tests


def test_tear_down_is_one_shot_and_keeps_first_reason():
    token = ActivityToken()
    assert token.tear_down("unmount") is True  # nosec B101 - pytest assert in tests
    assert token.tear_down("ignored") is False  # nosec B101 - pytest assert in tests
    assert token.torn_down is True and token.reason == "unmount"  # nosec B101 - pytest assert in tests


def test_tear_down_from_foreign_thread_is_observed():
    token = ActivityToken()
    results = []
    threads = [threading.Thread(target=lambda: results.append(token.tear_down("t"))) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert token.torn_down is True  # nosec B101 - pytest assert in tests
    assert results.count(True) == 1  # nosec B101 - exactly one writer wins


def test_tear_down_waits_for_guarded_section():
    token = ActivityToken()
    worker = threading.Thread(target=token.tear_down, args=("worker",))
    with token.guard() as live:
        assert live is True  # nosec B101 - pytest assert in tests
        worker.start()
        worker.join(timeout=0.05)
        assert worker.is_alive()  # nosec B101 - blocked until the guard is released
        assert token.torn_down is False  # nosec B101 - pytest assert in tests
    worker.join()
    assert token.torn_down is True and token.reason == "worker"  # nosec B101 - pytest assert in tests
    with token.guard() as live:
        assert live is False  # nosec B101 - pytest assert in tests


def test_guard_is_reentrant_for_teardown_on_same_thread():
    token = ActivityToken()
    with token.guard():
        assert token.tear_down("listener") is True  # nosec B101 - no deadlock
    assert token.torn_down is True  # nosec B101 - pytest assert in tests
