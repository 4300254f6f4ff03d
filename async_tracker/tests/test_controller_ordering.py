"""Ordering tests for overlapping invocations.

Proves that only the temporally latest issued invocation commits, whatever
order the producer futures settle in, and that superseded settlements are
counted as discarded.
"""
from __future__ import annotations

import asyncio

import pytest

from async_tracker import create
from async_tracker.base.state import Failed, Pending, Reloading, Succeeded


async def _drain(rounds: int = 3) -> None:
    """Give settled producer tasks a few loop iterations to run."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.mark.asyncio
async def test_stale_success_settling_last_is_dropped(deferred, recorder):
    ctrl = create(deferred)
    ctrl.subscribe(recorder)
    ctrl.start("a")
    ctrl.on_trigger_changed("b")

    deferred.resolve(1, "fresh")
    await _drain()
    deferred.resolve(0, "stale")
    await ctrl.wait_settled()

    assert ctrl.state == Succeeded(data="fresh")  # nosec B101 - pytest assert in tests
    assert recorder.states == [Pending(), Pending(), Succeeded(data="fresh")]  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_stale_success_settling_first_does_not_commit(deferred):
    ctrl = create(deferred)
    ctrl.start("a")
    ctrl.on_trigger_changed("b")

    deferred.resolve(0, "stale")
    await _drain()
    assert ctrl.state == Pending()  # nosec B101 - stale result never shown

    deferred.resolve(1, "fresh")
    await ctrl.wait_settled()
    assert ctrl.state == Succeeded(data="fresh")  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_stale_failure_does_not_clobber_fresh_success(deferred):
    ctrl = create(deferred)
    ctrl.start()
    deferred.resolve(0, "v1")
    await ctrl.wait_settled()

    ctrl.rerun()
    ctrl.rerun()
    assert ctrl.state == Pending()  # nosec B101 - a rerun while Reloading drops to Pending

    deferred.resolve(2, "v3")
    deferred.reject(1, RuntimeError("late"))
    await ctrl.wait_settled()

    assert ctrl.state == Succeeded(data="v3")  # nosec B101 - pytest assert in tests
    assert deferred.calls == [False, True, True]  # nosec B101 - pytest assert in tests
    snap = ctrl.metrics()
    assert snap.discarded_by_reason == {"superseded": 1}  # nosec B101 - pytest assert in tests
    assert snap.failure == 0 and snap.success == 2  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_rapid_reruns_only_last_commits(deferred):
    ctrl = create(deferred)
    ctrl.start()
    for _ in range(4):
        ctrl.rerun()
    assert ctrl.generation == 4  # nosec B101 - pytest assert in tests

    for idx in reversed(range(len(deferred.futures))):
        deferred.resolve(idx, f"v{idx}")
    await ctrl.wait_settled()

    assert ctrl.state == Succeeded(data="v4")  # nosec B101 - pytest assert in tests
    assert ctrl.metrics().discarded == 4  # nosec B101 - pytest assert in tests


@pytest.mark.asyncio
async def test_older_generation_settling_after_newer_reflects_newer(deferred):
    ctrl = create(deferred)
    ctrl.start()
    ctrl.rerun()

    err = ValueError("g2 failed")
    deferred.reject(1, err)
    await _drain()
    deferred.resolve(0, "g1 ok")
    await ctrl.wait_settled()

    assert ctrl.state == Failed(error=err)  # nosec B101 - pytest assert in tests
