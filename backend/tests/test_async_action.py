"""AsyncAction state machine tests."""
import asyncio

import pytest

from wallet_console.state.async_action import ActionStatus, AsyncAction
from wallet_console.utils.errors import ActionInFlight, PlatformError


@pytest.mark.asyncio
async def test_success_records_result():
    action = AsyncAction("fetch")
    seen = []
    action.subscribe(lambda state: seen.append(state.status))

    async def op():
        return 42

    state = await action.run(op)

    assert state.status is ActionStatus.SUCCEEDED
    assert state.result == 42
    assert state.error is None
    assert seen == [ActionStatus.PENDING, ActionStatus.SUCCEEDED]


@pytest.mark.asyncio
async def test_failure_uses_error_message():
    action = AsyncAction("transfer", fallback_message="Failed to create transfer")

    async def op():
        raise PlatformError("insufficient funds", status_code=400)

    state = await action.run(op)

    assert state.failed
    assert state.error == "insufficient funds"
    assert state.result is None


@pytest.mark.asyncio
async def test_unexpected_error_falls_back_to_generic_message():
    action = AsyncAction("transfer", fallback_message="Failed to create transfer")

    async def op():
        raise KeyError("transactionLink")

    state = await action.run(op)

    assert state.error == "Failed to create transfer"


@pytest.mark.asyncio
async def test_failure_is_not_retried():
    action = AsyncAction("faucet")
    calls = []

    async def op():
        calls.append(1)
        raise PlatformError("faucet unavailable")

    await action.run(op)
    assert len(calls) == 1
    assert action.state.failed

    await action.run(op)
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_overlapping_run_is_rejected():
    action = AsyncAction("create wallet")
    release = asyncio.Event()
    calls = []

    async def op():
        calls.append(1)
        await release.wait()
        return "first"

    task = asyncio.create_task(action.run(op))
    await asyncio.sleep(0)
    assert action.state.is_pending

    with pytest.raises(ActionInFlight):
        await action.run(op)

    release.set()
    state = await task
    assert state.result == "first"
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_rerun_clears_previous_outcome():
    action = AsyncAction("faucet")
    seen = []

    async def fails():
        raise PlatformError("nope")

    async def works():
        return "ok"

    await action.run(fails)
    action.subscribe(seen.append)
    await action.run(works)

    assert seen[0].status is ActionStatus.PENDING
    assert seen[0].error is None
    assert seen[-1].result == "ok"
    assert seen[-1].error is None


@pytest.mark.asyncio
async def test_late_result_after_dispose_is_discarded():
    action = AsyncAction("load address")
    release = asyncio.Event()
    seen = []
    action.subscribe(lambda state: seen.append(state.status))

    async def op():
        await release.wait()
        return "stale"

    task = asyncio.create_task(action.run(op))
    await asyncio.sleep(0)
    action.dispose()
    release.set()
    await task

    assert action.state.is_pending
    assert action.state.result is None
    assert seen == [ActionStatus.PENDING]

    with pytest.raises(RuntimeError):
        await action.run(op)


@pytest.mark.asyncio
async def test_timeout_fails_the_action():
    action = AsyncAction("hung", timeout=0.01)

    async def op():
        await asyncio.sleep(5)

    state = await action.run(op)

    assert state.failed
    assert state.error == "Request timed out"


@pytest.mark.asyncio
async def test_unsubscribe_stops_notifications():
    action = AsyncAction("fetch")
    seen = []
    unsubscribe = action.subscribe(seen.append)
    unsubscribe()

    async def op():
        return 1

    await action.run(op)
    assert seen == []


@pytest.mark.asyncio
async def test_observer_errors_do_not_break_the_action():
    action = AsyncAction("fetch")

    def broken(state):
        raise ValueError("render failed")

    action.subscribe(broken)

    async def op():
        return 1

    state = await action.run(op)
    assert state.succeeded
