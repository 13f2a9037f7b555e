"""Tests for Debouncer."""

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from spacex_launches.debounce import Debouncer


async def test_coalesces_rapid_calls() -> None:
    func = AsyncMock()
    debounced = Debouncer(func, delay=0.01)

    debounced("a")
    debounced("b")
    debounced("c", flag=True)
    assert debounced.pending is True
    await debounced.wait()

    func.assert_awaited_once_with("c", flag=True)
    assert debounced.pending is False


async def test_spaced_calls_all_run() -> None:
    func = AsyncMock()
    debounced = Debouncer(func, delay=0)

    debounced("a")
    await debounced.wait()
    debounced("b")
    await debounced.wait()

    assert [call.args for call in func.await_args_list] == [("a",), ("b",)]


async def test_cancel_drops_scheduled_call() -> None:
    func = AsyncMock()
    debounced = Debouncer(func, delay=0.01)

    debounced("a")
    debounced.cancel()
    await asyncio.sleep(0.03)

    func.assert_not_awaited()
    assert debounced.pending is False


async def test_started_call_is_not_cancelled() -> None:
    started = asyncio.Event()
    release = asyncio.Event()
    seen: list[str] = []

    async def func(value: str) -> None:
        started.set()
        await release.wait()
        seen.append(value)

    debounced = Debouncer(func, delay=0)
    debounced("first")
    await started.wait()
    debounced("second")
    release.set()
    await debounced.wait()

    assert seen == ["first", "second"]


async def test_wait_without_calls_returns() -> None:
    await Debouncer(AsyncMock()).wait()


async def test_errors_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    func = AsyncMock(side_effect=RuntimeError("boom"))
    debounced = Debouncer(func, delay=0)

    with caplog.at_level(logging.ERROR, logger="spacex_launches.debounce"):
        debounced()
        await debounced.wait()

    assert "Debounced call" in caplog.text


def test_rejects_negative_delay() -> None:
    with pytest.raises(ValueError):
        Debouncer(AsyncMock(), delay=-1)


async def test_run_outside_a_task_raises_runtime_error() -> None:
    func = AsyncMock()
    coro = Debouncer(func, delay=0)._run((), {})
    coro.send(None)

    loop = asyncio.get_running_loop()
    outcome: asyncio.Future[Exception] = loop.create_future()

    def resume() -> None:
        # Plain loop callbacks have no current task
        try:
            coro.send(None)
        except Exception as exc:
            outcome.set_result(exc)

    loop.call_soon(resume)
    error = await outcome

    assert isinstance(error, RuntimeError)
    func.assert_not_awaited()
