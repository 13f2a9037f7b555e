"""Delay-and-coalesce wrapper for async callables."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """Run an async callable only after calls have paused for ``delay`` seconds.

    Each call cancels the previously scheduled invocation if its quiet
    period has not elapsed yet, and schedules a new one with the latest
    arguments. Invocations that already started run to completion. Must be
    called from within a running event loop.

    Args:
        func: Async callable to invoke.
        delay: Quiet period in seconds (default 0.5).
    """

    def __init__(self, func: Callable[..., Awaitable[Any]], *, delay: float = 0.5) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self._func = func
        self._delay = delay
        self._scheduled: asyncio.Task[None] | None = None
        self._running: set[asyncio.Task[None]] = set()

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """Whether an invocation is scheduled or running."""
        return self._scheduled is not None or bool(self._running)

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.cancel()
        self._scheduled = asyncio.get_running_loop().create_task(self._run(args, kwargs))

    def cancel(self) -> None:
        """Drop the scheduled invocation, if it has not started yet."""
        if self._scheduled is not None:
            self._scheduled.cancel()
            self._scheduled = None

    async def wait(self) -> None:
        """Wait until nothing is scheduled or running."""
        while True:
            tasks = [t for t in (self._scheduled, *self._running) if t is not None and not t.done()]
            if not tasks:
                return
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _run(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        await asyncio.sleep(self._delay)

        task = asyncio.current_task()
        if task is None:
            raise RuntimeError("Debounced call must run inside a task")
        if self._scheduled is task:
            self._scheduled = None
        self._running.add(task)
        try:
            await self._func(*args, **kwargs)
        except Exception:
            logger.exception("Debounced call to %r failed", self._func)
        finally:
            self._running.discard(task)
