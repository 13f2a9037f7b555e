"""Memoizing launchpad lookup."""

import asyncio
import logging

from spacex_launches.client import LaunchSource
from spacex_launches.data import Launchpad

logger = logging.getLogger(__name__)


class LaunchpadCache:
    """Cache launchpads by id for the lifetime of the instance.

    Concurrent lookups of the same uncached id share a single in-flight
    fetch. Failed fetches are not cached.

    Args:
        client: Launch source used to fetch missing launchpads.
    """

    def __init__(self, client: LaunchSource) -> None:
        self._client = client
        self._entries: dict[str, Launchpad] = {}
        self._pending: dict[str, asyncio.Task[Launchpad]] = {}

    async def get(self, launchpad_id: str) -> Launchpad:
        """Return the launchpad, fetching it on first use.

        Raises:
            LaunchClientError: If the fetch fails.
        """
        cached = self._entries.get(launchpad_id)
        if cached is not None:
            logger.debug("Launchpad cache hit: %s", launchpad_id)
            return cached

        task = self._pending.get(launchpad_id)
        if task is None:
            task = asyncio.ensure_future(self._fetch(launchpad_id))
            self._pending[launchpad_id] = task
        # Shield so one cancelled caller does not cancel the fetch for the others
        return await asyncio.shield(task)

    def peek(self, launchpad_id: str) -> Launchpad | None:
        """Return the cached launchpad without fetching."""
        return self._entries.get(launchpad_id)

    def clear(self) -> None:
        """Drop every entry; fetches still in flight are not stored when they land."""
        self._entries.clear()
        self._pending.clear()

    def __contains__(self, launchpad_id: object) -> bool:
        return launchpad_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    async def _fetch(self, launchpad_id: str) -> Launchpad:
        task = asyncio.current_task()
        try:
            launchpad = await self._client.fetch_launchpad(launchpad_id)
        finally:
            owned = self._pending.get(launchpad_id) is task
            if owned:
                del self._pending[launchpad_id]
        if not owned:
            # Cleared while in flight; hand the result to waiters only
            return launchpad
        return self._entries.setdefault(launchpad_id, launchpad)
