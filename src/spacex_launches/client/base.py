"""Launch source protocol."""

from typing import Protocol

from spacex_launches.data import Launch, Launchpad, ListPage


class LaunchSource(Protocol):
    """Interface for fetching launch data."""

    async def fetch_launches(self, page: int = 1, limit: int = 20, query: str = "") -> ListPage:
        """Fetch one page of launches, newest first.

        Args:
            page: 1-based page number.
            limit: Page size.
            query: Case-insensitive name filter; empty means no filter.

        Returns:
            The requested page.
        """
        ...

    async def fetch_launchpad(self, launchpad_id: str) -> Launchpad:
        """Fetch a single launchpad by id."""
        ...

    async def fetch_launch(self, launch_id: str) -> Launch:
        """Fetch a single launch by id."""
        ...

    async def check_api_health(self) -> bool:
        """Return True if the API answers a minimal request."""
        ...
