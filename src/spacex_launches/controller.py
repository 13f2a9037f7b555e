"""Paginated, searchable launch list state."""

import logging
from dataclasses import dataclass, replace

from spacex_launches.client import LaunchSource
from spacex_launches.data import Launch
from spacex_launches.debounce import Debouncer
from spacex_launches.errors import ErrorKind, LaunchClientError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListState:
    """Snapshot of the launch list.

    ``search_term`` is the term actually sent to the API, which may differ
    from whatever text an input field currently shows.
    """

    items: tuple[Launch, ...] = ()
    page: int = 1
    search_term: str = ""
    has_next_page: bool = False
    is_loading: bool = False
    is_refreshing: bool = False
    error: ErrorKind | None = None
    error_message: str | None = None

    @property
    def has_fatal_error(self) -> bool:
        """True when a load failed and there is nothing to show."""
        return self.error is not None and not self.items


class LaunchListController:
    """Owns the accumulated launch list and its pagination cursor.

    Every fetch is tagged with a generation number. A fetch whose generation
    has been superseded by a later call (search, reset, refresh, ...) is
    ignored when it completes, so stale pages never overwrite newer state.

    The controller does not debounce; wrap ``search`` with
    ``search_debouncer`` for keystroke input.

    Args:
        client: Launch source to fetch pages from.
        page_size: Launches per page (default 20).
    """

    def __init__(self, client: LaunchSource, *, page_size: int = 20) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self._client = client
        self._page_size = page_size
        self._state = ListState()
        self._generation = 0

    @property
    def state(self) -> ListState:
        return self._state

    @property
    def page_size(self) -> int:
        return self._page_size

    async def load_initial(self) -> None:
        """Load page 1 for the current search term, replacing the items."""
        await self._load(1, self._state.search_term)

    async def load_next_page(self) -> None:
        """Append the next page. No-op if there is none or a load is in flight."""
        state = self._state
        if not state.has_next_page or state.is_loading or state.is_refreshing:
            logger.debug("Skipping next page load (page=%d)", state.page)
            return
        await self._load(state.page + 1, state.search_term, append=True)

    async def search(self, term: str) -> None:
        """Start a fresh page-1 listing for ``term``."""
        self._state = replace(self._state, search_term=term, items=(), page=1, has_next_page=False)
        await self._load(1, term)

    async def reset(self) -> None:
        """Clear the search term and reload the unfiltered first page."""
        self._state = replace(self._state, search_term="", items=(), page=1, has_next_page=False)
        await self._load(1, "")

    async def refresh(self) -> None:
        """Re-fetch page 1 for the current term, flagged as a refresh."""
        await self._load(1, self._state.search_term, refreshing=True)

    async def _load(
        self, page: int, term: str, *, append: bool = False, refreshing: bool = False
    ) -> None:
        self._generation += 1
        generation = self._generation
        self._state = replace(
            self._state,
            is_loading=not refreshing,
            is_refreshing=refreshing,
            error=None,
            error_message=None,
        )

        try:
            result = await self._client.fetch_launches(page, self._page_size, term)
        except LaunchClientError as exc:
            if generation == self._generation:
                logger.error("Failed to fetch launches: %s", exc)
                self._state = replace(
                    self._state,
                    error=exc.kind,
                    error_message=str(exc) or "Failed to fetch launches",
                )
            return
        finally:
            if generation == self._generation:
                self._state = replace(self._state, is_loading=False, is_refreshing=False)

        if generation != self._generation:
            logger.debug(f"Dropping stale launch page {page} for {term!r}")
            return

        items = self._state.items + result.docs if append else result.docs
        self._state = replace(
            self._state,
            items=items,
            page=result.page,
            has_next_page=result.has_next_page,
        )


def search_debouncer(controller: LaunchListController, *, delay: float = 0.5) -> Debouncer:
    """Build a debouncer that feeds raw input text to the controller.

    Non-blank text (after trimming) triggers ``search``; blank text
    triggers ``reset``.
    """

    async def dispatch(text: str) -> None:
        term = text.strip()
        if term:
            await controller.search(term)
        else:
            await controller.reset()

    return Debouncer(dispatch, delay=delay)
