"""SpaceX REST API client with timeouts and a degraded fallback path."""

import asyncio
import logging
import os
from datetime import UTC, datetime
from typing import Any

import httpx

from spacex_launches.data import Launch, Launchpad, ListPage
from spacex_launches.errors import (
    ApiUnavailableError,
    FetchFailedError,
    HttpStatusError,
    LaunchClientError,
    NotFoundError,
    RequestTimeoutError,
)

DEFAULT_API_BASE = "https://api.spacexdata.com"

SEARCH_PATH = "/v5/launches/query"
LAUNCHES_PATH = "/v5/launches"
LAUNCHPAD_PATH = "/v4/launchpads/{launchpad_id}"

logger = logging.getLogger(__name__)


class SpaceXClient:
    """Fetch launches and launchpads from the SpaceX API.

    Search and plain listing go to their dedicated endpoints first. When
    either fails for any reason the client degrades to the unpaged
    ``/v5/launches`` list and filters and pages it locally. Only when that
    also fails is an error raised, after a health probe decides between
    ``ApiUnavailableError`` and ``FetchFailedError``.

    Args:
        base_url: API host (defaults to SPACEX_API_BASE env var, then the public API).
        search_timeout: Seconds allowed for a search request.
        list_timeout: Seconds allowed for a paginated list request.
        fallback_timeout: Seconds allowed for the unpaged fallback list.
        launchpad_timeout: Seconds allowed for a launchpad lookup.
        health_timeout: Seconds allowed for the health probe.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        search_timeout: float = 15.0,
        list_timeout: float = 10.0,
        fallback_timeout: float = 10.0,
        launchpad_timeout: float = 10.0,
        health_timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (
            base_url or os.environ.get("SPACEX_API_BASE") or DEFAULT_API_BASE
        ).rstrip("/")
        self._search_timeout = search_timeout
        self._list_timeout = list_timeout
        self._fallback_timeout = fallback_timeout
        self._launchpad_timeout = launchpad_timeout
        self._health_timeout = health_timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_launches(self, page: int = 1, limit: int = 20, query: str = "") -> ListPage:
        """Fetch one page of launches, newest first.

        Args:
            page: 1-based page number.
            limit: Page size.
            query: Case-insensitive name filter; empty means no filter.

        Returns:
            The requested page.

        Raises:
            ValueError: If page or limit is below 1.
            ApiUnavailableError: If every path failed and the health probe failed.
            FetchFailedError: If every path failed but the API still answers.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")

        try:
            if query:
                result = await self._search(page, limit, query)
            else:
                result = await self._list(page, limit)
            logger.info(f"Fetched {len(result.docs)} launches (page {page}, query {query!r})")
            return result
        except LaunchClientError as exc:
            logger.warning("Primary launch fetch failed, trying simple list. Error: %s", exc)

        try:
            return await self._fetch_fallback(page, limit, query)
        except LaunchClientError as exc:
            fallback_error = exc
            logger.warning("Fallback launch fetch failed. Error: %s", exc)

        if not await self.check_api_health():
            raise ApiUnavailableError("SpaceX API is unavailable") from fallback_error
        raise FetchFailedError(f"Failed to fetch launches: {fallback_error}") from fallback_error

    async def fetch_launchpad(self, launchpad_id: str) -> Launchpad:
        """Fetch a launchpad by id.

        Raises:
            FetchFailedError: On any failure; the original error is chained.
        """
        path = LAUNCHPAD_PATH.format(launchpad_id=launchpad_id)
        try:
            data = await self._request("GET", path, timeout=self._launchpad_timeout)
            return parse_launchpad(data)
        except LaunchClientError as exc:
            logger.error("Error fetching launchpad %s: %s", launchpad_id, exc)
            raise FetchFailedError(f"Failed to fetch launchpad {launchpad_id}: {exc}") from exc

    async def fetch_launch(self, launch_id: str) -> Launch:
        """Find a single launch in the unpaged launch list.

        Raises:
            NotFoundError: If no launch has this id.
            FetchFailedError: If the list could not be fetched.
        """
        try:
            launches = await self._fetch_all()
        except LaunchClientError as exc:
            raise FetchFailedError(f"Failed to fetch launch details: {exc}") from exc

        for launch in launches:
            if launch.id == launch_id:
                return launch
        raise NotFoundError(f"Launch not found: {launch_id}")

    async def check_api_health(self) -> bool:
        """Return True if the API answers a minimal request. Never raises."""
        try:
            await self._request(
                "GET", LAUNCHES_PATH, params={"limit": 1}, timeout=self._health_timeout
            )
        except LaunchClientError as exc:
            logger.warning(f"API health check failed: {exc}")
            return False
        return True

    async def _search(self, page: int, limit: int, query: str) -> ListPage:
        """Search by name, over-fetching and paging the result set locally.

        The query endpoint cannot combine regex search with server-side
        paging, so ``limit * 2`` results are requested and sliced here.
        """
        body = {
            "query": {"name": {"$regex": query, "$options": "i"}},
            "options": {"limit": limit * 2, "page": 1, "sort": {"date_utc": -1}},
        }
        data = await self._request("POST", SEARCH_PATH, json=body, timeout=self._search_timeout)
        if not isinstance(data, dict) or not isinstance(data.get("docs"), list):
            raise FetchFailedError("Malformed search response: missing 'docs'")

        launches = _parse_launches(data["docs"])
        docs = launches[(page - 1) * limit : page * limit]
        return ListPage(docs=tuple(docs), page=page, has_next_page=len(docs) == limit)

    async def _list(self, page: int, limit: int) -> ListPage:
        params = {"limit": limit, "page": page, "sort": "date_utc"}
        data = await self._request("GET", LAUNCHES_PATH, params=params, timeout=self._list_timeout)
        launches = _parse_launches(data)
        return ListPage(docs=tuple(launches), page=page, has_next_page=len(launches) == limit)

    async def _fetch_fallback(self, page: int, limit: int, query: str) -> ListPage:
        launches = await self._fetch_all()
        if query:
            needle = query.lower()
            launches = [launch for launch in launches if needle in launch.name.lower()]

        end = page * limit
        docs = launches[(page - 1) * limit : end]
        logger.info(f"Fallback returned {len(docs)} of {len(launches)} launches (page {page})")
        return ListPage(docs=tuple(docs), page=page, has_next_page=len(launches) > end)

    async def _fetch_all(self) -> list[Launch]:
        data = await self._request("GET", LAUNCHES_PATH, timeout=self._fallback_timeout)
        return _parse_launches(data)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        timeout: float,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Issue a single request and decode its JSON body.

        Raises:
            RequestTimeoutError: If the request exceeded ``timeout``.
            HttpStatusError: On a non-2xx response.
            FetchFailedError: On transport errors or an undecodable body.
        """
        async with httpx.AsyncClient(
            base_url=self._base_url, timeout=timeout, transport=self._transport
        ) as client:
            try:
                # httpx bounds each connect/read/write; this bounds the whole exchange
                async with asyncio.timeout(timeout):
                    response = await client.request(method, path, params=params, json=json)
            except (TimeoutError, httpx.TimeoutException) as exc:
                raise RequestTimeoutError(f"{method} {path} timed out after {timeout}s") from exc
            except httpx.HTTPError as exc:
                raise FetchFailedError(f"{method} {path} failed: {exc}") from exc

        if not response.is_success:
            raise HttpStatusError(response.status_code, path)
        try:
            return response.json()
        except ValueError as exc:
            raise FetchFailedError(f"{method} {path} returned invalid JSON") from exc


def parse_launch(item: dict[str, Any]) -> Launch:
    """Build a Launch from an API record.

    Raises:
        FetchFailedError: If required fields are missing or malformed.
    """
    try:
        links = item.get("links") or {}
        patch = links.get("patch") or {}
        flickr = links.get("flickr") or {}
        return Launch(
            id=item["id"],
            name=item["name"],
            date_utc=_parse_utc(item["date_utc"]),
            launchpad=item["launchpad"],
            success=item.get("success"),
            upcoming=bool(item.get("upcoming", False)),
            flickr_original=tuple(flickr.get("original") or ()),
            patch_large=patch.get("large"),
            patch_small=patch.get("small"),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise FetchFailedError(f"Malformed launch record: {exc!r}") from exc


def parse_launchpad(item: dict[str, Any]) -> Launchpad:
    """Build a Launchpad from an API record.

    Raises:
        FetchFailedError: If required fields are missing or malformed.
    """
    try:
        return Launchpad(
            id=item["id"],
            name=item["name"],
            locality=item.get("locality") or "",
            region=item.get("region") or "",
            latitude=float(item["latitude"]),
            longitude=float(item["longitude"]),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise FetchFailedError(f"Malformed launchpad record: {exc!r}") from exc


def _parse_launches(data: Any) -> list[Launch]:
    if not isinstance(data, list):
        raise FetchFailedError(f"Expected a list of launches, got {type(data).__name__}")
    return [parse_launch(item) for item in data]


def _parse_utc(value: str) -> datetime:
    """Parse an ISO 8601 timestamp into an aware UTC datetime."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)
