"""Factory functions to create components from configuration."""

import httpx

from spacex_launches.cache import LaunchpadCache
from spacex_launches.client import LaunchSource, SpaceXClient
from spacex_launches.config.models import ClientConfig, LaunchTrackerConfig, ListConfig
from spacex_launches.controller import LaunchListController, search_debouncer
from spacex_launches.debounce import Debouncer


def create_client(
    config: ClientConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SpaceXClient:
    """Create a SpaceX client from config."""
    return SpaceXClient(
        base_url=config.base_url,
        search_timeout=config.timeouts.search,
        list_timeout=config.timeouts.list,
        fallback_timeout=config.timeouts.fallback,
        launchpad_timeout=config.timeouts.launchpad,
        health_timeout=config.timeouts.health,
        transport=transport,
    )


def create_controller(config: ListConfig, client: LaunchSource) -> LaunchListController:
    """Create a list controller from config."""
    return LaunchListController(client, page_size=config.page_size)


def create_search_debouncer(config: ListConfig, controller: LaunchListController) -> Debouncer:
    """Create the debounced search-input handler for a controller."""
    return search_debouncer(controller, delay=config.search_debounce_seconds)


def create_from_config(
    config: LaunchTrackerConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[SpaceXClient, LaunchListController, LaunchpadCache, Debouncer]:
    """Create the client, list controller, launchpad cache and search debouncer.

    Args:
        config: Root configuration.
        transport: Optional httpx transport for the client.

    Returns:
        Tuple of (client, controller, launchpad_cache, search_debouncer),
        all sharing one client.
    """
    client = create_client(config.client, transport=transport)
    controller = create_controller(config.list, client)
    debouncer = create_search_debouncer(config.list, controller)
    return (client, controller, LaunchpadCache(client), debouncer)
