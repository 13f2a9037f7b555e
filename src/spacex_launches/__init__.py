"""SpaceX launches: resilient launch list, search and launchpad lookup."""

from spacex_launches.cache import LaunchpadCache
from spacex_launches.client import DEFAULT_API_BASE, LaunchSource, SpaceXClient
from spacex_launches.config import LaunchTrackerConfig, create_from_config, load_config
from spacex_launches.controller import LaunchListController, ListState, search_debouncer
from spacex_launches.data import Coordinate, Launch, LaunchOutcome, Launchpad, ListPage
from spacex_launches.debounce import Debouncer
from spacex_launches.errors import (
    ApiUnavailableError,
    ErrorKind,
    FetchFailedError,
    HttpStatusError,
    LaunchClientError,
    NotFoundError,
    RequestTimeoutError,
)
from spacex_launches.geo import (
    directions_url,
    distance_km,
    distance_to_launchpad,
    format_distance,
    is_valid_coordinate,
)

__all__ = [
    # Models
    "Coordinate",
    "Launch",
    "LaunchOutcome",
    "Launchpad",
    "ListPage",
    "ListState",
    # Errors
    "ApiUnavailableError",
    "ErrorKind",
    "FetchFailedError",
    "HttpStatusError",
    "LaunchClientError",
    "NotFoundError",
    "RequestTimeoutError",
    # Protocols
    "LaunchSource",
    # Clients
    "DEFAULT_API_BASE",
    "SpaceXClient",
    # State
    "Debouncer",
    "LaunchListController",
    "LaunchpadCache",
    "search_debouncer",
    # Geo
    "directions_url",
    "distance_km",
    "distance_to_launchpad",
    "format_distance",
    "is_valid_coordinate",
    # Config
    "LaunchTrackerConfig",
    "create_from_config",
    "load_config",
]
