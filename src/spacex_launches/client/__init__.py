from spacex_launches.client.base import LaunchSource
from spacex_launches.client.spacex import (
    DEFAULT_API_BASE,
    SpaceXClient,
    parse_launch,
    parse_launchpad,
)

__all__ = [
    "DEFAULT_API_BASE",
    "LaunchSource",
    "SpaceXClient",
    "parse_launch",
    "parse_launchpad",
]
