"""Configuration module for SpaceX launches."""

from spacex_launches.config.factory import (
    create_client,
    create_controller,
    create_from_config,
    create_search_debouncer,
)
from spacex_launches.config.loader import get_default_config_path, load_config
from spacex_launches.config.models import (
    ClientConfig,
    LaunchTrackerConfig,
    ListConfig,
    TimeoutConfig,
)

__all__ = [
    "ClientConfig",
    "LaunchTrackerConfig",
    "ListConfig",
    "TimeoutConfig",
    "create_client",
    "create_controller",
    "create_from_config",
    "create_search_debouncer",
    "get_default_config_path",
    "load_config",
]
