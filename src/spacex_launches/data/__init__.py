"""Data models for SpaceX launches."""

from spacex_launches.data.models import Coordinate, Launch, LaunchOutcome, Launchpad, ListPage

__all__ = [
    "Coordinate",
    "Launch",
    "LaunchOutcome",
    "Launchpad",
    "ListPage",
]
