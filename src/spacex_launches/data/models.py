"""Core data models for SpaceX launches."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class LaunchOutcome(StrEnum):
    """Outcome of a launch, derived from the API's ``upcoming``/``success`` flags."""

    UPCOMING = "upcoming"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    @property
    def is_valid(self) -> bool:
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180


@dataclass(frozen=True)
class Launchpad:
    """A fixed launch site."""

    id: str
    name: str
    locality: str
    region: str
    latitude: float
    longitude: float

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


@dataclass(frozen=True)
class Launch:
    """A single launch record.

    ``launchpad`` holds the v4 launchpad id; resolve it through
    ``LaunchpadCache``.
    """

    id: str
    name: str
    date_utc: datetime
    launchpad: str
    success: bool | None = None
    upcoming: bool = False
    flickr_original: tuple[str, ...] = ()
    patch_large: str | None = None
    patch_small: str | None = None

    @property
    def outcome(self) -> LaunchOutcome:
        if self.upcoming:
            return LaunchOutcome.UPCOMING
        if self.success is True:
            return LaunchOutcome.SUCCEEDED
        if self.success is False:
            return LaunchOutcome.FAILED
        return LaunchOutcome.UNKNOWN

    @property
    def image_url(self) -> str | None:
        """Best image to display: original photo, then large patch, then small patch."""
        if self.flickr_original:
            return self.flickr_original[0]
        return self.patch_large or self.patch_small or None


@dataclass(frozen=True)
class ListPage:
    """One page of launches.

    ``has_next_page`` is a client-side estimate, not a server-provided flag.
    """

    docs: tuple[Launch, ...]
    page: int
    has_next_page: bool
