"""Great-circle distance and map helpers for launch sites."""

import math

from spacex_launches.data import Coordinate, Launchpad

EARTH_RADIUS_KM = 6_371.0

APPLE_MAPS_URL = "http://maps.apple.com/?daddr={lat},{lon}"
GOOGLE_MAPS_URL = "https://www.google.com/maps/dir/?api=1&destination={lat},{lon}"


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Return the haversine distance in km between two coordinates.

    Inputs are not validated; check ``Coordinate.is_valid`` first.
    """
    lat1, lat2 = math.radians(a.latitude), math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Clamp rounding noise so asin never sees a value above 1
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def format_distance(km: float) -> str:
    """Format a distance for display, e.g. ``"850 m"``, ``"4.2 km"``, ``"1,234 km"``."""
    metres = round(km * 1000)
    if metres < 1000:
        return f"{metres} m"
    if round(km, 1) < 10:
        return f"{km:.1f} km"
    return f"{round(km):,} km"


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    return Coordinate(latitude, longitude).is_valid


def distance_to_launchpad(location: Coordinate, launchpad: Launchpad) -> float | None:
    """Distance from a device location to a launchpad, or None if either point is invalid."""
    target = launchpad.coordinate
    if not (location.is_valid and target.is_valid):
        return None
    return distance_km(location, target)


def directions_url(coordinate: Coordinate, *, platform: str = "android") -> str:
    """Build an external maps directions link to ``coordinate``.

    Args:
        coordinate: Destination.
        platform: ``"ios"`` links to Apple Maps, anything else to Google Maps.

    Raises:
        ValueError: If the coordinate is out of range.
    """
    if not coordinate.is_valid:
        msg = f"Invalid coordinate: {coordinate.latitude}, {coordinate.longitude}"
        raise ValueError(msg)
    template = APPLE_MAPS_URL if platform == "ios" else GOOGLE_MAPS_URL
    return template.format(lat=coordinate.latitude, lon=coordinate.longitude)
