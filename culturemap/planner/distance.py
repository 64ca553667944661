"""Great-circle distance between two coordinates."""

from __future__ import annotations

import math

from culturemap.domain.models import GeoPoint

EARTH_RADIUS_M = 6_371_000.0


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(dlon / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_meters(a: GeoPoint, b: GeoPoint) -> float:
    return haversine_meters(a.latitude, a.longitude, b.latitude, b.longitude)
