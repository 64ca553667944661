"""Distance, travel-time and routing logic."""

from culturemap.planner.distance import EARTH_RADIUS_M, distance_meters, haversine_meters
from culturemap.planner.travel_time import (
    estimate,
    estimate_drive,
    format_distance,
    format_duration_seconds,
    format_minutes,
)

__all__ = [
    "EARTH_RADIUS_M",
    "distance_meters",
    "estimate",
    "estimate_drive",
    "format_distance",
    "format_duration_seconds",
    "format_minutes",
    "haversine_meters",
]
