"""Deterministic walk/drive travel-time estimation between itinerary stops.

Distances come from the haversine calculator; durations assume a 4 km/h
walking pace and 30 km/h urban driving, with minimum floors that cover
signal waits and departure/arrival overhead.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from culturemap.domain.enums import TravelMode
from culturemap.domain.models import GeoPoint, TravelEstimate
from culturemap.planner.distance import distance_meters

WALK_THRESHOLD_M = 1500.0
WALK_SPEED_KMH = 4.0
DRIVE_SPEED_KMH = 30.0
WALK_MIN_MINUTES = 3

# (max distance km, minimum minutes); the last tier has no upper bound.
DRIVE_FLOORS: tuple[tuple[float, int], ...] = (
    (2.0, 5),
    (5.0, 8),
    (math.inf, 10),
)

WALK_LABEL = "도보 이동 (추천)"
DRIVE_LABEL = "자동차 이동 (추천)"
ROUTED_DRIVE_LABEL = "자동차 이동"
UNDER_ONE_MINUTE = "1분 미만"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_km(meters: float) -> str:
    """Kilometres with one decimal, halves rounded up."""
    km = Decimal(str(meters / 1000)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return str(km)


def choose_mode(meters: float) -> TravelMode:
    return TravelMode.WALK if meters <= WALK_THRESHOLD_M else TravelMode.DRIVE


def walk_minutes(meters: float) -> int:
    km = meters / 1000
    return max(_round_half_up(km / WALK_SPEED_KMH * 60), WALK_MIN_MINUTES)


def drive_minutes(meters: float) -> int:
    km = meters / 1000
    minutes = _round_half_up(km / DRIVE_SPEED_KMH * 60)
    for max_km, floor in DRIVE_FLOORS:
        if km <= max_km:
            return max(minutes, floor)
    return minutes


def format_distance(meters: float) -> str:
    if meters < 1000:
        return f"{_round_half_up(meters)}m"
    return f"{format_km(meters)}km"


def format_minutes(minutes: float) -> str:
    if minutes < 1:
        return UNDER_ONE_MINUTE
    return f"약 {minutes}분"


def format_duration_seconds(seconds: Optional[float]) -> str:
    """Render a routed duration, switching to hours past 60 minutes."""
    if not seconds:
        return ""
    minutes = _round_half_up(seconds / 60)
    if minutes < 1:
        return UNDER_ONE_MINUTE
    if minutes < 60:
        return f"약 {minutes}분"
    hours, remain = divmod(minutes, 60)
    if remain == 0:
        return f"약 {hours}시간"
    return f"약 {hours}시간 {remain}분"


def _build(meters: float, mode: TravelMode, minutes: int, label: str) -> TravelEstimate:
    return TravelEstimate(
        distance_meters=meters,
        transport_mode=mode,
        duration_minutes=minutes,
        label=label,
        distance_text=format_distance(meters),
        duration_text=format_minutes(minutes),
        source="estimate",
    )


def estimate(a: GeoPoint | None, b: GeoPoint | None) -> TravelEstimate | None:
    """Classify the leg as walk or drive and estimate its duration.

    Returns None when either point is missing; callers render a
    "no distance information" fallback in that case.
    """
    if a is None or b is None:
        return None
    meters = distance_meters(a, b)
    mode = choose_mode(meters)
    if mode is TravelMode.WALK:
        return _build(meters, mode, walk_minutes(meters), WALK_LABEL)
    return _build(meters, mode, drive_minutes(meters), DRIVE_LABEL)


def estimate_drive(a: GeoPoint | None, b: GeoPoint | None) -> TravelEstimate | None:
    """Drive-only estimate, used when no road-routing result is available."""
    if a is None or b is None:
        return None
    meters = distance_meters(a, b)
    return _build(meters, TravelMode.DRIVE, drive_minutes(meters), ROUTED_DRIVE_LABEL)


def from_directions(distance_m: float, duration_s: float) -> TravelEstimate:
    return TravelEstimate(
        distance_meters=distance_m,
        transport_mode=TravelMode.DRIVE,
        duration_minutes=_round_half_up(duration_s / 60),
        label=ROUTED_DRIVE_LABEL,
        distance_text=format_distance(distance_m),
        duration_text=format_duration_seconds(duration_s),
        source="directions",
    )
