"""Per-leg travel timeline for an ordered list of itinerary stops."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, Field

from culturemap.domain.models import ItineraryStop, TravelEstimate
from culturemap.planner.routing_provider import RoutingProvider, build_routing_provider
from culturemap.planner.travel_time import format_duration_seconds, format_km
from culturemap.shared.exceptions import DirectionsError

_LOGGER = logging.getLogger("culturemap.itinerary")


class TimelineLeg(BaseModel):
    from_stop_id: str
    to_stop_id: str
    estimate: Optional[TravelEstimate] = None


class RouteSummary(BaseModel):
    distance_meters: float
    duration_seconds: float
    distance_km_text: str
    duration_text: str
    path_points: int = 0


class ItineraryTimeline(BaseModel):
    stops: list[ItineraryStop] = Field(default_factory=list)
    legs: list[TimelineLeg] = Field(default_factory=list)
    route_summary: Optional[RouteSummary] = None
    route_error: Optional[str] = None
    total_minutes: int = 0
    total_meters: float = 0.0


def _route_summary(provider: RoutingProvider, stops: list[ItineraryStop]) -> RouteSummary | None:
    result = provider.get_full_route(stops)
    if result is None:
        return None
    return RouteSummary(
        distance_meters=result.distance_meters,
        duration_seconds=result.duration_seconds,
        distance_km_text=f"{format_km(result.distance_meters)} km",
        duration_text=format_duration_seconds(result.duration_seconds),
        path_points=len(result.path),
    )


def _visit_key(stop: ItineraryStop) -> tuple[int, str, int]:
    # Timed stops first by time; untimed stops last, ordered by visit_order.
    if stop.visit_time:
        return (0, stop.visit_time, 0)
    return (1, "", stop.visit_order)


def sort_stops(stops: list[ItineraryStop]) -> list[ItineraryStop]:
    return sorted(stops, key=_visit_key)


def build_timeline(
    stops: list[ItineraryStop],
    provider: Optional[RoutingProvider] = None,
) -> ItineraryTimeline:
    """Resolve one leg per consecutive stop pair, in visit order.

    Legs whose endpoints lack coordinates keep ``estimate=None``. A failed
    full-route lookup is reported in ``route_error`` and does not affect
    the per-leg estimates.
    """
    provider = provider or build_routing_provider()
    timeline = ItineraryTimeline(stops=sort_stops(stops))

    try:
        timeline.route_summary = _route_summary(provider, timeline.stops)
    except DirectionsError as exc:
        _LOGGER.warning("full route lookup failed: %s", exc.message)
        timeline.route_error = exc.message

    for current, nxt in zip(timeline.stops, timeline.stops[1:]):
        leg_estimate = provider.get_leg(current, nxt)
        timeline.legs.append(
            TimelineLeg(from_stop_id=current.id, to_stop_id=nxt.id, estimate=leg_estimate)
        )
        if leg_estimate is not None:
            timeline.total_minutes += leg_estimate.duration_minutes
            timeline.total_meters += leg_estimate.distance_meters

    return timeline


__all__ = ["ItineraryTimeline", "RouteSummary", "TimelineLeg", "build_timeline", "sort_stops"]
