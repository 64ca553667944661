"""Routing provider abstraction with transparent fallback diagnostics."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from culturemap.adapters.directions import (
    DirectionsClient,
    DirectionsRequest,
    DirectionsResult,
    get_directions_client,
)
from culturemap.config.settings import resolve_route_provider_default
from culturemap.domain.models import ItineraryStop, LatLng, TravelEstimate
from culturemap.infrastructure.logging import get_logger
from culturemap.planner.travel_time import estimate, estimate_drive, from_directions
from culturemap.shared.exceptions import DirectionsError, KeyMissingError

_ESTIMATE_SOURCE = "estimate"
_DIRECTIONS_SOURCE = "directions"
_FALLBACK_SOURCE = "fallback_estimate"
_MAX_DIAGNOSTIC_EVENTS = 50
_LOGGER = logging.getLogger("culturemap.routing")


class RoutingProvider(Protocol):
    def get_leg(self, origin: ItineraryStop, destination: ItineraryStop) -> Optional[TravelEstimate]:
        """Return the travel estimate between two stops, or None without coordinates."""

    def get_full_route(self, stops: list[ItineraryStop]) -> Optional[DirectionsResult]:
        """Return one route through all stops, or None when unsupported."""

    def get_fallback_count(self) -> int:
        """Return fallback count."""

    def get_diagnostics(self) -> dict[str, Any]:
        """Return routing diagnostics for observability."""


class EstimateRoutingProvider:
    """Straight-line walk/drive classification; never touches the network."""

    def get_leg(self, origin: ItineraryStop, destination: ItineraryStop) -> Optional[TravelEstimate]:
        return estimate(origin.point, destination.point)

    def get_full_route(self, stops: list[ItineraryStop]) -> Optional[DirectionsResult]:
        _ = stops
        return None

    def get_fallback_count(self) -> int:
        return 0

    def get_diagnostics(self) -> dict[str, Any]:
        return {
            "routing_source": _ESTIMATE_SOURCE,
            "fallback_count": 0,
            "events": [],
        }


def _segment_request(origin: ItineraryStop, destination: ItineraryStop) -> DirectionsRequest:
    return DirectionsRequest(
        origin_lat=origin.latitude,
        origin_lng=origin.longitude,
        dest_lat=destination.latitude,
        dest_lng=destination.longitude,
    )


class DirectionsRoutingProvider:
    """Road routing per leg, falling back to a drive-only straight-line estimate."""

    def __init__(self, client: Optional[DirectionsClient] = None) -> None:
        self._client = client or get_directions_client()
        self._fallback_count = 0
        self._diagnostic_events: list[dict[str, Any]] = []

    def _record_fallback(
        self,
        *,
        origin: ItineraryStop,
        destination: ItineraryStop,
        error: Exception,
    ) -> None:
        self._fallback_count += 1
        event = {
            "routing_source": _FALLBACK_SOURCE,
            "origin_id": origin.id,
            "destination_id": destination.id,
            "error_type": type(error).__name__,
            "error_message": str(error),
        }
        self._diagnostic_events.append(event)
        if len(self._diagnostic_events) > _MAX_DIAGNOSTIC_EVENTS:
            self._diagnostic_events = self._diagnostic_events[-_MAX_DIAGNOSTIC_EVENTS:]
        _LOGGER.warning(
            "routing fallback to estimate: %s -> %s error=%s",
            origin.id,
            destination.id,
            type(error).__name__,
        )
        get_logger().fallback(origin.id, destination.id, type(error).__name__)

    def get_leg(self, origin: ItineraryStop, destination: ItineraryStop) -> Optional[TravelEstimate]:
        if origin.point is None or destination.point is None:
            return None
        try:
            result = self._client.get_car_directions(_segment_request(origin, destination))
        except DirectionsError as exc:
            self._record_fallback(origin=origin, destination=destination, error=exc)
            return estimate_drive(origin.point, destination.point)
        return from_directions(result.distance_meters, result.duration_seconds)

    def get_full_route(self, stops: list[ItineraryStop]) -> Optional[DirectionsResult]:
        located = [stop for stop in stops if stop.point is not None]
        if len(located) < 2:
            return None
        first, last = located[0], located[-1]
        request = DirectionsRequest(
            origin_lat=first.latitude,
            origin_lng=first.longitude,
            dest_lat=last.latitude,
            dest_lng=last.longitude,
            waypoints=[LatLng(lat=s.latitude, lng=s.longitude) for s in located[1:-1]],
        )
        return self._client.get_car_directions(request)

    def get_fallback_count(self) -> int:
        return self._fallback_count

    def get_diagnostics(self) -> dict[str, Any]:
        return {
            "routing_source": _FALLBACK_SOURCE if self._fallback_count else _DIRECTIONS_SOURCE,
            "fallback_count": self._fallback_count,
            "events": list(self._diagnostic_events),
        }


def build_routing_provider() -> RoutingProvider:
    mode = resolve_route_provider_default()
    if mode == "directions":
        return DirectionsRoutingProvider()
    if mode == "auto":
        try:
            client = get_directions_client()
            if client.provider != "disabled":
                return DirectionsRoutingProvider(client)
        except KeyMissingError as exc:
            _LOGGER.warning(
                "routing provider auto fallback to estimate during init: %s",
                type(exc).__name__,
            )
            return EstimateRoutingProvider()
    return EstimateRoutingProvider()
