"""Directions I/O schemas and client protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from culturemap.domain.models import LatLng


class DirectionsRequest(BaseModel):
    origin_lat: float | None = None
    origin_lng: float | None = None
    dest_lat: float | None = None
    dest_lng: float | None = None
    waypoints: list[LatLng] = Field(default_factory=list)


class DirectionsResult(BaseModel):
    distance_meters: float = 0.0
    duration_seconds: float = 0.0
    path: list[LatLng] = Field(default_factory=list)
    from_cache: bool = False
    provider: str = ""
    transport_mode: str = ""


@runtime_checkable
class DirectionsClient(Protocol):
    provider: str

    def get_car_directions(self, request: DirectionsRequest) -> DirectionsResult:
        """Return the recommended car route for ``request``."""

    def get_today_calls(self) -> int:
        """Upstream calls made today."""

    def get_total_calls(self) -> int:
        """Upstream calls made since start-up."""

    def describe(self) -> dict[str, Any]:
        """Diagnostic snapshot."""
