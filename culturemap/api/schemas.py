"""API request/response models."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from culturemap.domain.models import GeoPoint, ItineraryStop, LatLng, TravelEstimate


class HealthResponse(BaseModel):
    status: str


class EstimateRequest(BaseModel):
    origin: Optional[GeoPoint] = Field(default=None, description="Leg start; omit when not geocoded")
    destination: Optional[GeoPoint] = Field(default=None, description="Leg end; omit when not geocoded")


class EstimateResponse(BaseModel):
    estimate: Optional[TravelEstimate] = None


class DirectionsBody(BaseModel):
    originLat: Optional[float] = None
    originLng: Optional[float] = None
    destLat: Optional[float] = None
    destLng: Optional[float] = None
    waypoints: list[LatLng] = Field(default_factory=list)


class DirectionsResponse(BaseModel):
    distanceMeters: float
    durationSeconds: float
    path: list[LatLng] = Field(default_factory=list)
    fromCache: bool = False
    provider: str = ""
    transportMode: str = ""


class TimelineRequest(BaseModel):
    stops: list[ItineraryStop] = Field(default_factory=list, max_length=100)


class UsageResponse(BaseModel):
    today_calls: int
    total_calls: int
    provider: str
    details: dict[str, Any] = Field(default_factory=dict)
