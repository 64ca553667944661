"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from culturemap.domain.enums import TravelMode


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class LatLng(BaseModel):
    """Directions wire coordinate; either side may be absent on input."""

    lat: Optional[float] = None
    lng: Optional[float] = None


class TravelEstimate(BaseModel):
    distance_meters: float
    transport_mode: TravelMode
    duration_minutes: int
    label: str
    distance_text: str = ""
    duration_text: str = ""
    source: str = "estimate"


class ItineraryStop(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    name: str = ""
    latitude: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    longitude: Optional[float] = Field(default=None, ge=-180.0, le=180.0)
    category: Optional[str] = None
    visit_time: Optional[str] = None
    visit_order: int = 0

    @property
    def point(self) -> GeoPoint | None:
        # Zero coordinates are treated as "not geocoded".
        if not self.latitude or not self.longitude:
            return None
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)
