"""Domain value types."""

from culturemap.domain.enums import TravelMode
from culturemap.domain.models import GeoPoint, ItineraryStop, LatLng, TravelEstimate

__all__ = ["GeoPoint", "ItineraryStop", "LatLng", "TravelEstimate", "TravelMode"]
