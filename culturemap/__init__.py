"""culturemap travel-time and routing helpers for itinerary views."""

__version__ = "1.0.0"
