"""Itinerary services built on the planner."""
