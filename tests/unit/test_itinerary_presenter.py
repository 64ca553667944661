"""Itinerary presentation tests."""

from __future__ import annotations

import datetime as dt

import pytest

from culturemap.domain.models import ItineraryStop
from culturemap.planner.routing_provider import EstimateRoutingProvider
from culturemap.services.itinerary_presenter import (
    NO_DISTANCE_INFO,
    category_icon,
    d_day_label,
    format_visit_time,
    present_timeline,
)
from culturemap.services.itinerary_service import build_timeline


@pytest.mark.parametrize(
    ("raw", "shown"),
    [(None, ""), ("", ""), ("9:5", "09:05"), ("16:30:00", "16:30"), ("noon", "noon")],
)
def test_format_visit_time(raw, shown):
    assert format_visit_time(raw) == shown


def test_d_day_label():
    today = dt.date(2026, 5, 1)

    assert d_day_label(dt.date(2026, 5, 1), today) == "D-DAY"
    assert d_day_label(dt.date(2026, 5, 4), today) == "D-3"
    assert d_day_label(dt.date(2026, 4, 29), today) == "D+2"


@pytest.mark.parametrize(
    ("category", "icon"),
    [
        (None, "📍"),
        ("교통,수송 > 공항", "✈️"),
        ("여행 > 관광,명소", "📍"),
        ("음식점 > 한식", "🍽️"),
        ("숙박 > 호텔", "🏨"),
        ("문화시설 > 미술관", "📍"),
    ],
)
def test_category_icon(category, icon):
    assert category_icon(category) == icon


def test_present_timeline_renders_legs_and_fallback_text():
    stops = [
        ItineraryStop(id="1", name="경복궁", latitude=37.5796, longitude=126.9770, visit_time="10:00:00"),
        ItineraryStop(id="2", name="광화문", latitude=37.5759, longitude=126.9768, category="음식점"),
        ItineraryStop(id="3", name="미정"),
    ]
    payload = present_timeline(build_timeline(stops, EstimateRoutingProvider()))

    first, second, last = payload["stops"]
    assert first["visit_time"] == "10:00"
    assert first["next_leg"]["mode"] == "walk"
    assert first["next_leg"]["icon"] == "🚶"
    assert first["next_leg"]["to_name"] == "광화문"
    assert first["next_leg"]["distance"].endswith("m")
    assert second["icon"] == "🍽️"
    assert second["next_leg"] == {"to": "3", "text": NO_DISTANCE_INFO}
    assert "next_leg" not in last
    assert payload["route_summary"] is None
    assert "route_error" not in payload
