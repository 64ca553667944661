"""Presentation helpers for itinerary timeline payloads."""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from culturemap.services.itinerary_service import ItineraryTimeline

NO_DISTANCE_INFO = "거리 정보 없음"

_MODE_ICONS = {"walk": "🚶", "drive": "🚗"}
# Checked in order; first keyword hit wins.
_CATEGORY_ICONS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("공항", "항공"), "✈️"),
    (("관광", "명소"), "📍"),
    (("음식", "식당"), "🍽️"),
    (("숙박", "호텔"), "🏨"),
)
_DEFAULT_ICON = "📍"


def format_visit_time(value: Optional[str]) -> str:
    """Normalise ``H:M`` or ``HH:MM:SS`` to zero-padded 24h ``HH:MM``."""
    if not value:
        return ""
    parts = value.split(":")
    if len(parts) < 2:
        return value
    return f"{parts[0].zfill(2)}:{parts[1].zfill(2)}"


def d_day_label(plan_date: dt.date, today: Optional[dt.date] = None) -> str:
    today = today or dt.date.today()
    diff = (plan_date - today).days
    if diff == 0:
        return "D-DAY"
    if diff > 0:
        return f"D-{diff}"
    return f"D+{abs(diff)}"


def category_icon(category: Optional[str]) -> str:
    if not category:
        return _DEFAULT_ICON
    for keywords, icon in _CATEGORY_ICONS:
        if any(keyword in category for keyword in keywords):
            return icon
    return _DEFAULT_ICON


def present_timeline(timeline: ItineraryTimeline) -> dict[str, Any]:
    stops = {stop.id: stop for stop in timeline.stops}
    rows: list[dict[str, Any]] = []
    for index, stop in enumerate(timeline.stops):
        row: dict[str, Any] = {
            "id": stop.id,
            "name": stop.name,
            "icon": category_icon(stop.category),
            "visit_time": format_visit_time(stop.visit_time),
        }
        if index < len(timeline.legs):
            leg = timeline.legs[index]
            if leg.estimate is None:
                row["next_leg"] = {"to": leg.to_stop_id, "text": NO_DISTANCE_INFO}
            else:
                est = leg.estimate
                row["next_leg"] = {
                    "to": leg.to_stop_id,
                    "to_name": stops[leg.to_stop_id].name if leg.to_stop_id in stops else "",
                    "mode": est.transport_mode.value,
                    "icon": _MODE_ICONS.get(est.transport_mode.value, ""),
                    "label": est.label,
                    "distance": est.distance_text,
                    "duration": est.duration_text,
                    "source": est.source,
                }
        rows.append(row)

    payload: dict[str, Any] = {
        "stops": rows,
        "total_minutes": timeline.total_minutes,
        "total_meters": round(timeline.total_meters, 1),
        "route_summary": None,
    }
    if timeline.route_summary is not None:
        payload["route_summary"] = {
            "distance": timeline.route_summary.distance_km_text,
            "duration": timeline.route_summary.duration_text,
        }
    if timeline.route_error:
        payload["route_error"] = timeline.route_error
    return payload


__all__ = ["NO_DISTANCE_INFO", "category_icon", "d_day_label", "format_visit_time", "present_timeline"]
