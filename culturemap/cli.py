"""culturemap CLI: leg estimates and itinerary timelines from the terminal."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional

import uvicorn
from dotenv import load_dotenv
from pydantic import TypeAdapter, ValidationError

from culturemap.domain.models import GeoPoint, ItineraryStop
from culturemap.planner.routing_provider import build_routing_provider
from culturemap.planner.travel_time import estimate
from culturemap.services.itinerary_presenter import NO_DISTANCE_INFO, present_timeline
from culturemap.services.itinerary_service import build_timeline

_STOPS = TypeAdapter(list[ItineraryStop])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="culturemap", description="Itinerary travel-time helper")
    parser.add_argument("--json", action="store_true", help="Print machine-readable JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    est = sub.add_parser("estimate", help="Walk/drive estimate between two coordinates")
    est.add_argument("lat1", type=float)
    est.add_argument("lon1", type=float)
    est.add_argument("lat2", type=float)
    est.add_argument("lon2", type=float)

    tl = sub.add_parser("timeline", help="Per-leg travel timeline for a JSON list of stops")
    tl.add_argument("file", type=Path, help="JSON file holding a list of stops")

    srv = sub.add_parser("serve", help="Run the HTTP API")
    srv.add_argument("--host", default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    return parser


def _run_estimate(args: argparse.Namespace) -> int:
    result = estimate(
        GeoPoint(latitude=args.lat1, longitude=args.lon1),
        GeoPoint(latitude=args.lat2, longitude=args.lon2),
    )
    if args.json:
        print(json.dumps(result.model_dump(mode="json") if result else None, ensure_ascii=False))
    elif result is None:
        print(NO_DISTANCE_INFO)
    else:
        print(f"{result.label}  {result.distance_text}  {result.duration_text}")
    return 0


def _format_timeline(payload: dict[str, Any]) -> str:
    lines: list[str] = []
    for row in payload["stops"]:
        time_str = f"{row['visit_time']}  " if row["visit_time"] else ""
        lines.append(f"{row['icon']} {time_str}{row['name'] or row['id']}")
        leg = row.get("next_leg")
        if leg is None:
            continue
        if "mode" not in leg:
            lines.append(f"   ↓ {leg['text']}")
        else:
            lines.append(f"   ↓ {leg['icon']} {leg['label']}  약 {leg['distance']}  {leg['duration']}")
    summary = payload.get("route_summary")
    if summary:
        lines.append(f"전체 경로: {summary['distance']} / {summary['duration']}")
    lines.append(f"총 이동 시간: 약 {payload['total_minutes']}분")
    return "\n".join(lines)


def _run_timeline(args: argparse.Namespace) -> int:
    try:
        stops = _STOPS.validate_json(args.file.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        print(f"invalid stops file: {exc}", file=sys.stderr)
        return 2

    payload = present_timeline(build_timeline(stops, build_routing_provider()))
    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(_format_timeline(payload))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "estimate":
            return _run_estimate(args)
        if args.command == "serve":
            uvicorn.run("culturemap.api.main:app", host=args.host, port=args.port)
            return 0
        return _run_timeline(args)
    except ValidationError as exc:
        print(f"invalid coordinates: {exc.error_count()} error(s)", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
