"""FastAPI application: travel estimates, directions and itinerary timelines."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from culturemap import __version__
from culturemap.adapters.directions import DirectionsRequest, get_directions_client
from culturemap.api.schemas import (
    DirectionsBody,
    DirectionsResponse,
    EstimateRequest,
    EstimateResponse,
    HealthResponse,
    TimelineRequest,
    UsageResponse,
)
from culturemap.config.settings import docs_enabled, resolve_cors_origins, resolve_provider_snapshot
from culturemap.planner.routing_provider import build_routing_provider
from culturemap.planner.travel_time import estimate
from culturemap.services.itinerary_presenter import present_timeline
from culturemap.services.itinerary_service import build_timeline
from culturemap.shared.exceptions import DirectionsError

_api_logger = logging.getLogger("culturemap.api")

load_dotenv()

app = FastAPI(
    title="culturemap-travel",
    version=__version__,
    docs_url="/docs" if docs_enabled() else None,
    redoc_url=None,
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=resolve_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(DirectionsError)
async def directions_error_handler(request: Request, exc: DirectionsError):
    _api_logger.warning("directions error on %s: status=%s", request.url.path, exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.post("/travel/estimate", response_model=EstimateResponse)
def travel_estimate(req: EstimateRequest):
    return EstimateResponse(estimate=estimate(req.origin, req.destination))


@app.post("/directions", response_model=DirectionsResponse)
def directions(body: DirectionsBody):
    result = get_directions_client().get_car_directions(
        DirectionsRequest(
            origin_lat=body.originLat,
            origin_lng=body.originLng,
            dest_lat=body.destLat,
            dest_lng=body.destLng,
            waypoints=body.waypoints,
        )
    )
    return DirectionsResponse(
        distanceMeters=result.distance_meters,
        durationSeconds=result.duration_seconds,
        path=result.path,
        fromCache=result.from_cache,
        provider=result.provider,
        transportMode=result.transport_mode,
    )


@app.post("/itinerary/timeline")
def itinerary_timeline(req: TimelineRequest):
    provider = build_routing_provider()
    timeline = build_timeline(req.stops, provider)
    payload = present_timeline(timeline)
    payload["routing"] = provider.get_diagnostics()
    return payload


@app.get("/admin/directions/usage", response_model=UsageResponse)
def directions_usage():
    client = get_directions_client()
    return UsageResponse(
        today_calls=client.get_today_calls(),
        total_calls=client.get_total_calls(),
        provider=client.provider,
        details=client.describe(),
    )


@app.get("/diagnostics")
def diagnostics():
    return {
        "providers": resolve_provider_snapshot().model_dump(),
        "directions": get_directions_client().describe(),
    }
