"""Kakao Mobility car directions adapter.

Env: KAKAO_REST_API_KEY, KAKAO_MOBILITY_URL
API docs: https://developers.kakaomobility.com/docs/navi-api/directions/

Coordinates go over the wire as ``lng,lat`` (longitude first), and route
vertexes come back as a flat ``[lng, lat, lng, lat, ...]`` list.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from culturemap.adapters.directions.interfaces import DirectionsRequest, DirectionsResult
from culturemap.config.settings import (
    DirectionsLimits,
    resolve_directions_limits,
    resolve_mobility_url,
)
from culturemap.domain.models import LatLng
from culturemap.infrastructure.cache import MemoryCache
from culturemap.infrastructure.logging import get_logger
from culturemap.infrastructure.rate_limiter import DailyQuota, InMemoryRateLimiter
from culturemap.security.http_client import SecureHttpClient, UpstreamHTTPError
from culturemap.security.key_manager import get_key_manager
from culturemap.shared.exceptions import (
    DirectionsError,
    DirectionsRateLimited,
    DirectionsUnavailable,
    InvalidDirectionsRequest,
    ToolError,
)

PROVIDER = "kakao-mobility"
TRANSPORT_MODE = "CAR"
_LIMIT_KEY = "kakao-directions"
_LOGGER = logging.getLogger("culturemap.directions")


def format_lng_lat(lng: float, lat: float) -> str:
    return f"{lng:.6f},{lat:.6f}"


def validate_request(request: DirectionsRequest) -> None:
    if None in (request.origin_lat, request.origin_lng, request.dest_lat, request.dest_lng):
        raise InvalidDirectionsRequest("출발지와 도착지 좌표가 필요합니다.")
    if request.origin_lat == request.dest_lat and request.origin_lng == request.dest_lng:
        raise InvalidDirectionsRequest("출발지와 도착지가 동일합니다.")


def _usable_waypoints(request: DirectionsRequest) -> list[LatLng]:
    return [wp for wp in request.waypoints if wp.lat is not None and wp.lng is not None]


def build_query(request: DirectionsRequest) -> dict[str, str]:
    params = {
        "priority": "RECOMMEND",
        "car_fuel": "GASOLINE",
        "car_hipass": "false",
        "origin": format_lng_lat(request.origin_lng, request.origin_lat),
        "destination": format_lng_lat(request.dest_lng, request.dest_lat),
    }
    waypoints = _usable_waypoints(request)
    if waypoints:
        params["waypoints"] = "|".join(format_lng_lat(wp.lng, wp.lat) for wp in waypoints)
    return params


def build_cache_key(request: DirectionsRequest) -> str:
    key = (
        format_lng_lat(request.origin_lng, request.origin_lat)
        + "->"
        + format_lng_lat(request.dest_lng, request.dest_lat)
    )
    waypoints = _usable_waypoints(request)
    if waypoints:
        key += "|wp=" + "".join(format_lng_lat(wp.lng, wp.lat) + ";" for wp in waypoints)
    return key


def _extract_path(route: dict[str, Any]) -> list[LatLng]:
    coords: list[LatLng] = []
    for section in route.get("sections") or []:
        for road in section.get("roads") or []:
            vertexes = road.get("vertexes") or []
            for i in range(0, len(vertexes) - 1, 2):
                coords.append(LatLng(lat=float(vertexes[i + 1]), lng=float(vertexes[i])))
    return coords


def parse_response(data: dict[str, Any]) -> DirectionsResult:
    routes = data.get("routes")
    if not isinstance(routes, list) or not routes:
        raise DirectionsError("경로 결과가 비어있습니다.", status_code=502)

    route = routes[0]
    summary = route.get("summary") or {}
    return DirectionsResult(
        distance_meters=float(summary.get("distance", 0) or 0),
        duration_seconds=float(summary.get("duration", 0) or 0),
        path=_extract_path(route),
        provider=PROVIDER,
        transport_mode=TRANSPORT_MODE,
    )


def _map_upstream_error(exc: UpstreamHTTPError) -> DirectionsError:
    status = exc.status_code
    if status in (401, 403):
        if "ip mismatched" in exc.body:
            return DirectionsError("Kakao API IP 화이트리스트에 서버 IP를 등록해주세요.", status_code=403)
        return DirectionsError("Kakao API 키 또는 권한을 확인해주세요.", status_code=401)
    if status == 429:
        return DirectionsRateLimited("Kakao API 레이트 리밋을 초과했습니다.")
    _LOGGER.error("kakao directions call failed: status=%s body=%s", status, exc.body[:200])
    if status >= 500:
        return DirectionsUnavailable("경로 조회 중 오류가 발생했습니다.")
    return DirectionsError(f"경로 조회 실패: {status}", status_code=status)


class KakaoDirectionsClient:
    provider = PROVIDER

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        limits: Optional[DirectionsLimits] = None,
        http: Optional[SecureHttpClient] = None,
    ):
        self._api_key = api_key or get_key_manager().get_kakao_key(required=True)
        self._base_url = base_url or resolve_mobility_url()
        self._limits = limits or resolve_directions_limits()
        self._http = http or SecureHttpClient(
            timeout=self._limits.http_timeout_seconds,
            max_retries=0,
            tool_name="kakao_directions",
        )
        self._cache: MemoryCache[DirectionsResult] = MemoryCache(
            default_ttl=self._limits.cache_ttl_seconds, max_size=500
        )
        self._minute_limiter = InMemoryRateLimiter(self._limits.per_minute, 60)
        self._daily_quota = DailyQuota(self._limits.daily)
        self._today_calls = DailyQuota()
        self._total_calls = 0

    def _enforce_limits(self) -> None:
        if not self._minute_limiter.allow(_LIMIT_KEY):
            raise DirectionsRateLimited("분당 호출 한도를 초과했습니다.")
        if not self._daily_quota.allow():
            raise DirectionsRateLimited("일일 호출 한도를 초과했습니다.")

    def get_car_directions(self, request: DirectionsRequest) -> DirectionsResult:
        validate_request(request)

        cache_key = build_cache_key(request)
        cached = self._cache.get(cache_key)
        if cached is not None:
            _LOGGER.info("directions cache hit for key=%s", cache_key)
            get_logger().directions_call(cache_hit=True, key=cache_key)
            return cached.model_copy(update={"from_cache": True})

        self._enforce_limits()

        try:
            data = self._http.get(
                self._base_url,
                params=build_query(request),
                headers={
                    "Authorization": f"KakaoAK {self._api_key}",
                    "Content-Type": "application/json",
                },
            )
        except UpstreamHTTPError as exc:
            raise _map_upstream_error(exc) from None
        except ToolError as exc:
            _LOGGER.error("kakao directions transport error: %s", exc)
            raise DirectionsUnavailable("경로 조회 중 오류가 발생했습니다.") from None

        result = parse_response(data)
        self._cache.set(cache_key, result)
        self._total_calls += 1
        self._today_calls.increment()
        get_logger().directions_call(
            cache_hit=False,
            key=cache_key,
            distance_meters=result.distance_meters,
            duration_seconds=result.duration_seconds,
        )
        return result

    def get_today_calls(self) -> int:
        return self._today_calls.count

    def get_total_calls(self) -> int:
        return self._total_calls

    def describe(self) -> dict[str, Any]:
        return {
            "provider": self.provider,
            "base_url": self._base_url,
            "limits": self._limits.model_dump(),
            "cache": self._cache.stats,
        }
