"""Runtime provider snapshot helpers."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}
_DEFAULT_MOBILITY_URL = "https://apis-navi.kakaomobility.com/v1/directions"


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


def _int_env(name: str, default: int, *, minimum: int = 1) -> int:
    raw = os.getenv(name)
    try:
        value = int(str(raw).strip()) if raw is not None else default
    except ValueError:
        value = default
    return max(minimum, value)


def _float_env(name: str, default: float, *, minimum: float = 0.1) -> float:
    raw = os.getenv(name)
    try:
        value = float(str(raw).strip()) if raw is not None else default
    except ValueError:
        value = default
    return max(minimum, value)


def resolve_directions_provider() -> str:
    return "kakao" if _is_configured(os.getenv("KAKAO_REST_API_KEY")) else "disabled"


def resolve_route_provider_default() -> str:
    mode = str(os.getenv("ROUTING_PROVIDER") or "").strip().lower()
    if mode in {"directions", "estimate", "auto"}:
        return mode
    if _is_configured(os.getenv("KAKAO_REST_API_KEY")):
        return "directions"
    return "estimate"


def resolve_mobility_url() -> str:
    return str(os.getenv("KAKAO_MOBILITY_URL") or "").strip() or _DEFAULT_MOBILITY_URL


def docs_enabled() -> bool:
    return _is_enabled(os.getenv("ENABLE_DOCS"))


def resolve_cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [item.strip() for item in raw.split(",") if item.strip()] or ["*"]


class DirectionsLimits(BaseModel):
    per_minute: int = Field(default=60)
    daily: int = Field(default=400)
    cache_ttl_seconds: float = Field(default=600.0)
    http_timeout_seconds: float = Field(default=10.0)


def resolve_directions_limits() -> DirectionsLimits:
    return DirectionsLimits(
        per_minute=_int_env("DIRECTIONS_PER_MINUTE_LIMIT", 60),
        daily=_int_env("DIRECTIONS_DAILY_LIMIT", 400),
        cache_ttl_seconds=_float_env("DIRECTIONS_CACHE_TTL_SECONDS", 600.0),
        http_timeout_seconds=_float_env("DIRECTIONS_HTTP_TIMEOUT_SECONDS", 10.0),
    )


class ProviderSnapshot(BaseModel):
    directions_provider: str = Field(default="disabled")
    route_provider: str = Field(default="estimate")
    mobility_url: str = Field(default=_DEFAULT_MOBILITY_URL)


def resolve_provider_snapshot(*, route_provider: str | None = None) -> ProviderSnapshot:
    resolved_route = str(route_provider or "").strip().lower() or resolve_route_provider_default()
    return ProviderSnapshot(
        directions_provider=resolve_directions_provider(),
        route_provider=resolved_route,
        mobility_url=resolve_mobility_url(),
    )


__all__ = [
    "DirectionsLimits",
    "ProviderSnapshot",
    "resolve_directions_limits",
    "resolve_provider_snapshot",
]
