"""Environment resolution tests."""

from __future__ import annotations

from culturemap.config.settings import (
    resolve_cors_origins,
    resolve_directions_limits,
    resolve_provider_snapshot,
    resolve_route_provider_default,
)


def test_defaults_without_environment():
    snapshot = resolve_provider_snapshot()
    limits = resolve_directions_limits()

    assert snapshot.directions_provider == "disabled"
    assert snapshot.route_provider == "estimate"
    assert snapshot.mobility_url == "https://apis-navi.kakaomobility.com/v1/directions"
    assert (limits.per_minute, limits.daily) == (60, 400)
    assert limits.cache_ttl_seconds == 600.0


def test_key_switches_route_provider(monkeypatch):
    monkeypatch.setenv("KAKAO_REST_API_KEY", "TEST_FAKE_KAKAO_KEY")

    assert resolve_route_provider_default() == "directions"
    assert resolve_provider_snapshot().directions_provider == "kakao"


def test_blank_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("KAKAO_REST_API_KEY", "   ")
    assert resolve_route_provider_default() == "estimate"


def test_unknown_route_provider_is_ignored(monkeypatch):
    monkeypatch.setenv("ROUTING_PROVIDER", "teleport")
    assert resolve_route_provider_default() == "estimate"


def test_limits_from_environment(monkeypatch):
    monkeypatch.setenv("DIRECTIONS_PER_MINUTE_LIMIT", "10")
    monkeypatch.setenv("DIRECTIONS_DAILY_LIMIT", "not-a-number")
    monkeypatch.setenv("DIRECTIONS_CACHE_TTL_SECONDS", "30")

    limits = resolve_directions_limits()
    assert limits.per_minute == 10
    assert limits.daily == 400
    assert limits.cache_ttl_seconds == 30.0


def test_cors_origins(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    assert resolve_cors_origins() == ["https://a.example", "https://b.example"]
