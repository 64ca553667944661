"""API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import culturemap.api.main as api_main
from culturemap.adapters.directions import KakaoDirectionsClient
from culturemap.config.settings import DirectionsLimits

client = TestClient(api_main.app)


class _FakeHttp:
    def __init__(self):
        self.calls = 0

    def get(self, url, *, params=None, headers=None):
        self.calls += 1
        return {
            "routes": [
                {
                    "summary": {"distance": 1830, "duration": 420},
                    "sections": [{"roads": [{"vertexes": [126.977, 37.5796, 126.9768, 37.5759]}]}],
                }
            ]
        }


@pytest.fixture
def kakao(monkeypatch):
    fake = KakaoDirectionsClient(
        api_key="TEST_FAKE_KAKAO_KEY",
        base_url="https://navi.example.test/v1/directions",
        limits=DirectionsLimits(),
        http=_FakeHttp(),
    )
    monkeypatch.setattr(api_main, "get_directions_client", lambda: fake)
    return fake


def _directions_body(**overrides):
    body = {"originLat": 37.5796, "originLng": 126.977, "destLat": 37.5759, "destLng": 126.9768}
    body.update(overrides)
    return body


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.headers["X-Content-Type-Options"] == "nosniff"


def test_travel_estimate():
    r = client.post(
        "/travel/estimate",
        json={
            "origin": {"latitude": 37.5665, "longitude": 126.978},
            "destination": {"latitude": 35.1796, "longitude": 129.0756},
        },
    )
    data = r.json()["estimate"]
    assert r.status_code == 200
    assert data["transport_mode"] == "drive"
    assert data["label"] == "자동차 이동 (추천)"


def test_travel_estimate_missing_point_is_null():
    r = client.post("/travel/estimate", json={"origin": {"latitude": 37.5, "longitude": 127.0}})
    assert r.status_code == 200
    assert r.json() == {"estimate": None}


def test_travel_estimate_rejects_out_of_range():
    r = client.post(
        "/travel/estimate",
        json={"origin": {"latitude": 95, "longitude": 0}, "destination": {"latitude": 0, "longitude": 0}},
    )
    assert r.status_code == 422


def test_directions_disabled_without_key():
    r = client.post("/directions", json=_directions_body())
    assert r.status_code == 503
    assert "Kakao API 키" in r.json()["detail"]


def test_directions_with_client(kakao):
    first = client.post("/directions", json=_directions_body()).json()
    second = client.post("/directions", json=_directions_body()).json()

    assert first["distanceMeters"] == 1830
    assert first["durationSeconds"] == 420
    assert first["fromCache"] is False
    assert first["provider"] == "kakao-mobility"
    assert first["transportMode"] == "CAR"
    assert first["path"][0] == {"lat": 37.5796, "lng": 126.977}
    assert second["fromCache"] is True


def test_directions_same_point_is_bad_request(kakao):
    r = client.post("/directions", json=_directions_body(destLat=37.5796, destLng=126.977))
    assert r.status_code == 400
    assert r.json()["detail"] == "출발지와 도착지가 동일합니다."


def test_directions_missing_coordinates_is_bad_request(kakao):
    r = client.post("/directions", json={"originLat": 37.5})
    assert r.status_code == 400


def test_usage_counts_upstream_calls(kakao):
    client.post("/directions", json=_directions_body())
    client.post("/directions", json=_directions_body())

    data = client.get("/admin/directions/usage").json()
    assert data["total_calls"] == 1
    assert data["today_calls"] == 1
    assert data["provider"] == "kakao-mobility"
    assert data["details"]["cache"]["hits"] == 1


def test_usage_without_key():
    data = client.get("/admin/directions/usage").json()
    assert data == {"today_calls": 0, "total_calls": 0, "provider": "disabled", "details": {"provider": "disabled"}}


def test_timeline_uses_estimates_without_key():
    r = client.post(
        "/itinerary/timeline",
        json={
            "stops": [
                {"id": "1", "name": "경복궁", "latitude": 37.5796, "longitude": 126.9770},
                {"id": "2", "name": "N서울타워", "latitude": 37.5512, "longitude": 126.9882},
            ]
        },
    )
    data = r.json()
    assert r.status_code == 200
    assert data["stops"][0]["next_leg"]["mode"] == "drive"
    assert data["routing"]["routing_source"] == "estimate"
    assert data["total_minutes"] > 0


def test_timeline_rejects_out_of_range_stop():
    r = client.post(
        "/itinerary/timeline",
        json={"stops": [{"id": "a", "latitude": 95.0, "longitude": 127.0}]},
    )
    assert r.status_code == 422


def test_diagnostics():
    data = client.get("/diagnostics").json()
    assert data["providers"]["directions_provider"] == "disabled"
