"""Directions client used when no Kakao REST API key is configured."""

from __future__ import annotations

import logging
from typing import Any

from culturemap.adapters.directions.interfaces import DirectionsRequest, DirectionsResult
from culturemap.shared.exceptions import DirectionsUnavailable

_LOGGER = logging.getLogger("culturemap.directions")


class DisabledDirectionsClient:
    provider = "disabled"

    def get_car_directions(self, request: DirectionsRequest) -> DirectionsResult:
        _ = request
        _LOGGER.warning("directions disabled: set KAKAO_REST_API_KEY to enable routing")
        raise DirectionsUnavailable(
            "경로 조회 기능이 현재 사용할 수 없습니다. Kakao API 키가 설정되지 않았습니다."
        )

    def get_today_calls(self) -> int:
        return 0

    def get_total_calls(self) -> int:
        return 0

    def describe(self) -> dict[str, Any]:
        return {"provider": self.provider}
