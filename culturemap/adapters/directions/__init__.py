"""Road-routing directions clients."""

from __future__ import annotations

import logging
from typing import Optional

from culturemap.adapters.directions.disabled import DisabledDirectionsClient
from culturemap.adapters.directions.interfaces import (
    DirectionsClient,
    DirectionsRequest,
    DirectionsResult,
)
from culturemap.adapters.directions.kakao import KakaoDirectionsClient
from culturemap.config.settings import resolve_directions_provider

_LOGGER = logging.getLogger("culturemap.directions")
_client: Optional[DirectionsClient] = None


def get_directions_client() -> DirectionsClient:
    """Process-wide client; the Kakao client keeps the cache and call budgets."""
    global _client
    if _client is None:
        if resolve_directions_provider() == "kakao":
            _client = KakaoDirectionsClient()
        else:
            _LOGGER.info("KAKAO_REST_API_KEY not set; directions disabled")
            _client = DisabledDirectionsClient()
    return _client


def reset_directions_client() -> None:
    global _client
    _client = None


__all__ = [
    "DirectionsClient",
    "DirectionsRequest",
    "DirectionsResult",
    "DisabledDirectionsClient",
    "KakaoDirectionsClient",
    "get_directions_client",
    "reset_directions_client",
]
