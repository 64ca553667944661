"""Global pytest fixtures: environment isolation."""

import pytest


@pytest.fixture(autouse=True)
def no_real_apis(monkeypatch):
    """Disable the real Kakao API by default so no test depends on the network."""
    for name in (
        "KAKAO_REST_API_KEY",
        "KAKAO_MOBILITY_URL",
        "ROUTING_PROVIDER",
        "DIRECTIONS_PER_MINUTE_LIMIT",
        "DIRECTIONS_DAILY_LIMIT",
        "DIRECTIONS_CACHE_TTL_SECONDS",
        "DIRECTIONS_HTTP_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)

    import culturemap.infrastructure.logging as structured
    from culturemap.adapters.directions import reset_directions_client
    from culturemap.security.key_manager import KAKAO_REST_API_KEY, get_key_manager

    get_key_manager().reload(KAKAO_REST_API_KEY)
    # The structured logger binds sys.stderr at creation; pytest swaps it per test.
    monkeypatch.setattr(structured, "_logger", None)
    reset_directions_client()
    yield
    reset_directions_client()
    get_key_manager().reload(KAKAO_REST_API_KEY)
