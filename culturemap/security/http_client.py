"""Single exit point for outbound HTTP calls.

Wraps httpx with a fixed timeout and retry policy, and scrubs API keys
out of every error message it raises.
"""

from __future__ import annotations

import time
from typing import Any, Optional

import httpx

from culturemap.security.key_manager import get_key_manager
from culturemap.shared.exceptions import ToolError


class UpstreamHTTPError(ToolError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, tool: str, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(tool, f"HTTP {status_code}: {body[:200]}")


class SecureHttpClient:
    def __init__(
        self,
        *,
        timeout: float = 10.0,
        max_retries: int = 1,
        tool_name: str = "http",
    ):
        self._timeout = timeout
        self._max_retries = max_retries
        self._tool_name = tool_name
        self._km = get_key_manager()

    def get(
        self,
        url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> dict[str, Any]:
        """GET ``url`` and return the decoded JSON body.

        4xx responses are raised immediately; 5xx and transport failures
        are retried up to ``max_retries`` times.
        """
        last_error: Optional[ToolError] = None

        for attempt in range(1, self._max_retries + 2):
            try:
                resp = httpx.get(url, params=params, headers=headers, timeout=self._timeout)
                resp.raise_for_status()
                return resp.json()
            except httpx.HTTPStatusError as e:
                body = self._km.scrub_text(e.response.text)
                last_error = UpstreamHTTPError(self._tool_name, e.response.status_code, body)
                if e.response.status_code < 500:
                    raise last_error from None
            except httpx.TimeoutException:
                last_error = ToolError(
                    self._tool_name,
                    f"request timed out after {self._timeout}s (attempt {attempt})",
                )
            except httpx.HTTPError as e:
                last_error = ToolError(self._tool_name, f"request failed: {self._km.scrub_text(str(e))}")
            except ValueError as e:
                raise ToolError(
                    self._tool_name, f"invalid JSON body: {self._km.scrub_text(str(e))}"
                ) from None

            if attempt <= self._max_retries:
                time.sleep(0.5 * attempt)

        raise last_error  # type: ignore[misc]
