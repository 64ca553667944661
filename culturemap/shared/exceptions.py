"""Shared (non-domain) exceptions."""


class ToolError(Exception):
    """Tool invocation failed."""

    def __init__(self, tool: str, message: str):
        self.tool = tool
        super().__init__(f"[{tool}] {message}")


class ExternalServiceError(Exception):
    """External service call failed."""


class KeyMissingError(Exception):
    """Required key is missing."""

    def __init__(self, name: str):
        self.key_name = name
        super().__init__(f"Missing required API key: {name} (configure it in .env)")


class DirectionsError(ExternalServiceError):
    """Directions lookup failed; carries the HTTP status to report."""

    status_code = 502

    def __init__(self, message: str, status_code: int | None = None):
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        super().__init__(message)


class InvalidDirectionsRequest(DirectionsError):
    status_code = 400


class DirectionsRateLimited(DirectionsError):
    status_code = 429


class DirectionsUnavailable(DirectionsError):
    status_code = 503
