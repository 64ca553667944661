"""Shared cross-layer types and exceptions."""

from culturemap.shared.exceptions import (
    DirectionsError,
    DirectionsRateLimited,
    DirectionsUnavailable,
    ExternalServiceError,
    InvalidDirectionsRequest,
    KeyMissingError,
    ToolError,
)

__all__ = [
    "ToolError",
    "ExternalServiceError",
    "KeyMissingError",
    "DirectionsError",
    "InvalidDirectionsRequest",
    "DirectionsRateLimited",
    "DirectionsUnavailable",
]
