"""Runtime configuration helpers."""

from culturemap.config.settings import (
    DirectionsLimits,
    ProviderSnapshot,
    resolve_directions_limits,
    resolve_provider_snapshot,
)

__all__ = [
    "DirectionsLimits",
    "ProviderSnapshot",
    "resolve_directions_limits",
    "resolve_provider_snapshot",
]
