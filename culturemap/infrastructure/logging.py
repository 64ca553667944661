"""Structured logging: JSON lines with secret redaction."""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional

from culturemap.security.key_manager import get_key_manager


class StructuredLogger:
    """Emit one JSON object per line; every line is scrubbed of known keys."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        line = json.dumps(data, ensure_ascii=False, default=str)
        self._output.write(get_key_manager().scrub_text(line) + "\n")
        self._output.flush()

    def directions_call(self, *, cache_hit: bool, **extra: Any) -> None:
        self._emit({"event": "directions_call", "cache_hit": cache_hit, **extra})

    def fallback(self, origin_id: str, destination_id: str, error: str, **extra: Any) -> None:
        self._emit({
            "event": "routing_fallback",
            "origin_id": origin_id,
            "destination_id": destination_id,
            "error": error,
            **extra,
        })

    def error(self, component: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "component": component, "error": error, **extra})

    def summary(self, **extra: Any) -> None:
        self._emit({"event": "summary", **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        _logger = StructuredLogger(trace_id=trace_id)
    return _logger
