"""Central API key manager.

All outbound integrations read their keys through this module instead of
calling os.getenv directly, so that key values can be scrubbed from any
error text or log line before it leaves the process.
"""

from __future__ import annotations

import os
import time
from typing import Optional

from culturemap.security.redact import redact_sensitive
from culturemap.shared.exceptions import KeyMissingError

KAKAO_REST_API_KEY = "KAKAO_REST_API_KEY"


class _KeyEntry:
    __slots__ = ("value", "loaded_at", "source")

    def __init__(self, value: str, source: str):
        self.value = value
        self.loaded_at = time.time()
        self.source = source


class KeyManager:
    def __init__(self):
        self._keys: dict[str, _KeyEntry] = {}

    def get(self, name: str, *, required: bool = False) -> Optional[str]:
        entry = self._keys.get(name)
        if entry is None:
            raw = os.getenv(name, "").strip()
            if raw:
                entry = _KeyEntry(value=raw, source="env")
                self._keys[name] = entry
            elif required:
                raise KeyMissingError(name)
            else:
                return None
        return entry.value

    def get_kakao_key(self, *, required: bool = True) -> str:
        return self.get(KAKAO_REST_API_KEY, required=required) or ""

    @staticmethod
    def redact(value: str) -> str:
        """Keep only the first and last four characters."""
        if not value or len(value) <= 8:
            return "****"
        return value[:4] + "****" + value[-4:]

    def scrub_text(self, text: str) -> str:
        """Remove every loaded key value from ``text``, then apply pattern redaction."""
        result = str(text) if text is not None else ""
        for name, entry in self._keys.items():
            if entry.value and entry.value in result:
                result = result.replace(entry.value, f"[{name}:***REDACTED***]")
        return redact_sensitive(result)

    def has_key(self, name: str) -> bool:
        if name in self._keys:
            return True
        return bool(os.getenv(name, "").strip())

    def reload(self, name: str) -> None:
        """Force a re-read from the environment (key rotation)."""
        raw = os.getenv(name, "").strip()
        if raw:
            self._keys[name] = _KeyEntry(value=raw, source="env")
        elif name in self._keys:
            del self._keys[name]


_manager: Optional[KeyManager] = None


def get_key_manager() -> KeyManager:
    global _manager
    if _manager is None:
        _manager = KeyManager()
    return _manager
