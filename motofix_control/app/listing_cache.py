from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    expires_at: float


def cache_key(module: str, params: dict[str, Any]) -> str:
    serialized = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return f"{module}:{serialized}"


class ListingCache:
    """In-memory TTL cache for listing pages, keyed by module and query."""

    def __init__(self, ttl_seconds: float = 30.0, now: Callable[[], float] | None = None) -> None:
        self.ttl_seconds = max(1.0, ttl_seconds)
        self._now = now or time.monotonic
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if not entry:
            return None
        if entry.expires_at <= self._now():
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, expires_at=self._now() + self.ttl_seconds)

    def invalidate_prefix(self, prefix: str) -> None:
        stale_keys = [key for key in self._entries if key.startswith(prefix)]
        for key in stale_keys:
            self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()
