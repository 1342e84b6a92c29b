# src/lifecost/cache.py
import time
from typing import Any, Dict, Optional

_DEFAULT_TTL = 300  # 5 minutes


class TTLCache:
    """In-process key/value store whose entries expire after a time-to-live."""

    def __init__(self, default_ttl: float = _DEFAULT_TTL):
        self.default_ttl = default_ttl
        self._entries: Dict[str, Dict[str, Any]] = {}
        self._hits = 0
        self._misses = 0

    def _live_entry(self, key: str) -> Optional[Dict[str, Any]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if time.monotonic() - entry["created_at"] > entry["ttl"]:
            del self._entries[key]
            return None
        return entry

    def get(self, key: str) -> Any:
        entry = self._live_entry(key)
        if entry is None:
            self._misses += 1
            return None
        self._hits += 1
        return entry["value"]

    def _purge_expired(self) -> None:
        now = time.monotonic()
        expired = [
            key for key, entry in self._entries.items()
            if now - entry["created_at"] > entry["ttl"]
        ]
        for key in expired:
            del self._entries[key]

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """Stores `value` and drops every expired entry, read or not."""
        self._purge_expired()
        self._entries[key] = {
            "value": value,
            "created_at": time.monotonic(),
            "ttl": self.default_ttl if ttl is None else ttl,
        }

    def has(self, key: str) -> bool:
        return self._live_entry(key) is not None

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def stats(self) -> dict:
        total = self._hits + self._misses
        return {
            "size": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
        }


cache = TTLCache()
