"""
In-memory cache with absolute expiry

Process-local key/value store used for hot read paths (product catalog).
For multiple API instances, consider using Redis.
"""
import threading
import time
from typing import Any, Dict, Optional, Tuple

from orderdesk.core.config import get_settings


class MemoryCache:
    """
    Dictionary-backed cache where each entry expires a fixed time after it
    was set. Expired entries are dropped lazily on read.

    `generation` goes up on every removal. A reader that loads data, then
    caches it, passes the generation it saw before loading to `set`; if an
    invalidation happened in between, the stale value is not stored.
    """

    def __init__(self, default_ttl: float = 900):
        # {key: (expires_at, value)}
        self._entries: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()
        self._generation = 0
        self.default_ttl = default_ttl

    @property
    def generation(self) -> int:
        return self._generation

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            expires_at, value = entry
            if expires_at <= time.monotonic():
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: Any, ttl: Optional[float] = None, generation: Optional[int] = None) -> bool:
        """
        Store `value` under `key`

        Returns:
            False if `generation` is given and the cache was invalidated since
        """
        expires_at = time.monotonic() + (self.default_ttl if ttl is None else ttl)
        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            self._entries[key] = (expires_at, value)
            return True

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)
            self._generation += 1

    def remove_by_pattern(self, pattern: str) -> int:
        """Remove every key containing `pattern` (case-insensitive). Returns how many were removed."""
        needle = pattern.lower()
        with self._lock:
            keys = [key for key in self._entries if needle in key.lower()]
            for key in keys:
                del self._entries[key]
            self._generation += 1
        return len(keys)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._generation += 1

    def __len__(self) -> int:
        return len(self._entries)


# Global cache instance
cache = MemoryCache(default_ttl=get_settings().CACHE_TTL_SECONDS)
