"""
Process-wide memoization caches for stdkit.
"""

import threading
from typing import Any, Callable, Dict, Hashable, Optional


_MISSING = object()


class MemoCache:
    """
    Append-only lookup table shared across calls.

    Entries are populated lazily and never evicted. Reads take no lock;
    inserts are serialized so that concurrent callers computing the same
    key all observe the first stored value.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._data: Dict[Hashable, Any] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._data.get(key, default)

    def get_or_set(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        """Return the cached value for key, computing it with factory on a miss."""
        value = self._data.get(key, _MISSING)
        if value is not _MISSING:
            self.hits += 1
            return value

        computed = factory()
        with self._lock:
            self.misses += 1
            return self._data.setdefault(key, computed)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self.hits = 0
            self.misses = 0

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "hits": self.hits,
            "misses": self.misses,
            "size": len(self._data),
        }

    def __contains__(self, key: Hashable) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


_registry: Dict[str, MemoCache] = {}
_registry_lock = threading.Lock()


def get_cache(name: str) -> MemoCache:
    """Return the named process-wide cache, creating it on first use."""
    cache: Optional[MemoCache] = _registry.get(name)
    if cache is None:
        with _registry_lock:
            cache = _registry.setdefault(name, MemoCache(name))
    return cache


def clear_caches() -> None:
    """Empty every registered cache."""
    with _registry_lock:
        for cache in _registry.values():
            cache.clear()
