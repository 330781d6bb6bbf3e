"""
In-memory preview cache with per-entry expiry.

Entries carry an absolute expiry instant and are checked lazily: a get() or
has() that finds a stale entry deletes it and reports a miss. There is no
background sweep. Every operation holds the same lock, so the
check-then-delete sequence cannot interleave with a concurrent set().

An optional max_entries bound can be configured; when the map is full, set()
drops expired entries first and then the entry closest to expiry.
"""

import logging
import threading
import time
from collections.abc import Callable
from typing import NamedTuple

from ..models.response import Preview

logger = logging.getLogger(__name__)

DEFAULT_TTL = 24 * 60 * 60.0


class CacheEntry(NamedTuple):
    value: Preview
    expires_at: float


class PreviewCache:
    """Thread-safe TTL map from URL to Preview."""

    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL,
        max_entries: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._default_ttl = default_ttl
        self._max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Preview | None:
        """Return the cached preview, or None if missing or expired."""
        with self._lock:
            entry = self._live_entry(key)
            return entry.value if entry else None

    def set(self, key: str, value: Preview, ttl: float | None = None) -> Preview:
        """Store value under key, replacing any existing entry."""
        ttl = self._default_ttl if ttl is None else ttl
        with self._lock:
            if self._max_entries and key not in self._entries:
                self._make_room()
            self._entries[key] = CacheEntry(value, self._clock() + ttl)
        return value

    def has(self, key: str) -> bool:
        with self._lock:
            return self._live_entry(key) is not None

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __bool__(self) -> bool:
        # An empty cache is still a cache
        return True

    # Callers must hold self._lock.

    def _live_entry(self, key: str) -> CacheEntry | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() > entry.expires_at:
            del self._entries[key]
            logger.debug("Cache entry expired for %s", key)
            return None
        return entry

    def _make_room(self):
        if len(self._entries) < self._max_entries:
            return

        now = self._clock()
        for key in [k for k, e in self._entries.items() if now > e.expires_at]:
            del self._entries[key]

        while len(self._entries) >= self._max_entries:
            oldest = min(self._entries, key=lambda k: self._entries[k].expires_at)
            del self._entries[oldest]
            logger.debug("Cache full, evicted %s", oldest)
