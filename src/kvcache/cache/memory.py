"""Simple in-memory TTL cache."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from kvcache.cache.base import TTL, Key, ttl_to_seconds, validate_key, validate_keys, validate_pairs
from kvcache.models import CacheEntry

logger = logging.getLogger(__name__)


class TTLCache:
    """Dict-backed cache with optional per-entry expiry.

    Expired entries are dropped lazily, when ``get`` or ``has`` touches them.
    There is no background reaper; call ``purge_expired`` to sweep by hand.

    Not thread-safe. Share an instance across threads only behind an
    external lock.
    """

    def __init__(
        self,
        source: Mapping[Key, Any] | Iterable[tuple[Key, Any]] | None = None,
        ttl: TTL = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._clock = clock
        self._store: dict[Key, CacheEntry] = {}
        seconds = ttl_to_seconds(ttl)
        if source is not None:
            self.set_multiple(source, seconds)

    def _is_valid(self, key: Key) -> bool:
        entry = self._store.get(key)
        if entry is None:
            return False
        if entry.is_expired(self._clock()):
            del self._store[key]
            logger.debug("Evicted expired cache entry %r", key)
            return False
        return True

    # ------------------------------------------------------------------
    # Single-entry operations
    # ------------------------------------------------------------------

    def get(self, key: Key, default: Any = None) -> Any:
        validate_key(key)
        if not self._is_valid(key):
            return default
        return self._store[key].value

    def set(self, key: Key, value: Any, ttl: TTL = None) -> bool:
        validate_key(key)
        seconds = ttl_to_seconds(ttl)
        expires_at = None if seconds is None else self._clock() + seconds
        self._store[key] = CacheEntry(value=value, expires_at=expires_at)
        return True

    def delete(self, key: Key) -> bool:
        validate_key(key)
        self._store.pop(key, None)
        return True

    def clear(self) -> bool:
        logger.debug("Clearing %d cache entries", len(self._store))
        self._store = {}
        return True

    def has(self, key: Key) -> bool:
        """Return True if *key* is present and not yet expired.

        The answer can be out of date as soon as it is returned when the cache
        is shared, so don't use it to guard a following ``get`` or ``set``.
        """
        validate_key(key)
        return self._is_valid(key)

    def __contains__(self, key: Key) -> bool:
        return self.has(key)

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------

    def get_multiple(self, keys: Iterable[Key], default: Any = None) -> dict[Key, Any]:
        return {key: self.get(key, default) for key in validate_keys(keys)}

    def set_multiple(
        self, values: Mapping[Key, Any] | Iterable[tuple[Key, Any]], ttl: TTL = None
    ) -> bool:
        pairs = validate_pairs(values)
        seconds = ttl_to_seconds(ttl)
        results = [self.set(key, value, seconds) for key, value in pairs]
        return all(results)

    def delete_multiple(self, keys: Iterable[Key]) -> bool:
        for key in validate_keys(keys):
            self.delete(key)
        return True

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    def purge_expired(self) -> int:
        """Drop every entry that has expired. Returns the number removed."""
        now = self._clock()
        stale = [key for key, entry in self._store.items() if entry.is_expired(now)]
        for key in stale:
            del self._store[key]
        if stale:
            logger.debug("Purged %d expired cache entries", len(stale))
        return len(stale)
