"""No-op cache: every read misses and every write is refused."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from kvcache.cache.base import TTL, Key, ttl_to_seconds, validate_key, validate_keys, validate_pairs


class NullCache:
    """Drop-in for code that needs a cache object but should not cache anything.

    Arguments are still validated, so bad keys surface here too.
    Bulk writes report False even though nothing can fail.
    """

    def get(self, key: Key, default: Any = None) -> Any:
        validate_key(key)
        return default

    def set(self, key: Key, value: Any, ttl: TTL = None) -> bool:
        validate_key(key)
        ttl_to_seconds(ttl)
        return False

    def delete(self, key: Key) -> bool:
        validate_key(key)
        return True

    def clear(self) -> bool:
        return True

    def has(self, key: Key) -> bool:
        validate_key(key)
        return False

    def __contains__(self, key: Key) -> bool:
        return self.has(key)

    def get_multiple(self, keys: Iterable[Key], default: Any = None) -> dict[Key, Any]:
        return {key: self.get(key, default) for key in validate_keys(keys)}

    def set_multiple(
        self, values: Mapping[Key, Any] | Iterable[tuple[Key, Any]], ttl: TTL = None
    ) -> bool:
        for key, value in validate_pairs(values):
            self.set(key, value, ttl)
        return False

    def delete_multiple(self, keys: Iterable[Key]) -> bool:
        for key in validate_keys(keys):
            self.delete(key)
        return False
