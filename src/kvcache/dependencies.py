"""Helpers for wiring a cache into application code."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Any

from kvcache.cache.base import CacheInterface, Key
from kvcache.cache.memory import TTLCache
from kvcache.cache.null import NullCache
from kvcache.config import Settings

logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def create_cache(
    source: Mapping[Key, Any] | Iterable[tuple[Key, Any]] | None = None,
    settings: Settings | None = None,
) -> CacheInterface:
    """Build a new cache for the configured backend.

    Each call returns a fresh instance; pass it to consumers explicitly.
    *source* seeds the in-memory backend using ``default_ttl_seconds`` and is
    ignored by the null backend.
    """
    if settings is None:
        settings = get_settings()

    logger.debug("Creating %s cache", settings.backend)
    if settings.backend == "null":
        return NullCache()
    return TTLCache(source, ttl=settings.default_ttl_seconds)
