"""Pydantic schemas and errors shared by the cache implementations."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class KVCacheError(Exception):
    """Base exception for kvcache."""


class InvalidArgumentError(KVCacheError, ValueError):
    """Raised when an argument passed to a cache operation is not usable."""


class InvalidKeyError(InvalidArgumentError):
    """Raised when a cache key is not a scalar value."""


class InvalidCollectionError(InvalidArgumentError):
    """Raised when a bulk operation receives something that is not a collection."""


# ---------------------------------------------------------------------------
# Storage schemas
# ---------------------------------------------------------------------------

class CacheEntry(BaseModel):
    """A stored value plus its absolute expiry instant (None = permanent)."""

    model_config = ConfigDict(frozen=True)

    value: Any
    expires_at: float | None = None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and self.expires_at <= now
