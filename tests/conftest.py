"""Shared test fixtures."""

from __future__ import annotations

import pytest

from kvcache.cache.memory import TTLCache
from kvcache.cache.null import NullCache
from kvcache.config import Settings


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> TTLCache:
    return TTLCache(clock=clock)


@pytest.fixture
def null_cache() -> NullCache:
    return NullCache()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)
