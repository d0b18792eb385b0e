"""Tests for settings and the cache factory."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kvcache.cache.memory import TTLCache
from kvcache.cache.null import NullCache
from kvcache.config import Settings
from kvcache.dependencies import create_cache, get_settings


class TestSettings:
    def test_defaults(self, settings):
        assert settings.backend == "memory"
        assert settings.default_ttl_seconds is None

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("KVCACHE_BACKEND", "null")
        monkeypatch.setenv("KVCACHE_DEFAULT_TTL_SECONDS", "30")
        settings = Settings(_env_file=None)
        assert settings.backend == "null"
        assert settings.default_ttl_seconds == 30.0

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValidationError):
            Settings(backend="redis", _env_file=None)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestCreateCache:
    def test_memory_backend(self, settings):
        cache = create_cache(settings=settings)
        assert isinstance(cache, TTLCache)

    def test_null_backend(self):
        cache = create_cache({"a": 1}, settings=Settings(backend="null", _env_file=None))
        assert isinstance(cache, NullCache)
        assert not cache.has("a")

    def test_seed_data(self, settings):
        cache = create_cache({"a": 1, "b": 2}, settings=settings)
        assert cache.get_multiple(["a", "b"]) == {"a": 1, "b": 2}

    def test_seed_uses_default_ttl(self):
        cache = create_cache({"a": 1}, settings=Settings(default_ttl_seconds=-1, _env_file=None))
        assert not cache.has("a")

    def test_each_call_returns_new_instance(self, settings):
        first = create_cache(settings=settings)
        second = create_cache(settings=settings)
        assert first is not second
        first.set("item", "data")
        assert not second.has("item")
