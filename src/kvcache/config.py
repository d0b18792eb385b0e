"""Cache configuration via environment variables."""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "KVCACHE_", "env_file": ".env", "env_file_encoding": "utf-8"}

    backend: Literal["memory", "null"] = "memory"
    default_ttl_seconds: float | None = None  # applied to seed data only
