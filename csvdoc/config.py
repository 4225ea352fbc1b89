"""Service configuration using pydantic-settings."""

from __future__ import annotations

import codecs
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

from .rules import FALLBACK_ENCODING


class Settings(BaseSettings):
    """Runtime settings, overridable through CSVDOC_* environment variables."""

    model_config = {"env_prefix": "CSVDOC_"}

    log_level: str = "INFO"
    fallback_encoding: str = FALLBACK_ENCODING

    @field_validator("fallback_encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value}") from exc
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
