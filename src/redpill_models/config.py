from __future__ import annotations

import math
import os
from dataclasses import dataclass

from redpill_models.catalog._data import (
    REDPILL_BASE_URL,
    REDPILL_DEFAULT_MODEL,
    REDPILL_PROVIDER,
)
from redpill_models.errors import ConfigurationError

DEFAULT_CACHE_TTL = 60 * 60.0  # seconds


def check_ttl(ttl: float, name: str = "cache_ttl") -> None:
    """Raise :class:`ConfigurationError` unless *ttl* is finite and positive."""
    if not (math.isfinite(ttl) and ttl > 0):
        raise ConfigurationError(f"{name} must be a finite positive number, got {ttl!r}")


@dataclass(frozen=True)
class RedpillConfig:
    base_url: str = REDPILL_BASE_URL
    default_model: str = REDPILL_DEFAULT_MODEL
    cache_ttl: float = DEFAULT_CACHE_TTL

    def __post_init__(self) -> None:
        check_ttl(self.cache_ttl)

    @property
    def default_model_ref(self) -> str:
        return f"{REDPILL_PROVIDER}/{self.default_model}"

    @classmethod
    def from_env(cls) -> RedpillConfig:
        """Create config from environment variables.

        Checks REDPILL_BASE_URL, REDPILL_DEFAULT_MODEL and REDPILL_CACHE_TTL,
        falling back to the built-in defaults for any that are unset.
        """
        raw_ttl = os.environ.get("REDPILL_CACHE_TTL")
        ttl = DEFAULT_CACHE_TTL
        if raw_ttl:
            try:
                ttl = float(raw_ttl)
            except ValueError as exc:
                raise ConfigurationError(
                    f"REDPILL_CACHE_TTL must be a number, got {raw_ttl!r}",
                    cause=exc,
                ) from exc
        return cls(
            base_url=os.environ.get("REDPILL_BASE_URL", REDPILL_BASE_URL),
            default_model=os.environ.get("REDPILL_DEFAULT_MODEL", REDPILL_DEFAULT_MODEL),
            cache_ttl=ttl,
        )
