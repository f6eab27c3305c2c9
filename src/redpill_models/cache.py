"""Time-bounded cache of model definitions built from the static catalog."""
from __future__ import annotations

import logging
import threading
import time
from collections.abc import Sequence
from typing import Any, Callable

from redpill_models.catalog import GPU_TEE_CATALOG, to_model_definition
from redpill_models.catalog.types import CatalogEntry, ModelDefinition
from redpill_models.config import DEFAULT_CACHE_TTL, RedpillConfig, check_ttl
from redpill_models.errors import ConfigurationError

logger = logging.getLogger(__name__)


class ModelCache:
    """Memoizes the catalog-to-definition mapping for a fixed TTL.

    Within the TTL window :meth:`discover` returns the very same list object,
    so callers may compare by identity (or by :attr:`generation`) to skip
    redundant downstream work.
    """

    def __init__(
        self,
        catalog: Sequence[CatalogEntry] = GPU_TEE_CATALOG,
        *,
        ttl: float = DEFAULT_CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        check_ttl(ttl, "ttl")
        self._catalog = tuple(catalog)
        self._ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._models: list[ModelDefinition] | None = None
        self._last_computed_at: float | None = None
        self._generation = 0

    @classmethod
    def from_config(cls, config: RedpillConfig, **kwargs: Any) -> ModelCache:
        return cls(ttl=config.cache_ttl, **kwargs)

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def generation(self) -> int:
        """Number of times the definition list has been (re)built."""
        return self._generation

    @property
    def last_computed_at(self) -> float | None:
        return self._last_computed_at

    def discover(self) -> list[ModelDefinition]:
        with self._lock:
            now = self._clock()
            if (
                self._models is not None
                and self._last_computed_at is not None
                and now - self._last_computed_at < self._ttl
            ):
                return self._models

            models = [to_model_definition(entry) for entry in self._catalog]
            self._models = models
            self._last_computed_at = now
            self._generation += 1
            logger.debug(
                "Built %d model definitions (generation=%d)",
                len(models),
                self._generation,
            )
            return models

    def reset(self) -> None:
        """Drop the cached list so the next :meth:`discover` rebuilds it."""
        with self._lock:
            self._models = None
            self._last_computed_at = None


# ---------------------------------------------------------------------------
# Process-wide default cache
# ---------------------------------------------------------------------------

_default_cache: ModelCache | None = None


def set_default_cache(cache: ModelCache | None) -> None:
    global _default_cache
    _default_cache = cache


def get_default_cache() -> ModelCache:
    """Return the default cache, creating it from the environment on first use.

    An invalid environment falls back to the built-in TTL so that discovery
    through the default cache never fails.
    """
    global _default_cache
    if _default_cache is None:
        try:
            config = RedpillConfig.from_env()
        except ConfigurationError as exc:
            logger.warning("Ignoring invalid Redpill configuration: %s", exc)
            config = RedpillConfig()
        _default_cache = ModelCache.from_config(config)
    return _default_cache


def discover_models() -> list[ModelDefinition]:
    """Return cached model definitions from the default cache."""
    return get_default_cache().discover()


def reset_model_cache() -> None:
    if _default_cache is not None:
        _default_cache.reset()
