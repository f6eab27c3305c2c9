"""Redpill AI GPU TEE model catalog and cached model definitions."""
from __future__ import annotations

__version__ = "0.1.0"

# Catalog
from redpill_models.catalog import (
    GPU_TEE_CATALOG,
    REDPILL_BASE_URL,
    REDPILL_DEFAULT_MODEL,
    REDPILL_DEFAULT_MODEL_REF,
    REDPILL_PROVIDER,
    CatalogEntry,
    ModelCost,
    ModelDefinition,
    get_catalog_entry,
    list_catalog,
    require_catalog_entry,
    to_model_definition,
)

# Cache
from redpill_models.cache import (
    ModelCache,
    discover_models,
    get_default_cache,
    reset_model_cache,
    set_default_cache,
)

# Config
from redpill_models.config import RedpillConfig

# Errors
from redpill_models.errors import CatalogError, ConfigurationError, ModelNotFoundError

# Validation
from redpill_models.validation import load_catalog, validate_catalog, validate_entry

__all__ = [
    "__version__",
    # Catalog
    "GPU_TEE_CATALOG",
    "REDPILL_BASE_URL",
    "REDPILL_DEFAULT_MODEL",
    "REDPILL_DEFAULT_MODEL_REF",
    "REDPILL_PROVIDER",
    "CatalogEntry",
    "ModelCost",
    "ModelDefinition",
    "get_catalog_entry",
    "list_catalog",
    "require_catalog_entry",
    "to_model_definition",
    # Cache
    "ModelCache",
    "discover_models",
    "get_default_cache",
    "reset_model_cache",
    "set_default_cache",
    # Config
    "RedpillConfig",
    # Errors
    "CatalogError",
    "ConfigurationError",
    "ModelNotFoundError",
    # Validation
    "load_catalog",
    "validate_catalog",
    "validate_entry",
]
