"""Error hierarchy for the Redpill model catalog."""
from __future__ import annotations


class CatalogError(Exception):
    """Base error for all redpill_models errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(CatalogError):
    """Invalid configuration or malformed catalog data."""


class ModelNotFoundError(CatalogError):
    """No catalog entry has the requested id."""

    def __init__(self, model_id: str, *, cause: Exception | None = None) -> None:
        super().__init__(f"Unknown model: {model_id!r}", cause=cause)
        self.model_id = model_id
