"""Redpill GPU TEE model catalog: lookup helpers and definition mapping."""
from __future__ import annotations

from redpill_models.catalog._data import (
    CHUTES_MODELS,
    GPU_TEE_CATALOG,
    NEAR_AI_MODELS,
    PHALA_MODELS,
    REDPILL_BASE_URL,
    REDPILL_DEFAULT_MODEL,
    REDPILL_DEFAULT_MODEL_REF,
    REDPILL_PROVIDER,
    TINFOIL_MODELS,
)
from redpill_models.catalog.types import (
    IMAGE,
    MODALITIES,
    TEXT,
    ZERO_COST,
    CatalogEntry,
    ModelCost,
    ModelDefinition,
)
from redpill_models.errors import ModelNotFoundError


def get_catalog_entry(model_id: str) -> CatalogEntry | None:
    """Look up a catalog entry by exact, case-sensitive ID.

    Returns ``None`` if no match is found.
    """
    for entry in GPU_TEE_CATALOG:
        if entry.id == model_id:
            return entry
    return None


def require_catalog_entry(model_id: str) -> CatalogEntry:
    """Like :func:`get_catalog_entry` but raises :class:`ModelNotFoundError`."""
    entry = get_catalog_entry(model_id)
    if entry is None:
        raise ModelNotFoundError(model_id)
    return entry


def list_catalog(
    *, reasoning: bool | None = None, modality: str | None = None
) -> list[CatalogEntry]:
    """Return catalog entries in definition order, optionally filtered.

    ``reasoning`` keeps only entries whose flag matches; ``modality`` keeps
    only entries accepting that input kind (e.g. ``"image"``).
    """
    entries = list(GPU_TEE_CATALOG)
    if reasoning is not None:
        entries = [e for e in entries if e.reasoning is reasoning]
    if modality is not None:
        entries = [e for e in entries if modality in e.input]
    return entries


def to_model_definition(entry: CatalogEntry) -> ModelDefinition:
    """Convert a catalog entry to a zero-cost model definition."""
    return ModelDefinition(
        id=entry.id,
        name=entry.name,
        context_window=entry.context_window,
        max_tokens=entry.max_tokens,
        cost=ZERO_COST,
        input=entry.input,
        reasoning=entry.reasoning,
    )


__all__ = [
    "CatalogEntry",
    "ModelCost",
    "ModelDefinition",
    "ZERO_COST",
    "TEXT",
    "IMAGE",
    "MODALITIES",
    "GPU_TEE_CATALOG",
    "PHALA_MODELS",
    "TINFOIL_MODELS",
    "CHUTES_MODELS",
    "NEAR_AI_MODELS",
    "REDPILL_PROVIDER",
    "REDPILL_BASE_URL",
    "REDPILL_DEFAULT_MODEL",
    "REDPILL_DEFAULT_MODEL_REF",
    "get_catalog_entry",
    "require_catalog_entry",
    "list_catalog",
    "to_model_definition",
]
