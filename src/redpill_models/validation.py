"""Validation for catalog data loaded from outside the package."""
from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from redpill_models.catalog.types import MODALITIES, CatalogEntry
from redpill_models.errors import ConfigurationError


def validate_entry(entry: CatalogEntry) -> None:
    """Raise :class:`ConfigurationError` if *entry* is malformed."""
    if not entry.id:
        raise ConfigurationError("Catalog entry has an empty id")
    if not entry.input:
        raise ConfigurationError(f"{entry.id}: input modalities must not be empty")
    unknown = [m for m in entry.input if m not in MODALITIES]
    if unknown:
        raise ConfigurationError(f"{entry.id}: unknown input modalities {unknown}")
    if entry.context_window <= 0:
        raise ConfigurationError(
            f"{entry.id}: context_window must be positive, got {entry.context_window}"
        )
    if entry.max_tokens <= 0:
        raise ConfigurationError(
            f"{entry.id}: max_tokens must be positive, got {entry.max_tokens}"
        )
    if entry.max_tokens > entry.context_window:
        raise ConfigurationError(
            f"{entry.id}: max_tokens ({entry.max_tokens}) exceeds "
            f"context_window ({entry.context_window})"
        )


def validate_catalog(entries: Iterable[CatalogEntry]) -> None:
    """Validate every entry and check that ids are unique."""
    seen: set[str] = set()
    for entry in entries:
        validate_entry(entry)
        if entry.id in seen:
            raise ConfigurationError(f"Duplicate catalog id: {entry.id}")
        seen.add(entry.id)


_MISSING = object()


def _require(raw: dict[str, Any], key: str, kind: type, default: Any = _MISSING) -> Any:
    if key not in raw:
        if default is not _MISSING:
            return default
        raise ConfigurationError(f"Catalog entry missing field {key!r}: {raw}")
    value = raw[key]
    # bool is an int subclass; reject it where a count is expected
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigurationError(
            f"Catalog field {key!r} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def entry_from_dict(raw: dict[str, Any]) -> CatalogEntry:
    """Build a :class:`CatalogEntry` from a camelCase record."""
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Catalog entry must be an object, got {raw!r}")
    model_id = _require(raw, "id", str)
    modalities = _require(raw, "input", list)
    if not all(isinstance(m, str) for m in modalities):
        raise ConfigurationError(f"{model_id}: input modalities must be strings")
    return CatalogEntry(
        id=model_id,
        name=_require(raw, "name", str, default=model_id),
        context_window=_require(raw, "contextWindow", int),
        max_tokens=_require(raw, "maxTokens", int),
        input=tuple(modalities),
        reasoning=_require(raw, "reasoning", bool, default=False),
    )


def load_catalog(path: Path | str) -> list[CatalogEntry]:
    """Read and validate a JSON array of catalog records."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read catalog {path}: {exc}", cause=exc) from exc
    if not isinstance(raw, list):
        raise ConfigurationError(f"Catalog {path} must contain a JSON array")
    entries = [entry_from_dict(item) for item in raw]
    validate_catalog(entries)
    return entries
