"""Tests for catalog types."""
from __future__ import annotations

import dataclasses

import pytest

from redpill_models.catalog.types import (
    ZERO_COST,
    CatalogEntry,
    ModelCost,
    ModelDefinition,
)


class TestCatalogEntry:
    def test_defaults(self) -> None:
        entry = CatalogEntry(id="a/b", name="B", context_window=100, max_tokens=10)
        assert entry.input == ("text",)
        assert entry.reasoning is False
        assert entry.supports_vision is False

    def test_hashable(self) -> None:
        entry = CatalogEntry(id="a/b", name="B", context_window=100, max_tokens=10)
        assert entry in {entry}


class TestModelCost:
    def test_zero_defaults(self) -> None:
        assert ModelCost() == ZERO_COST
        assert ZERO_COST.to_dict() == {
            "input": 0,
            "output": 0,
            "cacheRead": 0,
            "cacheWrite": 0,
        }

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            ZERO_COST.input = 1  # type: ignore[misc]


class TestModelDefinition:
    def test_to_dict_shape(self) -> None:
        model = ModelDefinition(
            id="qwen/qwen3-vl-30b-a3b-instruct",
            name="Qwen3 VL 30B (GPU TEE)",
            context_window=128_000,
            max_tokens=8192,
            input=("text", "image"),
        )
        assert model.to_dict() == {
            "id": "qwen/qwen3-vl-30b-a3b-instruct",
            "name": "Qwen3 VL 30B (GPU TEE)",
            "contextWindow": 128_000,
            "maxTokens": 8192,
            "cost": {"input": 0, "output": 0, "cacheRead": 0, "cacheWrite": 0},
            "input": ["text", "image"],
            "reasoning": False,
        }

    def test_default_cost_is_zero(self) -> None:
        model = ModelDefinition(id="a", name="A", context_window=1, max_tokens=1)
        assert model.cost is ZERO_COST
