"""Model catalog types."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

TEXT = "text"
IMAGE = "image"
MODALITIES = (TEXT, IMAGE)


@dataclass(frozen=True)
class CatalogEntry:
    """Static metadata about a GPU TEE model."""

    id: str
    """API identifier in provider/model-name form (e.g., "deepseek/deepseek-v3.2")."""

    name: str
    """Human-readable name."""

    context_window: int
    """Max total tokens (input + output)."""

    max_tokens: int
    """Max output tokens per response."""

    input: tuple[str, ...] = (TEXT,)
    """Supported input modalities, drawn from ``MODALITIES``."""

    reasoning: bool = False
    """Whether the model supports extended reasoning."""

    @property
    def supports_vision(self) -> bool:
        return IMAGE in self.input


@dataclass(frozen=True)
class ModelCost:
    """Per-token pricing attached to a model definition."""

    input: float = 0
    output: float = 0
    cache_read: float = 0
    cache_write: float = 0

    def to_dict(self) -> dict[str, float]:
        return {
            "input": self.input,
            "output": self.output,
            "cacheRead": self.cache_read,
            "cacheWrite": self.cache_write,
        }


ZERO_COST = ModelCost()


@dataclass(frozen=True)
class ModelDefinition:
    """A catalog entry reshaped for a generic model registry."""

    id: str
    name: str
    context_window: int
    max_tokens: int
    cost: ModelCost = field(default=ZERO_COST)
    input: tuple[str, ...] = (TEXT,)
    reasoning: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Render the ``ModelDefinitionConfig`` record shape."""
        return {
            "id": self.id,
            "name": self.name,
            "contextWindow": self.context_window,
            "maxTokens": self.max_tokens,
            "cost": self.cost.to_dict(),
            "input": list(self.input),
            "reasoning": self.reasoning,
        }
