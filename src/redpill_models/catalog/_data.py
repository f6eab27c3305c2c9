"""Static catalog of Redpill AI models served from GPU Trusted Execution Environments.

Every model runs inside a hardware enclave with memory encryption and
attestation. Entries are grouped by the hosting TEE provider; the grouping
is documentary only and is not recorded on the entries.
"""
from __future__ import annotations

from redpill_models.catalog.types import IMAGE, TEXT, CatalogEntry

REDPILL_PROVIDER = "redpill"

REDPILL_BASE_URL = "https://api.redpill.ai/v1"

REDPILL_DEFAULT_MODEL = "deepseek/deepseek-v3.2"

REDPILL_DEFAULT_MODEL_REF = f"{REDPILL_PROVIDER}/{REDPILL_DEFAULT_MODEL}"

# ---------------------------------------------------------------------------
# Phala Network
# ---------------------------------------------------------------------------

PHALA_MODELS: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        id="z-ai/glm-4.7-flash",
        name="GLM 4.7 Flash (GPU TEE)",
        context_window=203_000,
        max_tokens=128_000,
    ),
    CatalogEntry(
        id="qwen/qwen3-embedding-8b",
        name="Qwen3 Embedding 8B (GPU TEE)",
        context_window=33_000,
        max_tokens=512,
    ),
    CatalogEntry(
        id="phala/uncensored-24b",
        name="Uncensored 24B (GPU TEE)",
        context_window=33_000,
        max_tokens=8192,
    ),
    CatalogEntry(
        id="deepseek/deepseek-v3.2",
        name="DeepSeek v3.2 (GPU TEE)",
        context_window=164_000,
        max_tokens=8192,
    ),
    CatalogEntry(
        id="qwen/qwen3-vl-30b-a3b-instruct",
        name="Qwen3 VL 30B (GPU TEE)",
        context_window=128_000,
        max_tokens=8192,
        input=(TEXT, IMAGE),
    ),
    CatalogEntry(
        id="sentence-transformers/all-minilm-l6-v2",
        name="All-MiniLM-L6-v2 (GPU TEE)",
        context_window=512,
        max_tokens=512,
    ),
    CatalogEntry(
        id="qwen/qwen-2.5-7b-instruct",
        name="Qwen 2.5 7B Instruct (GPU TEE)",
        context_window=33_000,
        max_tokens=8192,
    ),
    CatalogEntry(
        id="google/gemma-3-27b-it",
        name="Gemma 3 27B IT (GPU TEE)",
        context_window=54_000,
        max_tokens=8192,
    ),
    CatalogEntry(
        id="openai/gpt-oss-120b",
        name="GPT OSS 120B (GPU TEE)",
        context_window=131_000,
        max_tokens=8192,
    ),
    CatalogEntry(
        id="openai/gpt-oss-20b",
        name="GPT OSS 20B (GPU TEE)",
        context_window=131_000,
        max_tokens=8192,
    ),
)

# ---------------------------------------------------------------------------
# Tinfoil
# ---------------------------------------------------------------------------

TINFOIL_MODELS: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        id="moonshotai/kimi-k2-thinking",
        name="Kimi K2 Thinking (GPU TEE)",
        context_window=262_000,
        max_tokens=8192,
        reasoning=True,
    ),
    CatalogEntry(
        id="deepseek/deepseek-r1-0528",
        name="DeepSeek R1 (GPU TEE)",
        context_window=164_000,
        max_tokens=8192,
        reasoning=True,
    ),
    CatalogEntry(
        id="qwen/qwen3-coder-480b-a35b-instruct",
        name="Qwen3 Coder 480B (GPU TEE)",
        context_window=262_000,
        max_tokens=8192,
    ),
    CatalogEntry(
        id="meta-llama/llama-3.3-70b-instruct",
        name="Llama 3.3 70B Instruct (GPU TEE)",
        context_window=131_000,
        max_tokens=8192,
    ),
)

# ---------------------------------------------------------------------------
# Chutes
# ---------------------------------------------------------------------------

CHUTES_MODELS: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        id="minimax/minimax-m2.1",
        name="MiniMax M2.1 (GPU TEE)",
        context_window=197_000,
        max_tokens=8192,
    ),
)

# ---------------------------------------------------------------------------
# Near-AI
# ---------------------------------------------------------------------------

NEAR_AI_MODELS: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        id="deepseek/deepseek-chat-v3.1",
        name="DeepSeek Chat v3.1 (GPU TEE)",
        context_window=164_000,
        max_tokens=8192,
    ),
    CatalogEntry(
        id="qwen/qwen3-30b-a3b-instruct-2507",
        name="Qwen3 30B Instruct (GPU TEE)",
        context_window=262_000,
        max_tokens=8192,
    ),
    CatalogEntry(
        id="z-ai/glm-4.6",
        name="GLM 4.6 (GPU TEE)",
        context_window=203_000,
        max_tokens=128_000,
    ),
)

GPU_TEE_CATALOG: tuple[CatalogEntry, ...] = (
    PHALA_MODELS + TINFOIL_MODELS + CHUTES_MODELS + NEAR_AI_MODELS
)
