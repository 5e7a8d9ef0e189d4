# src/colloquy/providers/__init__.py
"""Generation and embedding provider interfaces."""

from colloquy.providers.base import (
    DEFAULT_STOP_SEQUENCES,
    EmbeddingClient,
    LLMClient,
    SamplingParams,
)

__all__ = [
    "DEFAULT_STOP_SEQUENCES",
    "EmbeddingClient",
    "LLMClient",
    "SamplingParams",
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]


def __getattr__(name: str) -> type:
    """Lazy import LiteLLM clients so the ABCs import without litellm."""
    if name in ("LiteLLMClient", "LiteLLMEmbeddingClient"):
        from colloquy.providers import litellm as litellm_providers

        return getattr(litellm_providers, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
