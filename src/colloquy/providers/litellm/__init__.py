# src/colloquy/providers/litellm/__init__.py
"""LiteLLM provider clients for Colloquy.

- LiteLLMClient: text generation using LiteLLM
- LiteLLMEmbeddingClient: embeddings using LiteLLM
- ChatModels / EmbeddingModels: curated model constants
"""

from colloquy.providers.litellm.client import LiteLLMClient, LiteLLMEmbeddingClient
from colloquy.providers.litellm.models import (
    DEFAULT_OLLAMA_BASE_URL,
    ChatModels,
    EmbeddingModels,
)

__all__ = [
    "DEFAULT_OLLAMA_BASE_URL",
    "ChatModels",
    "EmbeddingModels",
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
