# src/colloquy/configuration/providers/litellm.py
"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from colloquy.providers.litellm.models import DEFAULT_OLLAMA_BASE_URL, ChatModels

if TYPE_CHECKING:
    from colloquy.embedder import Embedder
    from colloquy.providers import LLMClient
    from colloquy.settings import Settings

HASHING_PREFIX = "hashing"


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM for generation and embedding calls.

    LiteLLM provides a unified interface to local Ollama models as well as
    hosted providers such as OpenAI, Anthropic and Gemini.

    Args:
        llm: LiteLLM model identifier for reply generation.
             Examples: "ollama/tinyllama", "openai/gpt-4o-mini"
        embedding: LiteLLM model identifier for embeddings, or "hashing" /
                   "hashing:<dimensions>" for offline feature hashing.
                   Default: "hashing"
        api_base: Base URL of the serving endpoint. Defaults to the local
                  Ollama server for "ollama/" models.
        api_key: Optional API key; LiteLLM otherwise reads provider env vars.

    Example:
        provider = LiteLLMProvider(llm="ollama/tinyllama")

        # Hosted generation with remote embeddings
        provider = LiteLLMProvider(
            llm="openai/gpt-4o-mini",
            embedding="openai/text-embedding-3-small",
        )
    """

    llm: str = ChatModels.OLLAMA_TINYLLAMA
    embedding: str = HASHING_PREFIX
    api_base: str | None = None
    api_key: str | None = None

    def _api_base_for(self, model: str) -> str | None:
        if self.api_base is not None:
            return self.api_base
        if model.startswith("ollama/"):
            return DEFAULT_OLLAMA_BASE_URL
        return None

    @property
    def uses_hashing(self) -> bool:
        return self.embedding == HASHING_PREFIX or self.embedding.startswith(f"{HASHING_PREFIX}:")

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build a HashingEmbedder or a ClientEmbedder over LiteLLM.

        Args:
            settings: Settings containing num_retries for rate limit handling.
        """
        from colloquy.embedder import ClientEmbedder, HashingEmbedder

        if self.uses_hashing:
            return HashingEmbedder.from_name(self.embedding)

        from colloquy.providers.litellm import LiteLLMEmbeddingClient

        embedding_client = LiteLLMEmbeddingClient(
            model=self.embedding,
            api_base=self._api_base_for(self.embedding),
            api_key=self.api_key,
            num_retries=settings.num_retries,
        )
        return ClientEmbedder(embedding_client=embedding_client)

    def build_llm_client(self, settings: Settings) -> LLMClient:
        """Build a LiteLLMClient for reply generation.

        Args:
            settings: Settings containing num_retries.
        """
        from colloquy.providers.litellm import LiteLLMClient

        return LiteLLMClient(
            model=self.llm,
            api_base=self._api_base_for(self.llm),
            api_key=self.api_key,
            num_retries=settings.num_retries,
        )
