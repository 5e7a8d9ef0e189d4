# src/colloquy/configuration/base.py
"""Protocol definitions for provider configuration objects.

Implementations can use @dataclass(frozen=True) for immutability. Any
object with the right methods satisfies the protocol without inheritance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from colloquy.embedder import Embedder
    from colloquy.providers import LLMClient
    from colloquy.settings import Settings


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Provider configurations build the two external components:
    - Embedder: Creates vector embeddings for the vector index
    - LLMClient: Generates persona replies

    Example implementation:
        @dataclass(frozen=True)
        class LiteLLMProvider:
            llm: str
            embedding: str

            def build_embedder(self, settings: Settings) -> Embedder: ...
            def build_llm_client(self, settings: Settings) -> LLMClient: ...
    """

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build an embedder for indexing and querying.

        Args:
            settings: Settings containing num_retries for rate limit handling.
        """
        ...

    def build_llm_client(self, settings: Settings) -> LLMClient:
        """Build the generative backend client.

        Args:
            settings: Settings containing num_retries for rate limit handling.
        """
        ...
