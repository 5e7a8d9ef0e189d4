# src/colloquy/providers/base.py
"""Abstract base classes for generation and embedding providers."""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

# Role-switch markers that end a spoken reply
DEFAULT_STOP_SEQUENCES = ("\n\n", "User:", "Assistant:", "Human:", "AI:")


class SamplingParams(BaseModel):
    """Pass-through sampling configuration for the generative backend.

    Defaults suit short spoken replies: low temperature and a few dozen
    output tokens.
    """

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    top_p: float = Field(default=0.8, gt=0.0, le=1.0)
    max_tokens: int = Field(default=30, gt=0)
    stop: tuple[str, ...] = DEFAULT_STOP_SEQUENCES


class LLMClient(ABC):
    """Abstract base class for text generation backends.

    The interface is a single prompt in, text out. Implementations raise on
    transport errors; callers decide how to fall back.

    Example:
        class MyLLMClient(LLMClient):
            def complete(self, prompt, params=None, timeout=None):
                return my_api.generate(prompt, temperature=params.temperature)
    """

    @abstractmethod
    def complete(
        self,
        prompt: str,
        params: SamplingParams | None = None,
        timeout: float | None = None,
    ) -> str:
        """Generate text for a prompt.

        Args:
            prompt: The fully synthesized prompt.
            params: Sampling parameters. If None, use SamplingParams defaults.
            timeout: Optional request timeout in seconds.

        Returns:
            The raw generated text.
        """
        ...

    async def acomplete(
        self,
        prompt: str,
        params: SamplingParams | None = None,
        timeout: float | None = None,
    ) -> str:
        """Generate text for a prompt (async).

        Default implementation calls sync complete(). Override in subclasses
        for true async behavior.
        """
        return self.complete(prompt, params, timeout)


class EmbeddingClient(ABC):
    """Abstract base class for embedding providers.

    Example:
        class MyEmbeddingClient(EmbeddingClient):
            def embed(self, texts):
                return my_api.embed_batch(texts)
    """

    @abstractmethod
    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for multiple texts.

        Returns:
            List of embedding vectors, one per input text.
            Order is preserved (result[i] corresponds to texts[i]).
        """
        ...
