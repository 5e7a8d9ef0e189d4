# src/colloquy/providers/litellm/client.py
"""LiteLLM client implementations for generation and embedding APIs."""

from typing import Any

import litellm

from colloquy.providers.base import EmbeddingClient, LLMClient, SamplingParams
from colloquy.providers.litellm.models import ChatModels, EmbeddingModels


class LiteLLMClient(LLMClient):
    """LiteLLM-based client for text generation.

    Supports any model available through LiteLLM (Ollama, OpenAI, Anthropic,
    Gemini, Bedrock, etc.).

    Example:
        from colloquy.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.OLLAMA_TINYLLAMA)
        text = client.complete("User: Hello. Assistant:")
    """

    def __init__(
        self,
        model: str = ChatModels.OLLAMA_TINYLLAMA,
        api_base: str | None = None,
        api_key: str | None = None,
        num_retries: int = 2,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier, e.g. "ollama/tinyllama"
            api_base: Optional backend URL (e.g. a non-default Ollama host)
            api_key: Optional API key; otherwise LiteLLM reads provider env vars
            num_retries: Retries on rate limit errors. LiteLLM handles backoff.
        """
        self.model = model
        self.api_base = api_base
        self.api_key = api_key
        self.num_retries = num_retries

    def _completion_kwargs(
        self,
        prompt: str,
        params: SamplingParams | None,
        timeout: float | None,
    ) -> dict[str, Any]:
        params = params or SamplingParams()
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": params.temperature,
            "top_p": params.top_p,
            "max_tokens": params.max_tokens,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if params.stop:
            kwargs["stop"] = list(params.stop)
        if timeout is not None:
            kwargs["timeout"] = timeout
        if self.api_base:
            kwargs["api_base"] = self.api_base
        if self.api_key:
            kwargs["api_key"] = self.api_key
        return kwargs

    def _extract_text(self, response: Any) -> str:
        if not response.choices:
            raise ValueError(f"LLM returned no choices for model {self.model}")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError(f"LLM returned None content for model {self.model}")
        return str(content)

    def complete(
        self,
        prompt: str,
        params: SamplingParams | None = None,
        timeout: float | None = None,
    ) -> str:
        """Generate text using LiteLLM."""
        response = litellm.completion(**self._completion_kwargs(prompt, params, timeout))
        return self._extract_text(response)

    async def acomplete(
        self,
        prompt: str,
        params: SamplingParams | None = None,
        timeout: float | None = None,
    ) -> str:
        """Generate text using LiteLLM (async)."""
        response = await litellm.acompletion(**self._completion_kwargs(prompt, params, timeout))
        return self._extract_text(response)


class LiteLLMEmbeddingClient(EmbeddingClient):
    """LiteLLM-based embedding client.

    Example:
        from colloquy.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels

        client = LiteLLMEmbeddingClient(model=EmbeddingModels.OLLAMA_NOMIC)
        vectors = client.embed(["Hello world", "How are you?"])
    """

    def __init__(
        self,
        model: str = EmbeddingModels.OLLAMA_NOMIC,
        api_base: str | None = None,
        api_key: str | None = None,
        num_retries: int = 2,
    ) -> None:
        self.model = model
        self.api_base = api_base
        self.api_key = api_key
        self.num_retries = num_retries

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM."""
        if not texts:
            return []

        kwargs: dict[str, Any] = {
            "model": self.model,
            "input": texts,
            "num_retries": self.num_retries,
        }
        if self.api_base:
            kwargs["api_base"] = self.api_base
        if self.api_key:
            kwargs["api_key"] = self.api_key

        response = litellm.embedding(**kwargs)
        # Sort by index to maintain order
        sorted_data = sorted(response.data, key=lambda x: x["index"])
        return [item["embedding"] for item in sorted_data]
