# tests/providers/test_litellm.py
"""Tests for the LiteLLM clients."""

from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("litellm", reason="Tests require litellm package")

from colloquy.providers import SamplingParams
from colloquy.providers.litellm import ChatModels, LiteLLMClient, LiteLLMEmbeddingClient


def mock_completion_response(content: str | None):
    """Create a mock LiteLLM completion response."""
    mock_response = MagicMock()
    mock_response.choices = [MagicMock()]
    mock_response.choices[0].message.content = content
    return mock_response


class TestLiteLLMClient:
    def test_default_model(self):
        assert LiteLLMClient().model == ChatModels.OLLAMA_TINYLLAMA == "ollama/tinyllama"

    @patch("colloquy.providers.litellm.client.litellm.completion")
    def test_complete(self, mock_completion):
        mock_completion.return_value = mock_completion_response("Funding is pending.")

        result = LiteLLMClient().complete("prompt text")

        assert result == "Funding is pending."
        call_kwargs = mock_completion.call_args.kwargs
        assert call_kwargs["messages"] == [{"role": "user", "content": "prompt text"}]

    @patch("colloquy.providers.litellm.client.litellm.completion")
    def test_sampling_params_forwarded(self, mock_completion):
        mock_completion.return_value = mock_completion_response("ok")
        params = SamplingParams(temperature=0.5, top_p=0.9, max_tokens=12, stop=("User:",))

        LiteLLMClient().complete("p", params, timeout=3.0)

        call_kwargs = mock_completion.call_args.kwargs
        assert call_kwargs["temperature"] == 0.5
        assert call_kwargs["top_p"] == 0.9
        assert call_kwargs["max_tokens"] == 12
        assert call_kwargs["stop"] == ["User:"]
        assert call_kwargs["timeout"] == 3.0

    @patch("colloquy.providers.litellm.client.litellm.completion")
    def test_default_sampling(self, mock_completion):
        mock_completion.return_value = mock_completion_response("ok")

        LiteLLMClient().complete("p")

        call_kwargs = mock_completion.call_args.kwargs
        assert call_kwargs["temperature"] == 0.2
        assert call_kwargs["top_p"] == 0.8
        assert call_kwargs["max_tokens"] == 30
        assert "\n\n" in call_kwargs["stop"]

    @patch("colloquy.providers.litellm.client.litellm.completion")
    def test_api_base_and_key(self, mock_completion):
        mock_completion.return_value = mock_completion_response("ok")

        LiteLLMClient(api_base="http://gpu:11434", api_key="secret").complete("p")

        call_kwargs = mock_completion.call_args.kwargs
        assert call_kwargs["api_base"] == "http://gpu:11434"
        assert call_kwargs["api_key"] == "secret"

    @patch("colloquy.providers.litellm.client.litellm.completion")
    def test_none_content_raises(self, mock_completion):
        mock_completion.return_value = mock_completion_response(None)
        with pytest.raises(ValueError):
            LiteLLMClient().complete("p")

    @patch("colloquy.providers.litellm.client.litellm.completion")
    def test_no_choices_raises(self, mock_completion):
        response = MagicMock()
        response.choices = []
        mock_completion.return_value = response
        with pytest.raises(ValueError):
            LiteLLMClient().complete("p")

    @pytest.mark.asyncio
    @patch("colloquy.providers.litellm.client.litellm.acompletion")
    async def test_acomplete(self, mock_acompletion):
        mock_acompletion.return_value = mock_completion_response("async reply")

        result = await LiteLLMClient().acomplete("p")

        assert result == "async reply"
        mock_acompletion.assert_called_once()


class TestLiteLLMEmbeddingClient:
    @patch("colloquy.providers.litellm.client.litellm.embedding")
    def test_embed_sorted_by_index(self, mock_embedding):
        mock_embedding.return_value = MagicMock(
            data=[
                {"embedding": [0.0, 1.0], "index": 1},
                {"embedding": [1.0, 0.0], "index": 0},
            ]
        )

        vectors = LiteLLMEmbeddingClient().embed(["a", "b"])

        assert vectors == [[1.0, 0.0], [0.0, 1.0]]
        assert mock_embedding.call_args.kwargs["input"] == ["a", "b"]

    @patch("colloquy.providers.litellm.client.litellm.embedding")
    def test_embed_empty(self, mock_embedding):
        assert LiteLLMEmbeddingClient().embed([]) == []
        mock_embedding.assert_not_called()
