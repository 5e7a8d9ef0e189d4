# src/colloquy/embedder/client.py
"""Embedder backed by a remote embedding client."""

import logging

from colloquy.embedder.base import Embedder
from colloquy.providers.base import EmbeddingClient

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 64


class ClientEmbedder(Embedder):
    """Embeds through an EmbeddingClient, splitting large corpora into batches.

    Example:
        from colloquy.providers.litellm import LiteLLMEmbeddingClient

        client = LiteLLMEmbeddingClient(model="ollama/nomic-embed-text")
        embedder = ClientEmbedder(client, batch_size=32)
    """

    def __init__(
        self,
        embedding_client: EmbeddingClient,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self._client = embedding_client
        self.batch_size = batch_size

    def embed_text(self, text: str) -> list[float]:
        return self._request([text])[0]

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        vectors: list[list[float]] = []
        for start in range(0, len(texts), self.batch_size):
            vectors.extend(self._request(texts[start : start + self.batch_size]))
        if len(texts) > self.batch_size:
            logger.debug("Embedded %d texts in batches of %d", len(texts), self.batch_size)
        return vectors

    def _request(self, batch: list[str]) -> list[list[float]]:
        vectors = self._client.embed(batch)
        if len(vectors) != len(batch):
            raise ValueError(
                f"Embedding client returned {len(vectors)} vectors for {len(batch)} texts"
            )
        return vectors
