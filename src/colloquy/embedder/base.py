# src/colloquy/embedder/base.py
"""Embedder interface used by the vector index."""

from abc import ABC, abstractmethod


class Embedder(ABC):
    """Turns text into fixed-length vectors.

    The same text must map to the same vector for the lifetime of a process:
    query vectors are compared against vectors computed at build time.
    """

    @abstractmethod
    def embed_text(self, text: str) -> list[float]:
        """Vector for one query or chunk."""
        ...

    @abstractmethod
    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        """Vectors for many texts, in input order. An empty list yields []."""
        ...
