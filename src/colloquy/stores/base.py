# src/colloquy/stores/base.py
"""Abstract base class for the vector index."""

from abc import ABC, abstractmethod

from colloquy.models import Chunk, RetrievalResult


class VectorIndex(ABC):
    """Stores one embedding per chunk and answers k-nearest-neighbor queries.

    Implementations are built once per ingestion batch and are read-only
    afterwards. ``query`` on an unbuilt or empty index returns an empty list;
    implementations that cannot do that may raise ``IndexUnavailable``,
    which callers treat the same way.
    """

    @abstractmethod
    def build(self, chunks: list[Chunk]) -> None:
        """Embed the chunks and replace the whole index with them."""
        ...

    @abstractmethod
    def query(self, text: str, k: int) -> list[RetrievalResult]:
        """Return up to k results ordered by descending score."""
        ...

    @property
    @abstractmethod
    def is_built(self) -> bool:
        """True once build() has completed, even for an empty chunk list."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of indexed chunks."""
        ...

    def __len__(self) -> int:
        return self.count()
