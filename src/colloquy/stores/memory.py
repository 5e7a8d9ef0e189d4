# src/colloquy/stores/memory.py
"""Exact in-memory vector index."""

import logging
from dataclasses import dataclass

import numpy as np

from colloquy.embedder import Embedder
from colloquy.models import Chunk, RetrievalResult
from colloquy.stores.base import VectorIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexEntry:
    """One indexed chunk; ``ordinal`` is its insertion position."""

    ordinal: int
    chunk: Chunk
    vector: np.ndarray


@dataclass(frozen=True)
class _Snapshot:
    entries: tuple[IndexEntry, ...]
    # Row-normalized embedding matrix, shape (n, d)
    matrix: np.ndarray


class InMemoryVectorIndex(VectorIndex):
    """Brute-force cosine similarity over a numpy matrix.

    Exact search is fine for a corpus of a few hundred chunks. Results with
    equal scores keep insertion order. A rebuild swaps in a new immutable
    snapshot, so queries never observe a half-built index and need no lock.
    """

    def __init__(self, embedder: Embedder) -> None:
        self.embedder = embedder
        self._snapshot: _Snapshot | None = None

    @property
    def is_built(self) -> bool:
        return self._snapshot is not None

    def count(self) -> int:
        return len(self._snapshot.entries) if self._snapshot is not None else 0

    def entries(self) -> tuple[IndexEntry, ...]:
        return self._snapshot.entries if self._snapshot is not None else ()

    def build(self, chunks: list[Chunk]) -> None:
        """Embed all chunks in one batch and replace the index."""
        if not chunks:
            self._snapshot = _Snapshot(entries=(), matrix=np.zeros((0, 0)))
            logger.info("Built empty index")
            return

        vectors = self.embedder.embed_texts([c.text for c in chunks])
        if len(vectors) != len(chunks):
            raise ValueError(
                f"Embedder returned {len(vectors)} vectors for {len(chunks)} chunks"
            )

        matrix = np.asarray(vectors, dtype=np.float64)
        if matrix.ndim != 2:
            raise ValueError("Embedder returned vectors of inconsistent dimensions")

        entries = tuple(
            IndexEntry(ordinal=i, chunk=chunk, vector=matrix[i])
            for i, chunk in enumerate(chunks)
        )
        self._snapshot = _Snapshot(entries=entries, matrix=_normalize_rows(matrix))
        logger.info("Built index with %d chunks (dim=%d)", len(entries), matrix.shape[1])

    def query(self, text: str, k: int) -> list[RetrievalResult]:
        """Return the k most similar chunks, highest cosine similarity first.

        Scores are cosine similarities clamped to [0, 1].
        """
        snapshot = self._snapshot
        if snapshot is None or not snapshot.entries or k <= 0:
            logger.debug("Query against empty index: %r", text)
            return []

        query_vector = np.asarray(self.embedder.embed_text(text), dtype=np.float64)
        if query_vector.shape[0] != snapshot.matrix.shape[1]:
            raise ValueError(
                f"Query embedding has dimension {query_vector.shape[0]}, "
                f"index has {snapshot.matrix.shape[1]}"
            )

        norm = np.linalg.norm(query_vector)
        if norm > 0:
            query_vector = query_vector / norm

        scores = np.clip(snapshot.matrix @ query_vector, 0.0, 1.0)
        # Stable sort on negated scores keeps insertion order among ties
        order = np.argsort(-scores, kind="stable")[:k]

        return [
            RetrievalResult(chunk=snapshot.entries[i].chunk, score=float(scores[i]))
            for i in order
        ]


def _normalize_rows(matrix: np.ndarray) -> np.ndarray:
    norms = np.linalg.norm(matrix, axis=1, keepdims=True)
    # Zero vectors stay zero and score 0 against everything
    norms[norms == 0] = 1.0
    return matrix / norms
