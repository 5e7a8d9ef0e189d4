# src/colloquy/models/results.py
"""Result data models for retrieval and answering."""

from pydantic import BaseModel, ConfigDict

from colloquy.models.chunk import Chunk


class RetrievalResult(BaseModel):
    """A single ranked chunk.

    ``score`` is a similarity normalized to [0, 1], or None when the index
    implementation could not report one.
    """

    model_config = ConfigDict(frozen=True)

    chunk: Chunk
    score: float | None = None


class RetrievalResponse(BaseModel):
    """Ranked retrieval results for one question plus a 0-100 confidence."""

    question: str
    results: list[RetrievalResult]
    confidence: int

    @property
    def fragments(self) -> list[Chunk]:
        """Retrieved chunks, most relevant first."""
        return [r.chunk for r in self.results]

    @property
    def top_source_id(self) -> str | None:
        return self.results[0].chunk.source_id if self.results else None

    @property
    def is_empty(self) -> bool:
        return not self.results


class Answer(BaseModel):
    """Response of the one-shot query boundary."""

    text: str
    source_id: str
    confidence: int
    grounded: bool = False
