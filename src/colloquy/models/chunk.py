# src/colloquy/models/chunk.py
"""Chunk data model."""

from pydantic import BaseModel, ConfigDict

from colloquy.models.fragment import SourceType


class Chunk(BaseModel):
    """A bounded slice of a fragment's text, prepared for embedding.

    ``offset`` and ``length`` locate the slice inside the parent fragment's
    text. ``source_id`` and ``source_type`` are copied from the fragment so
    search results can report provenance without a fragment lookup.
    """

    model_config = ConfigDict(frozen=True)

    fragment_id: str
    offset: int
    length: int
    text: str
    source_id: str
    source_type: SourceType
