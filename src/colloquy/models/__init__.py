# src/colloquy/models/__init__.py
"""Data models for Colloquy."""

from colloquy.models.chunk import Chunk
from colloquy.models.conversation import ConversationTurn, Role
from colloquy.models.fragment import Fragment, SourceType
from colloquy.models.results import Answer, RetrievalResponse, RetrievalResult
from colloquy.models.sources import DocumentSource, FactSource, RecordSource, Source

__all__ = [
    "Answer",
    "Chunk",
    "ConversationTurn",
    "DocumentSource",
    "FactSource",
    "Fragment",
    "RecordSource",
    "RetrievalResponse",
    "RetrievalResult",
    "Role",
    "Source",
    "SourceType",
]
