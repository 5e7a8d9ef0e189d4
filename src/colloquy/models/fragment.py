# src/colloquy/models/fragment.py
"""Fragment data model."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class SourceType(str, Enum):
    """Where a fragment's text came from."""

    CURATED_FACT = "curated-fact"
    STRUCTURED_RECORD = "structured-record"
    UPLOADED_DOCUMENT = "uploaded-document"


class Fragment(BaseModel):
    """An immutable unit of knowledge text with provenance."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    text: str
    source_id: str
    source_type: SourceType
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    metadata: dict[str, Any] = Field(default_factory=dict)
