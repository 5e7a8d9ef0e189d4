# src/colloquy/models/sources.py
"""Raw inputs accepted by the corpus loader."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class DocumentSource(BaseModel):
    """A byte stream with a declared media type (an uploaded file)."""

    model_config = ConfigDict(frozen=True)

    source_id: str
    media_type: str
    data: bytes


class RecordSource(BaseModel):
    """A structured key/value record, serialized to prose on load."""

    source_id: str
    record: dict[str, Any]
    field_order: tuple[str, ...] = ()


class FactSource(BaseModel):
    """A curated knowledge entry."""

    model_config = ConfigDict(frozen=True)

    source_id: str
    text: str


Source = DocumentSource | RecordSource | FactSource
