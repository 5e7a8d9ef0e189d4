# src/colloquy/loaders/__init__.py
"""Corpus loaders for Colloquy."""

from colloquy.loaders.base import Loader
from colloquy.loaders.corpus import (
    CorpusLoader,
    IngestionReport,
    document_from_path,
    facts_to_sources,
)
from colloquy.loaders.records import serialize_record
from colloquy.loaders.registry import LoaderRegistry, media_type_for
from colloquy.loaders.text import PlainTextLoader

# Optional loaders - imported lazily to avoid ImportError when deps not installed
__all__ = [
    "CorpusLoader",
    "IngestionReport",
    "Loader",
    "LoaderRegistry",
    "PlainTextLoader",
    "document_from_path",
    "facts_to_sources",
    "media_type_for",
    "serialize_record",
]


def __getattr__(name: str) -> type:
    """Lazy import optional loaders."""
    if name == "PyPDFLoader":
        from colloquy.loaders.pdf import PyPDFLoader

        return PyPDFLoader
    elif name == "HTMLLoader":
        from colloquy.loaders.html import HTMLLoader

        return HTMLLoader
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
