# src/colloquy/loaders/base.py
"""Loader abstract base class."""

from abc import ABC, abstractmethod

from colloquy.models import Fragment


class Loader(ABC):
    """Abstract base class for turning a document byte stream into fragments."""

    MEDIA_TYPES: frozenset[str] = frozenset()

    def supports(self, media_type: str) -> bool:
        """Check if this loader handles the given media type."""
        return normalize_media_type(media_type) in self.MEDIA_TYPES

    @abstractmethod
    def load(self, data: bytes, source_id: str) -> list[Fragment]:
        """Load a document and return fragments.

        Args:
            data: Raw document bytes
            source_id: Identifier recorded on every produced fragment

        Returns:
            List of Fragment objects (empty if the document has no text)
        """
        ...


def normalize_media_type(media_type: str) -> str:
    """Lowercase a media type and drop parameters such as ``; charset=utf-8``."""
    return media_type.split(";", 1)[0].strip().lower()
