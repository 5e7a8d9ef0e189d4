# src/colloquy/loaders/registry.py
"""Loader registry for selecting document loaders by media type."""

import importlib.util
import mimetypes
from pathlib import Path

from colloquy.exceptions import UnsupportedFormat
from colloquy.loaders.base import Loader, normalize_media_type
from colloquy.loaders.text import PlainTextLoader
from colloquy.models import Fragment

# Extensions mimetypes does not know on every platform
EXTENSION_MEDIA_TYPES = {
    ".md": "text/markdown",
    ".markdown": "text/markdown",
    ".txt": "text/plain",
    ".text": "text/plain",
    ".pdf": "application/pdf",
    ".html": "text/html",
    ".htm": "text/html",
}


def media_type_for(path: str | Path) -> str:
    """Guess a document's media type from its file name.

    Returns ``application/octet-stream`` for unknown extensions, which no
    loader accepts.
    """
    suffix = Path(path).suffix.lower()
    if suffix in EXTENSION_MEDIA_TYPES:
        return EXTENSION_MEDIA_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(str(path))
    return guessed or "application/octet-stream"


class LoaderRegistry:
    """Registry for document loaders.

    Selects the first registered loader that accepts a declared media type.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._loaders: list[Loader] = []

    def register(self, loader: Loader) -> None:
        """Register a loader."""
        self._loaders.append(loader)

    def find_loader(self, media_type: str) -> Loader | None:
        """Find a loader that supports the given media type."""
        for loader in self._loaders:
            if loader.supports(media_type):
                return loader
        return None

    def supported_media_types(self) -> set[str]:
        return {media_type for loader in self._loaders for media_type in loader.MEDIA_TYPES}

    def load(self, data: bytes, media_type: str, source_id: str) -> list[Fragment]:
        """Load a document using the loader registered for its media type.

        Raises:
            UnsupportedFormat: If no loader supports the media type
        """
        loader = self.find_loader(media_type)
        if loader is None:
            raise UnsupportedFormat(normalize_media_type(media_type), source_id=source_id)
        return loader.load(data, source_id)

    @classmethod
    def default(cls) -> "LoaderRegistry":
        """Create a registry with all available loaders registered.

        Plain text is always available; PDF and HTML loaders are added when
        their optional dependencies are installed.
        """
        registry = cls()
        registry.register(PlainTextLoader())

        if importlib.util.find_spec("pypdf") is not None:
            from colloquy.loaders.pdf import PyPDFLoader

            registry.register(PyPDFLoader())

        if (
            importlib.util.find_spec("bs4") is not None
            and importlib.util.find_spec("markdownify") is not None
        ):
            from colloquy.loaders.html import HTMLLoader

            registry.register(HTMLLoader())

        return registry
