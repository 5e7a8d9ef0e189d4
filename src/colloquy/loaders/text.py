# src/colloquy/loaders/text.py
"""Plain text and Markdown loader."""

import re

from colloquy.exceptions import IngestionError
from colloquy.loaders.base import Loader
from colloquy.models import Fragment, SourceType


class PlainTextLoader(Loader):
    """Load plain text and markdown documents as a single fragment.

    Chunking happens later in the pipeline, so the loader only decodes and
    normalizes whitespace.
    """

    MEDIA_TYPES = frozenset({"text/plain", "text/markdown", "text/x-markdown"})

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def load(self, data: bytes, source_id: str) -> list[Fragment]:
        """Decode a text document.

        Raises:
            IngestionError: If the bytes are not valid in the configured encoding
        """
        try:
            content = data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise IngestionError(
                f"Cannot decode {source_id} as {self.encoding}: {e}", source_id=source_id
            ) from e

        content = clean_text(content)
        if not content:
            return []

        return [
            Fragment(
                text=content,
                source_id=source_id,
                source_type=SourceType.UPLOADED_DOCUMENT,
                metadata={"type": "text"},
            )
        ]


def clean_text(text: str) -> str:
    """Normalize line endings, collapse runs of spaces and blank lines."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"[ \t]{2,}", " ", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()
