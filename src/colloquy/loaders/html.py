# src/colloquy/loaders/html.py
"""HTML loader - converts HTML to markdown text."""

from colloquy.exceptions import IngestionError
from colloquy.loaders.base import Loader
from colloquy.loaders.text import clean_text
from colloquy.models import Fragment, SourceType


class HTMLLoader(Loader):
    """Load HTML documents and convert them to markdown.

    Scripts, styles and navigation chrome are removed before conversion.

    Requires: pip install colloquy-rag[html]
    """

    MEDIA_TYPES = frozenset({"text/html", "application/xhtml+xml"})

    # Tags to remove entirely (including their content)
    REMOVE_TAGS = ["script", "style", "nav", "footer", "header", "aside", "noscript"]

    def load(self, data: bytes, source_id: str) -> list[Fragment]:
        """Convert an HTML document into a single markdown fragment.

        Raises:
            ImportError: If beautifulsoup4 or markdownify is not installed
            IngestionError: If the bytes cannot be decoded
        """
        try:
            from bs4 import BeautifulSoup
        except ImportError:
            raise ImportError(
                "beautifulsoup4 is required for HTML support. "
                "Install with: pip install colloquy-rag[html]"
            ) from None

        try:
            from markdownify import markdownify
        except ImportError:
            raise ImportError(
                "markdownify is required for HTML support. "
                "Install with: pip install colloquy-rag[html]"
            ) from None

        try:
            content = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise IngestionError(f"Cannot decode {source_id}: {e}", source_id=source_id) from e

        if not content.strip():
            return []

        soup = BeautifulSoup(content, "html.parser")
        title = soup.title.string if soup.title else None

        for tag in soup(self.REMOVE_TAGS):
            tag.decompose()

        md_text = clean_text(markdownify(str(soup), heading_style="ATX"))
        if not md_text:
            return []

        return [
            Fragment(
                text=md_text,
                source_id=source_id,
                source_type=SourceType.UPLOADED_DOCUMENT,
                metadata={"type": "html", "title": title},
            )
        ]
