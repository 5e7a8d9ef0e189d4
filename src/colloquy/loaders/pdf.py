# src/colloquy/loaders/pdf.py
"""PDF loader using pypdf - lightweight, pure Python."""

import io

from colloquy.exceptions import IngestionError
from colloquy.loaders.base import Loader
from colloquy.loaders.text import clean_text
from colloquy.models import Fragment, SourceType


class PyPDFLoader(Loader):
    """Load PDF documents using pypdf, one fragment per page with text.

    Requires: pip install colloquy-rag[pdf]
    """

    MEDIA_TYPES = frozenset({"application/pdf"})

    def load(self, data: bytes, source_id: str) -> list[Fragment]:
        """Extract page text from a PDF.

        Raises:
            ImportError: If pypdf is not installed
            IngestionError: If the bytes are not a readable PDF
        """
        try:
            from pypdf import PdfReader
            from pypdf.errors import PdfReadError
        except ImportError:
            raise ImportError(
                "pypdf is required for PDF text extraction. "
                "Install with: pip install colloquy-rag[pdf]"
            ) from None

        try:
            reader = PdfReader(io.BytesIO(data))
            pages = [page.extract_text() or "" for page in reader.pages]
        except PdfReadError as e:
            raise IngestionError(f"Unreadable PDF {source_id}: {e}", source_id=source_id) from e

        fragments = []
        for page_num, text in enumerate(pages, start=1):
            text = clean_text(text)
            if text:
                fragments.append(
                    Fragment(
                        text=text,
                        source_id=source_id,
                        source_type=SourceType.UPLOADED_DOCUMENT,
                        metadata={"type": "pdf", "page": page_num},
                    )
                )
        return fragments
