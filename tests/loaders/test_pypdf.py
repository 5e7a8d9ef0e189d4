# tests/loaders/test_pypdf.py
"""Tests for the pypdf loader."""

import io

import pytest

pytest.importorskip("pypdf", reason="Tests require pypdf (pip install colloquy-rag[pdf])")

from colloquy.exceptions import IngestionError
from colloquy.loaders.base import Loader
from colloquy.loaders.pdf import PyPDFLoader


@pytest.fixture
def blank_pdf() -> bytes:
    """A one-page PDF with no text."""
    from pypdf import PdfWriter

    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class TestPyPDFLoader:
    def test_is_loader(self):
        assert isinstance(PyPDFLoader(), Loader)

    def test_supports_pdf(self):
        assert PyPDFLoader().supports("application/pdf")
        assert not PyPDFLoader().supports("text/plain")

    def test_pages_without_text_are_skipped(self, blank_pdf):
        assert PyPDFLoader().load(blank_pdf, "blank.pdf") == []

    def test_garbage_raises_ingestion_error(self):
        with pytest.raises(IngestionError) as exc_info:
            PyPDFLoader().load(b"this is not a pdf", "fake.pdf")
        assert exc_info.value.source_id == "fake.pdf"
