# tests/loaders/test_text.py
"""Tests for the plain text and markdown loader."""

import pytest

from colloquy.exceptions import IngestionError
from colloquy.loaders.base import Loader
from colloquy.loaders.text import PlainTextLoader, clean_text
from colloquy.models import SourceType


class TestPlainTextLoader:
    def test_is_loader(self):
        assert isinstance(PlainTextLoader(), Loader)

    @pytest.mark.parametrize(
        "media_type",
        ["text/plain", "text/markdown", "text/x-markdown", "TEXT/PLAIN; charset=utf-8"],
    )
    def test_supports_text_types(self, media_type):
        assert PlainTextLoader().supports(media_type) is True

    @pytest.mark.parametrize("media_type", ["application/pdf", "text/html", "image/png"])
    def test_does_not_support_other_types(self, media_type):
        assert PlainTextLoader().supports(media_type) is False

    def test_load_returns_single_fragment(self):
        fragments = PlainTextLoader().load(b"First paragraph.\n\nSecond.", "notes.txt")
        assert len(fragments) == 1
        fragment = fragments[0]
        assert fragment.text == "First paragraph.\n\nSecond."
        assert fragment.source_id == "notes.txt"
        assert fragment.source_type is SourceType.UPLOADED_DOCUMENT
        assert fragment.metadata["type"] == "text"

    def test_load_empty_document(self):
        assert PlainTextLoader().load(b"   \n\n ", "empty.txt") == []

    def test_undecodable_bytes_raise_ingestion_error(self):
        with pytest.raises(IngestionError) as exc_info:
            PlainTextLoader().load(b"\xff\xfe\xfa", "broken.txt")
        assert exc_info.value.source_id == "broken.txt"

    def test_custom_encoding(self):
        fragments = PlainTextLoader(encoding="latin-1").load("café".encode("latin-1"), "x")
        assert fragments[0].text == "café"


class TestCleanText:
    def test_normalizes_line_endings(self):
        assert clean_text("a\r\nb\rc") == "a\nb\nc"

    def test_collapses_spaces_and_blank_lines(self):
        assert clean_text("a    b\n\n\n\nc") == "a b\n\nc"
