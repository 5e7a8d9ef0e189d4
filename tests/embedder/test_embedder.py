# tests/embedder/test_embedder.py
"""Tests for embedders."""

from unittest.mock import MagicMock

import numpy as np
import pytest

from colloquy.embedder import ClientEmbedder, Embedder, HashingEmbedder


class TestHashingEmbedder:
    def test_is_embedder(self):
        assert isinstance(HashingEmbedder(), Embedder)

    def test_dimensions(self):
        assert len(HashingEmbedder(dimensions=128).embed_text("hello world")) == 128

    @pytest.mark.parametrize("dimensions", [32, 10000])
    def test_dimensions_out_of_range(self, dimensions):
        with pytest.raises(ValueError):
            HashingEmbedder(dimensions=dimensions)

    def test_deterministic(self):
        a = HashingEmbedder().embed_text("Wire transfer pending posting")
        b = HashingEmbedder().embed_text("Wire transfer pending posting")
        assert a == b

    def test_unit_length(self):
        vector = np.asarray(HashingEmbedder().embed_text("passport attestation"))
        assert np.linalg.norm(vector) == pytest.approx(1.0)

    def test_empty_text_is_zero_vector(self):
        assert not any(HashingEmbedder(dimensions=64).embed_text("!!!"))

    def test_shared_words_are_closer(self):
        embedder = HashingEmbedder()
        query = np.asarray(embedder.embed_text("funding wire transfer"))
        related = np.asarray(embedder.embed_text("the wire transfer was received"))
        unrelated = np.asarray(embedder.embed_text("passport needs attestation"))
        assert query @ related > query @ unrelated

    def test_embed_texts_matches_embed_text(self):
        embedder = HashingEmbedder(dimensions=64)
        assert embedder.embed_texts(["a b", "c"]) == [
            embedder.embed_text("a b"),
            embedder.embed_text("c"),
        ]

    @pytest.mark.parametrize("name,expected", [("hashing", 512), ("hashing:1024", 1024)])
    def test_from_name(self, name, expected):
        assert HashingEmbedder.from_name(name).dimensions == expected


class TestClientEmbedder:
    def test_delegates_to_client(self):
        client = MagicMock()
        client.embed.return_value = [[1.0, 0.0]]
        embedder = ClientEmbedder(embedding_client=client)

        assert embedder.embed_text("hello") == [1.0, 0.0]
        client.embed.assert_called_once_with(["hello"])

    def test_batches(self):
        client = MagicMock()
        client.embed.return_value = [[1.0], [2.0]]
        embedder = ClientEmbedder(embedding_client=client)

        assert embedder.embed_texts(["a", "b"]) == [[1.0], [2.0]]
        client.embed.assert_called_once_with(["a", "b"])

    def test_empty_batch_skips_client(self):
        client = MagicMock()
        assert ClientEmbedder(embedding_client=client).embed_texts([]) == []
        client.embed.assert_not_called()

    def test_splits_into_batches(self):
        client = MagicMock()
        client.embed.side_effect = lambda batch: [[float(len(t))] for t in batch]
        embedder = ClientEmbedder(embedding_client=client, batch_size=2)

        assert embedder.embed_texts(["a", "bb", "ccc"]) == [[1.0], [2.0], [3.0]]
        assert client.embed.call_count == 2

    def test_short_response_raises(self):
        client = MagicMock()
        client.embed.return_value = [[1.0]]
        with pytest.raises(ValueError):
            ClientEmbedder(embedding_client=client).embed_texts(["a", "b"])

    def test_invalid_batch_size(self):
        with pytest.raises(ValueError):
            ClientEmbedder(embedding_client=MagicMock(), batch_size=0)
