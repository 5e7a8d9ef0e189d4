# src/colloquy/embedder/hashing.py
"""Feature-hashing embedder that needs no model or network."""

import hashlib
import re

import numpy as np

from colloquy.embedder.base import Embedder

DEFAULT_DIMENSIONS = 512
MIN_DIMENSIONS = 64
MAX_DIMENSIONS = 8192

_TOKEN_RE = re.compile(r"[a-z0-9]+")


class HashingEmbedder(Embedder):
    """Deterministic bag-of-words embedder using the hashing trick.

    Each lowercase word (and each adjacent word pair, when ``use_bigrams``
    is on) is hashed with BLAKE2b into one of ``dimensions`` signed buckets.
    Vectors are L2-normalized, so identical texts have cosine similarity 1
    and texts with no shared words have similarity 0.

    Useful for offline demos and tests; semantic quality is lexical only.
    """

    def __init__(self, dimensions: int = DEFAULT_DIMENSIONS, use_bigrams: bool = True) -> None:
        if not MIN_DIMENSIONS <= dimensions <= MAX_DIMENSIONS:
            raise ValueError(
                f"dimensions must be between {MIN_DIMENSIONS} and {MAX_DIMENSIONS}, "
                f"got {dimensions}"
            )
        self.dimensions = dimensions
        self.use_bigrams = use_bigrams

    @classmethod
    def from_name(cls, name: str) -> "HashingEmbedder":
        """Build from a ``"hashing"`` or ``"hashing:<dimensions>"`` model string."""
        _, _, size = name.partition(":")
        return cls(dimensions=int(size)) if size else cls()

    def _features(self, text: str) -> list[str]:
        tokens = _TOKEN_RE.findall(text.lower())
        features = list(tokens)
        if self.use_bigrams:
            features.extend(f"{a} {b}" for a, b in zip(tokens, tokens[1:]))
        return features

    def _vector(self, text: str) -> np.ndarray:
        vector = np.zeros(self.dimensions, dtype=np.float64)
        for feature in self._features(text):
            digest = hashlib.blake2b(feature.encode("utf-8"), digest_size=8).digest()
            value = int.from_bytes(digest, "big")
            bucket = value % self.dimensions
            sign = 1.0 if (value >> 63) & 1 == 0 else -1.0
            vector[bucket] += sign

        norm = np.linalg.norm(vector)
        if norm > 0:
            vector /= norm
        return vector

    def embed_text(self, text: str) -> list[float]:
        return self._vector(text).tolist()

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        return [self._vector(text).tolist() for text in texts]
