# src/colloquy/embedder/__init__.py
"""Embedding functionality for Colloquy."""

from colloquy.embedder.base import Embedder
from colloquy.embedder.client import ClientEmbedder
from colloquy.embedder.hashing import HashingEmbedder

__all__ = ["ClientEmbedder", "Embedder", "HashingEmbedder"]
