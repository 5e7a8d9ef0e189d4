# src/colloquy/stores/__init__.py
"""Vector index implementations."""

from colloquy.stores.base import VectorIndex
from colloquy.stores.memory import IndexEntry, InMemoryVectorIndex

__all__ = ["IndexEntry", "InMemoryVectorIndex", "VectorIndex"]
