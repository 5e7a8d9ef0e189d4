# src/colloquy/configuration/__init__.py
"""Configuration objects for Colloquy."""

from colloquy.configuration.base import ProviderConfig
from colloquy.configuration.providers import LiteLLMProvider

__all__ = ["LiteLLMProvider", "ProviderConfig"]
