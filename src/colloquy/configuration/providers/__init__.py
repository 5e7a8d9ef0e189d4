# src/colloquy/configuration/providers/__init__.py
"""Provider configuration implementations."""

from colloquy.configuration.providers.litellm import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
