# src/colloquy/providers/litellm/models.py
"""Curated LiteLLM model identifiers.

Any LiteLLM identifier works; these are the ones the defaults and the docs
refer to. Local Ollama models keep the whole pipeline on the operator's
machine.
"""


class ChatModels:
    OLLAMA_TINYLLAMA = "ollama/tinyllama"
    OLLAMA_LLAMA3_2 = "ollama/llama3.2"
    OPENAI_GPT_4O_MINI = "openai/gpt-4o-mini"
    ANTHROPIC_CLAUDE_HAIKU = "anthropic/claude-3-5-haiku-latest"
    GEMINI_FLASH = "gemini/gemini-2.0-flash"


class EmbeddingModels:
    OLLAMA_NOMIC = "ollama/nomic-embed-text"
    OPENAI_TEXT_3_SMALL = "openai/text-embedding-3-small"
    GEMINI_EMBEDDING_001 = "gemini/gemini-embedding-001"


DEFAULT_OLLAMA_BASE_URL = "http://localhost:11434"
