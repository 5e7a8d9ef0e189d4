"""Colloquy - retrieval-grounded persona conversations.

A knowledge base of curated facts, structured records and uploaded
documents, searched by meaning and voiced by a configurable persona
through a generative backend.

Quick Start (local Ollama model, offline hashing embeddings):
    from colloquy import Colloquy, LiteLLMProvider
    from colloquy.knowledge import MAX_PERSONA, builtin_sources

    bot = Colloquy(provider=LiteLLMProvider(llm="ollama/tinyllama"), persona=MAX_PERSONA)
    bot.ingest(builtin_sources())

    # One-shot
    answer = bot.answer("What is pending for John Kim?")

    # Conversation
    session = bot.session(ConsoleOutputChannel())
    await session.start(voice=True)
    session.user_message("Which onboardings are stalled?")
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("colloquy-rag")
except PackageNotFoundError:
    # Running from a source tree without an installed distribution
    __version__ = "unknown"

# Central configuration
from colloquy.colloquy import Colloquy

# Configuration objects
from colloquy.configuration import LiteLLMProvider, ProviderConfig

# Embedding
from colloquy.embedder import ClientEmbedder, Embedder, HashingEmbedder
from colloquy.exceptions import (
    ColloquyError,
    GenerationFailure,
    IndexUnavailable,
    IngestionError,
    InvalidTransition,
    UnsupportedFormat,
)

# Knowledge loading
from colloquy.chunker import Chunker
from colloquy.loaders import CorpusLoader, IngestionReport, Loader, LoaderRegistry
from colloquy.models import (
    Answer,
    Chunk,
    ConversationTurn,
    DocumentSource,
    FactSource,
    Fragment,
    RecordSource,
    RetrievalResponse,
    RetrievalResult,
    Role,
    SourceType,
)
from colloquy.normalizer import ResponseNormalizer
from colloquy.persona import Persona
from colloquy.prompt import PromptSynthesizer

# Provider ABCs
from colloquy.providers import EmbeddingClient, LLMClient, SamplingParams
from colloquy.responder import Responder
from colloquy.retriever import Retriever

# Sessions
from colloquy.session import (
    ConsoleOutputChannel,
    ConversationSession,
    OutputChannel,
    SessionEvent,
    SessionState,
)
from colloquy.settings import Settings

# Vector index
from colloquy.stores import InMemoryVectorIndex, VectorIndex

__all__ = [
    # Version
    "__version__",
    # Models
    "Answer",
    "Chunk",
    "ConversationTurn",
    "DocumentSource",
    "FactSource",
    "Fragment",
    "RecordSource",
    "RetrievalResponse",
    "RetrievalResult",
    "Role",
    "SourceType",
    # Errors
    "ColloquyError",
    "GenerationFailure",
    "IndexUnavailable",
    "IngestionError",
    "InvalidTransition",
    "UnsupportedFormat",
    # Config
    "Persona",
    "Settings",
    # Configuration objects
    "LiteLLMProvider",
    "ProviderConfig",
    # Knowledge loading
    "Chunker",
    "CorpusLoader",
    "IngestionReport",
    "Loader",
    "LoaderRegistry",
    # Embedding and index
    "ClientEmbedder",
    "Embedder",
    "HashingEmbedder",
    "InMemoryVectorIndex",
    "VectorIndex",
    # Provider ABCs
    "EmbeddingClient",
    "LLMClient",
    "SamplingParams",
    # Pipeline
    "PromptSynthesizer",
    "Responder",
    "ResponseNormalizer",
    "Retriever",
    # Sessions
    "ConsoleOutputChannel",
    "ConversationSession",
    "OutputChannel",
    "SessionEvent",
    "SessionState",
    # Central configuration
    "Colloquy",
]
