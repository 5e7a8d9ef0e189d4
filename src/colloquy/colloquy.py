# src/colloquy/colloquy.py
"""Central wiring class for Colloquy."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from colloquy.chunker import Chunker
from colloquy.loaders import CorpusLoader, IngestionReport, document_from_path
from colloquy.persona import Persona
from colloquy.responder import Responder
from colloquy.retriever import Retriever
from colloquy.settings import Settings
from colloquy.stores import InMemoryVectorIndex

if TYPE_CHECKING:
    from colloquy.configuration import ProviderConfig
    from colloquy.loaders import LoaderRegistry
    from colloquy.models import Answer, Chunk, Source
    from colloquy.session import ConversationSession, OutputChannel
    from colloquy.session.state import StateListener
    from colloquy.stores import VectorIndex

logger = logging.getLogger(__name__)


class Colloquy:
    """Bundles the knowledge base, the persona and the generative backend.

    Configure once, ingest sources, then answer one-shot questions or open
    conversation sessions. Nothing here is global: every instance owns its
    own index and clients.

    Example:
        from colloquy import Colloquy, LiteLLMProvider
        from colloquy.knowledge import MAX_PERSONA, builtin_sources

        bot = Colloquy(provider=LiteLLMProvider(llm="ollama/tinyllama"), persona=MAX_PERSONA)
        bot.ingest(builtin_sources())
        print(bot.answer("What is pending for John Kim?").text)
    """

    def __init__(
        self,
        *,
        provider: ProviderConfig,
        settings: Settings | None = None,
        persona: Persona | None = None,
        index: VectorIndex | None = None,
        loader_registry: LoaderRegistry | None = None,
    ) -> None:
        """Create a Colloquy instance.

        Args:
            provider: Provider configuration (builds embedder and LLM client).
                      Example: LiteLLMProvider(llm="ollama/tinyllama")
            settings: Behavioral settings (chunking, retrieval, sampling, session).
            persona: Persona to speak as. Defaults to a generic assistant.
            index: Explicit vector index. Defaults to an in-memory index over
                   the provider's embedder.
            loader_registry: Optional loader registry. If None, uses default.
        """
        self.settings = settings if settings is not None else Settings()
        self.persona = persona if persona is not None else Persona()

        self.embedder = provider.build_embedder(self.settings)
        self.llm_client = provider.build_llm_client(self.settings)
        self.index = index if index is not None else InMemoryVectorIndex(self.embedder)

        self._loader = CorpusLoader(loader_registry)
        self._chunker = Chunker(self.settings.chunk_size, self.settings.chunk_overlap)
        self._chunks: list[Chunk] = []

    @property
    def chunks(self) -> list[Chunk]:
        """All chunks currently indexed."""
        return list(self._chunks)

    def ingest(self, sources: Iterable[Source]) -> IngestionReport:
        """Load, chunk and index sources.

        The index is rebuilt from every chunk ingested so far, so it stays
        immutable between ingestions. Sources that fail to load are listed
        in the returned report and do not affect the others.
        """
        report = self._loader.load(list(sources))
        new_chunks = self._chunker.split_many(report.fragments)
        self._chunks.extend(new_chunks)
        self.index.build(self._chunks)
        logger.info("Indexed %d chunks (%d new)", len(self._chunks), len(new_chunks))
        return report

    def ingest_files(self, paths: Iterable[str | Path]) -> IngestionReport:
        """Ingest files from disk, declaring media types from their extensions.

        Raises:
            FileNotFoundError: If a path does not exist
        """
        return self.ingest([document_from_path(path) for path in paths])

    def retriever(self) -> Retriever:
        return Retriever(
            index=self.index,
            default_k=self.settings.default_k,
            min_score=self.settings.min_score,
            history_turns=self.settings.history_turns,
        )

    def responder(self) -> Responder:
        return Responder(
            retriever=self.retriever(),
            llm_client=self.llm_client,
            persona=self.persona,
            settings=self.settings,
        )

    def answer(self, question: str) -> Answer:
        """Answer one question. Never raises; see Responder.answer."""
        return self.responder().answer(question)

    def session(
        self,
        output: OutputChannel,
        on_state_change: StateListener | None = None,
    ) -> ConversationSession:
        """Create a conversation session speaking through ``output``."""
        from colloquy.session import ConversationSession

        return ConversationSession(
            responder=self.responder(),
            output=output,
            on_state_change=on_state_change,
        )
