# src/colloquy/responder.py
"""Retrieval-grounded reply generation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from colloquy.exceptions import GenerationFailure
from colloquy.models import Answer, ConversationTurn, RetrievalResponse
from colloquy.normalizer import ResponseNormalizer
from colloquy.persona import Persona
from colloquy.prompt import PromptSynthesizer
from colloquy.providers import LLMClient
from colloquy.retriever import Retriever
from colloquy.settings import Settings

logger = logging.getLogger(__name__)

# source_id values for answers that did not come from the knowledge base
NO_MATCH_SOURCE = "no_match"
ERROR_SOURCE = "error"
PERSONA_SOURCE = "persona"


class Responder:
    """Retriever + Prompt Synthesizer + generative backend + Response Normalizer.

    ``arespond`` is used by conversation sessions and raises
    GenerationFailure; ``answer`` is the one-shot query boundary and never
    raises.
    """

    def __init__(
        self,
        retriever: Retriever,
        llm_client: LLMClient,
        persona: Persona,
        settings: Settings | None = None,
        synthesizer: PromptSynthesizer | None = None,
        normalizer: ResponseNormalizer | None = None,
    ) -> None:
        self.retriever = retriever
        self.llm_client = llm_client
        self.persona = persona
        self.settings = settings if settings is not None else Settings()
        self.synthesizer = synthesizer or PromptSynthesizer(max_chars=self.settings.max_prompt_chars)
        self.normalizer = normalizer or ResponseNormalizer()

    def build_prompt(
        self,
        message: str,
        history: Sequence[ConversationTurn],
        retrieval: RetrievalResponse,
    ) -> str:
        return self.synthesizer.synthesize(
            persona=self.persona,
            rules=self.persona.rules,
            context=[chunk.text for chunk in retrieval.fragments],
            history=history,
            message=message,
        )

    def _to_answer(self, raw: str, retrieval: RetrievalResponse) -> Answer:
        text = self.normalizer.normalize(raw, self.settings.max_response_chars)
        if not text:
            raise GenerationFailure("Backend returned an empty reply")
        return Answer(
            text=text,
            source_id=retrieval.top_source_id or PERSONA_SOURCE,
            confidence=retrieval.confidence,
            grounded=not retrieval.is_empty,
        )

    async def arespond(
        self,
        message: str,
        history: Sequence[ConversationTurn] = (),
    ) -> Answer:
        """Produce one normalized reply for a conversation turn.

        With no matching knowledge the reply is generated from the persona
        alone (``grounded`` is False).

        Raises:
            GenerationFailure: If the backend fails, times out or returns nothing
        """
        retrieval = await asyncio.to_thread(self.retriever.retrieve, message, list(history))
        prompt = self.build_prompt(message, history, retrieval)
        timeout = self.settings.generation_timeout

        try:
            raw = await asyncio.wait_for(
                self.llm_client.acomplete(prompt, self.settings.sampling_params(), timeout),
                timeout=timeout,
            )
        except asyncio.TimeoutError as e:
            raise GenerationFailure(
                f"Generation exceeded {timeout:.1f}s", timed_out=True
            ) from e
        except GenerationFailure:
            raise
        except Exception as e:
            raise GenerationFailure(f"Generation failed: {e}") from e

        return self._to_answer(raw, retrieval)

    def answer(self, question: str) -> Answer:
        """Answer a single question without a session.

        Returns a canned "connect to a human" answer with confidence 0 when
        no indexed knowledge is relevant, and a canned error answer
        when the backend fails.
        """
        try:
            retrieval = self.retriever.retrieve(question)
        except Exception:
            logger.exception("Retrieval failed for %r", question)
            return Answer(text=self.persona.error_message, source_id=ERROR_SOURCE, confidence=0)

        if retrieval.is_empty or retrieval.confidence == 0:
            logger.info("No knowledge matched %r", question)
            return Answer(
                text=self.persona.no_match_message, source_id=NO_MATCH_SOURCE, confidence=0
            )

        prompt = self.build_prompt(question, (), retrieval)
        try:
            raw = self.llm_client.complete(
                prompt, self.settings.sampling_params(), self.settings.generation_timeout
            )
            return self._to_answer(raw, retrieval)
        except Exception:
            logger.exception("Generation failed for %r", question)
            return Answer(text=self.persona.error_message, source_id=ERROR_SOURCE, confidence=0)
