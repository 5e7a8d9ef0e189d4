# src/colloquy/retriever.py
"""Retrieval with confidence scoring."""

import logging

from colloquy.exceptions import IndexUnavailable
from colloquy.models import ConversationTurn, RetrievalResponse, RetrievalResult, Role
from colloquy.stores import VectorIndex

logger = logging.getLogger(__name__)

# Confidence reported when the index returns results without similarity scores
UNSCORED_CONFIDENCE = 50


class Retriever:
    """Finds the knowledge fragments relevant to a question."""

    def __init__(
        self,
        index: VectorIndex,
        default_k: int = 3,
        min_score: float = 0.0,
        history_turns: int = 0,
    ) -> None:
        """Initialize the retriever.

        Args:
            index: Vector index to query
            default_k: Number of results to return
            min_score: Results scoring below this are dropped; results with
                       no similarity at all (score 0) are always dropped
            history_turns: How many previous user turns to fold into the query
                           text (helps short follow-ups like "who is it with?")
        """
        self.index = index
        self.default_k = default_k
        self.min_score = min_score
        self.history_turns = history_turns

    def retrieve(
        self,
        question: str,
        history: list[ConversationTurn] | None = None,
        k: int | None = None,
    ) -> RetrievalResponse:
        """Rank the index against a question.

        An empty or unbuilt index produces an empty response with
        confidence 0; the caller answers without knowledge in that case.

        Args:
            question: User's question
            history: Conversation so far (oldest first)
            k: Number of results (default: self.default_k)

        Returns:
            RetrievalResponse with results ordered by relevance
        """
        k = self.default_k if k is None else k
        query_text = self._query_text(question, history or [])

        try:
            results = self.index.query(query_text, k)
        except IndexUnavailable:
            logger.info("Index unavailable; answering without knowledge")
            results = []

        results = [r for r in results if r.score is None or self._relevant(r.score)]

        return RetrievalResponse(
            question=question,
            results=results,
            confidence=self._confidence(results),
        )

    def _relevant(self, score: float) -> bool:
        return score > 0.0 and score >= self.min_score

    def _query_text(self, question: str, history: list[ConversationTurn]) -> str:
        if self.history_turns <= 0:
            return question
        previous = [t.content for t in history if t.role is Role.USER][-self.history_turns :]
        return "\n".join([*previous, question])

    def _confidence(self, results: list[RetrievalResult]) -> int:
        if not results:
            return 0
        top = results[0].score
        if top is None:
            logger.warning(
                "Top result has no similarity score; reporting confidence %d",
                UNSCORED_CONFIDENCE,
            )
            return UNSCORED_CONFIDENCE
        return max(0, min(100, round(top * 100)))
