# src/colloquy/commands/ask.py
"""Ask command - answer one question from the knowledge base."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from colloquy.commands.base import AskResult
from colloquy.commands.prepare import prepare


def ask(
    question: str,
    documents: Sequence[str | Path] = (),
    config_path: str | Path | None = None,
    builtin: bool | None = None,
) -> AskResult:
    """Answer a single question.

    Backend failures are not errors here: they produce the persona's canned
    error answer with confidence 0. Only configuration problems fail the
    command.

    Args:
        question: The question to ask
        documents: Extra files to ingest before answering
        config_path: Override config file path
        builtin: Force the built-in knowledge on or off (None follows config)

    Returns:
        AskResult with the answer, its source and confidence
    """
    if not question.strip():
        return AskResult(success=False, question=question, error="Question must not be empty")

    prepared = prepare(documents, config_path, builtin)
    if not prepared.success or prepared.colloquy is None:
        return AskResult(success=False, question=question, error=prepared.error)

    answer = prepared.colloquy.answer(question)
    return AskResult(
        success=True,
        question=question,
        answer=answer.text,
        source_id=answer.source_id,
        confidence=answer.confidence,
        ingest=prepared.ingest,
    )
