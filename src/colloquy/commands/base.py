# src/colloquy/commands/base.py
"""Result types for the commands layer.

Commands return these data structures so that the CLI (or any other
front end) can render them however it likes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from colloquy.colloquy import Colloquy


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class IngestSummary:
    """What a knowledge load produced.

    Attributes:
        sources: Number of sources submitted
        fragments: Fragments loaded
        chunks: Chunks indexed in total
        failures: (source_id, error message) for sources that failed to load
    """

    sources: int = 0
    fragments: int = 0
    chunks: int = 0
    failures: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class PrepareResult(CommandResult):
    """Result of building and loading a Colloquy instance."""

    colloquy: Colloquy | None = None
    ingest: IngestSummary = field(default_factory=IngestSummary)
    warnings: list[str] = field(default_factory=list)


@dataclass
class AskResult(CommandResult):
    """Result of the ask command.

    Attributes:
        question: The original question
        answer: Reply text (canned when nothing matched or the backend failed)
        source_id: Source of the top-ranked fragment, "no_match" or "error"
        confidence: 0-100
        ingest: Summary of the knowledge that was loaded
    """

    question: str = ""
    answer: str = ""
    source_id: str = ""
    confidence: int = 0
    ingest: IngestSummary = field(default_factory=IngestSummary)


@dataclass
class ChatResult(CommandResult):
    """Result of a chat session.

    Attributes:
        turns: Number of user turns answered
        transcript: (role, text) pairs in order
    """

    turns: int = 0
    transcript: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class CaseInfo:
    """One client case, flattened for display."""

    name: str
    advisor: str
    status: str
    pending_step: str
    responsible_person: str
    sla_hours: int
    notes: str


@dataclass
class CasesResult(CommandResult):
    """Result of the cases command."""

    cases: list[CaseInfo] = field(default_factory=list)
    threshold_hours: int | None = None
