# src/colloquy/commands/__init__.py
"""UI-agnostic command layer for Colloquy.

Commands return data structures, allowing front ends to render results
appropriately.

Usage:
    from colloquy.commands import ask, cases

    result = ask.ask("What is pending for John Kim?")
    result = cases.cases(stalled=True)
"""

from colloquy.commands import ask, cases, chat, prepare
from colloquy.commands.base import (
    AskResult,
    CaseInfo,
    CasesResult,
    ChatResult,
    CommandResult,
    IngestSummary,
    PrepareResult,
)

__all__ = [
    # Base types
    "CommandResult",
    # Result types
    "AskResult",
    "CaseInfo",
    "CasesResult",
    "ChatResult",
    "IngestSummary",
    "PrepareResult",
    # Command modules
    "ask",
    "cases",
    "chat",
    "prepare",
]
