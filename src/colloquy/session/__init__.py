# src/colloquy/session/__init__.py
"""Conversation sessions."""

from colloquy.session.channels import ConsoleOutputChannel, OutputChannel
from colloquy.session.session import ConversationSession
from colloquy.session.state import (
    ACTIVE_STATES,
    TRANSITIONS,
    SessionEvent,
    SessionState,
    SessionStateMachine,
)

__all__ = [
    "ACTIVE_STATES",
    "TRANSITIONS",
    "ConsoleOutputChannel",
    "ConversationSession",
    "OutputChannel",
    "SessionEvent",
    "SessionState",
    "SessionStateMachine",
]
