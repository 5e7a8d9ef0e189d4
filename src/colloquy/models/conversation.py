# src/colloquy/models/conversation.py
"""Conversation history models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ConversationTurn(BaseModel):
    """One utterance in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str

    @classmethod
    def user(cls, content: str) -> "ConversationTurn":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "ConversationTurn":
        return cls(role=Role.ASSISTANT, content=content)

    def render(self) -> str:
        """Render as a ``User: ...`` / ``Assistant: ...`` transcript line."""
        speaker = "User" if self.role is Role.USER else "Assistant"
        return f"{speaker}: {self.content}"
