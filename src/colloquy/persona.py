# src/colloquy/persona.py
"""Persona configuration."""

import random

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TEMPLATE = (
    "You are {persona}. Your role is to be {role}. "
    "Your personality traits include: {traits}. "
    "Rules to follow: {rules}. "
    "Knowledge context: {context}. "
    "Current conversation context: {history}. "
    "User: {message}. Assistant:"
)

PERSONA_VERSION = 1


class Persona(BaseModel):
    """Versioned, explicit persona and behavior configuration.

    Every field the prompt template can reference is a typed attribute, so
    prompt substitution is total.

    Example:
        persona = Persona(
            name="Max",
            role="an operations assistant",
            traits=["Proactive", "Concise"],
            rules=["Keep answers under 30 words"],
            greeting="Good morning. Three onboardings are past SLA.",
        )
    """

    model_config = ConfigDict(frozen=True)

    version: int = PERSONA_VERSION
    name: str = "Assistant"
    role: str = "a helpful AI assistant"
    traits: tuple[str, ...] = ("Friendly", "Concise")
    rules: tuple[str, ...] = (
        "Always be helpful and friendly",
        "Keep responses concise and clear",
    )
    template: str = DEFAULT_TEMPLATE
    greeting: str = "Hello! How can I help you today?"
    conversation_starters: tuple[str, ...] = Field(default_factory=tuple)

    # Canned utterances
    fallback_message: str = "Sorry, I'm having trouble answering right now. Could you try again?"
    no_match_message: str = (
        "I don't have specific information about that in my knowledge base. "
        "Let me connect you with a human advisor who can help."
    )
    error_message: str = (
        "I'm sorry, I encountered an error. "
        "Let me connect you with a human advisor who can help."
    )
    farewell: str = "Is there anything else you'd like me to check?"
    clarification: str = "Sorry, didn't catch that. Could you repeat?"

    def random_starter(self, rng: random.Random | None = None) -> str:
        """Pick a conversation starter, falling back to the greeting."""
        if not self.conversation_starters:
            return self.greeting
        return (rng or random).choice(self.conversation_starters)
