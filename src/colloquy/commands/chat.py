# src/colloquy/commands/chat.py
"""Chat command - run a conversation session over an input stream."""

from __future__ import annotations

from collections.abc import AsyncIterable

from colloquy.colloquy import Colloquy
from colloquy.commands.base import ChatResult
from colloquy.models import Role
from colloquy.session import OutputChannel

EXIT_WORDS = frozenset({"exit", "quit", "bye"})


async def chat(
    colloquy: Colloquy,
    output: OutputChannel,
    inputs: AsyncIterable[str],
    voice: bool = False,
    starter: bool = False,
) -> ChatResult:
    """Converse until the input stream ends or the user says goodbye.

    Each input is answered before the next one is read, so replies stay in
    order with the prompts the user sees. Blank input is answered with the
    persona's clarification line.

    Args:
        colloquy: A loaded Colloquy instance
        output: Where replies are spoken
        inputs: User utterances
        voice: Open with the persona greeting
        starter: Open voice sessions with a random conversation starter instead

    Returns:
        ChatResult with the transcript
    """
    session = colloquy.session(output)
    greeting = colloquy.persona.random_starter() if starter else None
    await session.start(voice=voice, greeting=greeting)
    try:
        async for text in inputs:
            if text.strip().lower() in EXIT_WORDS:
                await output.speak(colloquy.persona.farewell)
                break
            if not text.strip():
                await output.speak(colloquy.persona.clarification)
                continue
            if session.user_message(text):
                await session.wait_idle()
    finally:
        await session.stop()

    transcript = [(turn.role.value, turn.content) for turn in session.history]
    return ChatResult(
        success=True,
        turns=sum(1 for turn in session.history if turn.role is Role.USER),
        transcript=transcript,
    )
