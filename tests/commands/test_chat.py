# tests/commands/test_chat.py
"""Tests for the chat command."""

import pytest
from conftest import FakeLLMClient

from colloquy import Colloquy
from colloquy.commands import chat


async def utterances(*texts):
    for text in texts:
        yield text


@pytest.fixture
def bot(mock_provider, persona, facts):
    bot = Colloquy(provider=mock_provider, persona=persona)
    bot.ingest(facts)
    return bot


class TestChatCommand:
    @pytest.mark.asyncio
    async def test_answers_each_input(self, bot, output):
        result = await chat.chat(bot, output, utterances("first", "second"))

        assert result.success is True
        assert result.turns == 2
        assert [role for role, _ in result.transcript] == [
            "user",
            "assistant",
            "user",
            "assistant",
        ]
        assert output.closed

    @pytest.mark.asyncio
    async def test_voice_greeting(self, bot, output, persona):
        result = await chat.chat(bot, output, utterances("hi"), voice=True)

        assert result.transcript[0] == ("assistant", persona.greeting)
        assert output.spoken[0] == persona.greeting

    @pytest.mark.asyncio
    async def test_exit_word_says_farewell(self, bot, output, persona):
        result = await chat.chat(bot, output, utterances("hello", "Bye", "ignored"))

        assert result.turns == 1
        assert output.spoken[-1] == persona.farewell

    @pytest.mark.asyncio
    async def test_blank_input_asks_for_clarification(self, bot, output, persona):
        result = await chat.chat(bot, output, utterances("", "  ", "real question"))

        assert result.turns == 1
        assert output.spoken[:2] == [persona.clarification, persona.clarification]

    @pytest.mark.asyncio
    async def test_voice_opens_with_conversation_starter(
        self, mock_provider, persona, facts, output
    ):
        persona = persona.model_copy(
            update={"conversation_starters": ("Morning. One wire is stuck.",)}
        )
        bot = Colloquy(provider=mock_provider, persona=persona)
        bot.ingest(facts)

        result = await chat.chat(bot, output, utterances("hi"), voice=True, starter=True)

        assert result.transcript[0] == ("assistant", "Morning. One wire is stuck.")
        assert output.spoken[0] == "Morning. One wire is stuck."

    @pytest.mark.asyncio
    async def test_backend_failure_uses_fallback(self, mock_provider, persona, facts, output):
        bot = Colloquy(provider=mock_provider, persona=persona)
        bot.llm_client = FakeLLMClient(error=TimeoutError("slow"))
        bot.ingest(facts)

        result = await chat.chat(bot, output, utterances("anything stalled?"))

        assert result.transcript[-1] == ("assistant", persona.fallback_message)
