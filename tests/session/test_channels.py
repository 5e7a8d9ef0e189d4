# tests/session/test_channels.py
"""Tests for output channels."""

import io

import pytest

pytest.importorskip("rich", reason="Tests require rich package (pip install colloquy-rag[cli])")

from rich.console import Console

from colloquy.session import ConsoleOutputChannel, OutputChannel


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def channel(buffer):
    console = Console(file=buffer, force_terminal=False, width=120)
    return ConsoleOutputChannel(console, speaker="Max")


class TestConsoleOutputChannel:
    @pytest.mark.asyncio
    async def test_speak(self, channel, buffer):
        await channel.speak("Two cases are past SLA.")
        assert buffer.getvalue().strip() == "Max: Two cases are past SLA."

    @pytest.mark.asyncio
    async def test_markup_is_not_interpreted(self, channel, buffer):
        await channel.speak("Use [bold]this[/bold] form")
        assert "[bold]this[/bold]" in buffer.getvalue()

    @pytest.mark.asyncio
    async def test_interrupt(self, channel, buffer):
        await channel.interrupt()
        assert "(interrupted)" in buffer.getvalue()

    @pytest.mark.asyncio
    async def test_connect_and_close_are_noops(self, channel):
        await channel.connect()
        await channel.close()


class TestOutputChannel:
    def test_speak_is_abstract(self):
        with pytest.raises(TypeError):
            OutputChannel()  # type: ignore[abstract]
