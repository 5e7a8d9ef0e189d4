"""Shared pytest fixtures."""

import asyncio
import os
from dataclasses import dataclass
from typing import Any

import pytest

from colloquy.embedder import HashingEmbedder
from colloquy.models import FactSource
from colloquy.persona import Persona
from colloquy.providers import LLMClient, SamplingParams
from colloquy.session import OutputChannel


class FakeLLMClient(LLMClient):
    """Scripted generative backend that records every prompt it sees."""

    def __init__(
        self,
        replies: list[str] | None = None,
        delay: float = 0.0,
        error: Exception | None = None,
    ) -> None:
        self.replies = list(replies or ["Here is what I found."])
        self.delay = delay
        self.error = error
        self.prompts: list[str] = []
        self.params: list[SamplingParams | None] = []

    def _next_reply(self, prompt: str, params: SamplingParams | None) -> str:
        self.prompts.append(prompt)
        self.params.append(params)
        if self.error is not None:
            raise self.error
        if len(self.replies) > 1:
            return self.replies.pop(0)
        return self.replies[0]

    def complete(self, prompt, params=None, timeout=None):
        return self._next_reply(prompt, params)

    async def acomplete(self, prompt, params=None, timeout=None):
        if self.delay:
            await asyncio.sleep(self.delay)
        return self._next_reply(prompt, params)


class RecordingOutputChannel(OutputChannel):
    """Output channel that remembers what it was asked to say."""

    def __init__(self, delay: float = 0.0) -> None:
        self.delay = delay
        self.spoken: list[str] = []
        self.connected = False
        self.closed = False
        self.interrupts = 0

    async def connect(self) -> None:
        self.connected = True

    async def speak(self, text: str) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        self.spoken.append(text)

    async def interrupt(self) -> None:
        self.interrupts += 1

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def embedder():
    """Deterministic offline embedder."""
    return HashingEmbedder(dimensions=256)


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def output():
    return RecordingOutputChannel()


@pytest.fixture
def persona():
    return Persona(
        name="Max",
        role="an operations assistant",
        traits=("Proactive", "Concise"),
        rules=("Keep answers short", "Always offer next steps"),
        greeting="Good morning. Two onboardings are past SLA.",
        fallback_message="Sorry, could you say that again?",
    )


@pytest.fixture
def facts():
    return [
        FactSource(
            source_id="fact-funding",
            text="Michael Brown's wire transfer was received and is pending treasury posting.",
        ),
        FactSource(
            source_id="fact-id",
            text="John Kim uploaded a passport; the ID verification needs manager attestation.",
        ),
    ]


@pytest.fixture
def mock_provider(embedder, fake_llm):
    """Provider satisfying the ProviderConfig protocol with offline components."""

    @dataclass(frozen=True)
    class MockProvider:
        _embedder: Any
        _llm_client: Any

        def build_embedder(self, settings: Any) -> Any:
            return self._embedder

        def build_llm_client(self, settings: Any) -> Any:
            return self._llm_client

    return MockProvider(_embedder=embedder, _llm_client=fake_llm)


OFFLINE_REPLY = "Attestation is with Maria Gomez."


@pytest.fixture
def offline_config(tmp_path, monkeypatch):
    """Write a colloquy.yaml that needs no model server and chdir next to it."""
    for key in list(os.environ):
        if key.startswith("COLLOQUY_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    path = tmp_path / "colloquy.yaml"
    path.write_text(
        "provider: custom\n"
        "embedder: colloquy.embedder.HashingEmbedder\n"
        "embedder_kwargs:\n"
        "  dimensions: 256\n"
        "llm_client: conftest.FakeLLMClient\n"
        "llm_client_kwargs:\n"
        f"  replies: ['{OFFLINE_REPLY}']\n",
        encoding="utf-8",
    )
    return path
