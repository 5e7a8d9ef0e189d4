# src/colloquy/session/channels.py
"""Output channels that deliver assistant utterances."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rich.console import Console


class OutputChannel(ABC):
    """Abstract sink for assistant utterances (speech synthesis, chat UI, ...).

    ``speak`` must complete only once the utterance has been fully delivered;
    the session does not accept the next turn until then.

    Example:
        class PrintChannel(OutputChannel):
            async def speak(self, text):
                print(text)
    """

    async def connect(self) -> None:
        """Open the underlying transport. Optional."""

    @abstractmethod
    async def speak(self, text: str) -> None:
        """Deliver one utterance."""
        ...

    async def interrupt(self) -> None:
        """Abort the utterance currently being delivered. Optional."""

    async def close(self) -> None:
        """Release the underlying transport. Optional."""


class ConsoleOutputChannel(OutputChannel):
    """Prints utterances to a rich console."""

    def __init__(self, console: Console | None = None, speaker: str = "Assistant") -> None:
        if console is None:
            try:
                from rich.console import Console
            except ImportError as e:
                raise ImportError(
                    "rich is required for ConsoleOutputChannel. "
                    "Install it with: pip install colloquy-rag[cli]"
                ) from e
            console = Console()
        self.console = console
        self.speaker = speaker

    async def speak(self, text: str) -> None:
        from rich.markup import escape

        self.console.print(f"[bold cyan]{escape(self.speaker)}:[/bold cyan] {escape(text)}")

    async def interrupt(self) -> None:
        self.console.print("[dim](interrupted)[/dim]")
