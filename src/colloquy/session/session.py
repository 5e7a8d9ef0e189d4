# src/colloquy/session/session.py
"""Conversation session: a single-flight turn loop over a Responder."""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import AsyncIterable

from colloquy.exceptions import GenerationFailure
from colloquy.models import ConversationTurn
from colloquy.persona import Persona
from colloquy.responder import Responder
from colloquy.session.channels import OutputChannel
from colloquy.session.state import (
    SessionEvent,
    SessionState,
    SessionStateMachine,
    StateListener,
)
from colloquy.settings import Settings

logger = logging.getLogger(__name__)


class ConversationSession:
    """Drives one conversation through the session state machine.

    Turns are strictly serial: an input is retrieved for, generated for and
    spoken before the next one starts. Input arriving while the session is
    not listening is buffered or refused according to
    ``settings.interrupt_policy`` and ``settings.pending_policy``. Any
    failure inside a turn produces exactly one fallback utterance.

    Example:
        session = ConversationSession(responder, ConsoleOutputChannel())
        await session.start(voice=True)
        session.user_message("Which onboardings are stalled?")
        await session.wait_idle()
        await session.stop()
    """

    def __init__(
        self,
        responder: Responder,
        output: OutputChannel,
        persona: Persona | None = None,
        settings: Settings | None = None,
        on_state_change: StateListener | None = None,
    ) -> None:
        self.responder = responder
        self.output = output
        self.persona = persona if persona is not None else responder.persona
        self.settings = settings if settings is not None else responder.settings

        self._machine = SessionStateMachine(on_change=on_state_change)
        self._history: list[ConversationTurn] = []
        self._pending: deque[str] = deque()
        self._idle = asyncio.Event()
        self._idle.set()
        self._turn: asyncio.Task[None] | None = None
        self._feeders: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> SessionState:
        return self._machine.state

    @property
    def history(self) -> list[ConversationTurn]:
        """Completed turns, oldest first."""
        return list(self._history)

    @property
    def pending(self) -> int:
        return len(self._pending)

    @property
    def busy(self) -> bool:
        """True unless the session could start a new turn right now."""
        return self._turn is not None or self.state is not SessionState.LISTENING

    async def start(self, voice: bool = False, greeting: str | None = None) -> None:
        """Connect the output channel and begin listening.

        For voice sessions the persona greeting (or ``greeting``, when given)
        is spoken and recorded as a leading assistant turn before any user
        input is processed.
        """
        self._machine.fire(SessionEvent.START)
        await self.output.connect()
        if self.state is SessionState.ENDED:
            return
        self._machine.fire(SessionEvent.READY)

        opening = self.persona.greeting if greeting is None else greeting
        if voice and opening:
            self._machine.fire(SessionEvent.GREET)
            self._idle.clear()
            self._history.append(ConversationTurn.assistant(opening))
            await self._deliver(opening)
            if self.state is SessionState.ENDED:
                return
            self._machine.fire(SessionEvent.OUTPUT_COMPLETE)

        logger.info("Session started (voice=%s)", voice)
        self._drain()

    def user_message(self, text: str) -> bool:
        """Submit user input.

        Returns:
            True if the input was accepted for processing, False if refused
        """
        text = text.strip()
        if not text:
            return False
        if self.state in (SessionState.IDLE, SessionState.ENDED):
            logger.warning("Ignoring input while session is %s", self.state.value)
            return False

        if not self.busy and not self._pending:
            self._begin_turn(text)
            return True

        if self.settings.interrupt_policy == "reject":
            logger.info("Rejecting input while %s: %r", self.state.value, text)
            return False

        if self.settings.pending_policy == "latest_wins":
            if self._pending:
                logger.info("Replacing pending input %r with %r", self._pending[-1], text)
                self._pending.clear()
        elif len(self._pending) >= self.settings.max_pending_inputs:
            logger.warning(
                "Pending input buffer full (%d), dropping %r",
                self.settings.max_pending_inputs,
                text,
            )
            return False

        self._pending.append(text)
        self._idle.clear()
        return True

    def attach(self, inputs: AsyncIterable[str]) -> asyncio.Task[None]:
        """Feed every item of an async iterable into the session."""

        async def feed() -> None:
            async for text in inputs:
                if self.state is SessionState.ENDED:
                    break
                self.user_message(text)

        task = asyncio.create_task(feed(), name="colloquy-session-input")
        self._feeders.add(task)
        task.add_done_callback(self._feeders.discard)
        return task

    async def interrupt(self) -> bool:
        """Abandon the in-flight turn and return to listening.

        The interrupted turn is not recorded in history. Buffered input is
        kept and processed next.

        Returns:
            True if a turn was interrupted
        """
        turn = self._turn
        if turn is None or turn.done() or not self._machine.can_fire(SessionEvent.INTERRUPT):
            return False

        turn.cancel()
        self._turn = None
        self._machine.fire(SessionEvent.INTERRUPT)
        await self.output.interrupt()
        logger.info("Turn interrupted")
        self._drain()
        return True

    async def stop(self) -> None:
        """End the session. Nothing is spoken after this returns."""
        if self.state is SessionState.ENDED:
            return

        self._machine.fire(SessionEvent.STOP)
        self._pending.clear()

        tasks = [t for t in (self._turn, *self._feeders) if t is not None]
        self._turn = None
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

        await self.output.close()
        self._idle.set()
        logger.info("Session ended after %d turns", len(self._history))

    async def wait_idle(self) -> None:
        """Wait until every accepted input has been answered."""
        await self._idle.wait()

    def _begin_turn(self, text: str) -> None:
        self._machine.fire(SessionEvent.USER_INPUT)
        self._idle.clear()
        turn = asyncio.create_task(self._process(text), name="colloquy-session-turn")
        turn.add_done_callback(self._on_turn_done)
        self._turn = turn

    def _on_turn_done(self, turn: asyncio.Task[None]) -> None:
        if not turn.cancelled() and turn.exception() is not None:
            logger.error("Turn crashed", exc_info=turn.exception())
        if self._turn is turn:
            self._turn = None
        self._drain()

    def _drain(self) -> None:
        if self.busy:
            return
        if self._pending:
            self._begin_turn(self._pending.popleft())
        else:
            self._idle.set()

    async def _process(self, text: str) -> None:
        history = list(self._history)

        try:
            reply = (await self.responder.arespond(text, history)).text
            event = SessionEvent.GENERATION_COMPLETE
        except GenerationFailure as e:
            logger.warning("Generation failed for %r: %s", text, e)
            reply = self.persona.fallback_message
            event = SessionEvent.GENERATION_FAILED
        except Exception:
            logger.exception("Turn failed for %r", text)
            reply = self.persona.fallback_message
            event = SessionEvent.GENERATION_FAILED

        self._machine.fire(event)
        await self._deliver(reply)
        self._history.append(ConversationTurn.user(text))
        self._history.append(ConversationTurn.assistant(reply))
        self._machine.fire(SessionEvent.OUTPUT_COMPLETE)

    async def _deliver(self, text: str) -> None:
        try:
            await self.output.speak(text)
        except Exception:
            logger.exception("Output channel failed to deliver %r", text)
