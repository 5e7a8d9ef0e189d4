# src/colloquy/session/state.py
"""Conversation session states and the legal transitions between them."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from colloquy.exceptions import InvalidTransition

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    LISTENING = "listening"
    GENERATING = "generating"
    SPEAKING = "speaking"
    ENDED = "ended"

    @property
    def is_active(self) -> bool:
        return self in ACTIVE_STATES


ACTIVE_STATES = frozenset(
    {SessionState.LISTENING, SessionState.GENERATING, SessionState.SPEAKING}
)


class SessionEvent(str, Enum):
    START = "start"
    READY = "ready"
    USER_INPUT = "user_input"
    GENERATION_COMPLETE = "generation_complete"
    GENERATION_FAILED = "generation_failed"
    OUTPUT_COMPLETE = "output_complete"
    GREET = "greet"
    INTERRUPT = "interrupt"
    STOP = "stop"


TRANSITIONS: dict[tuple[SessionState, SessionEvent], SessionState] = {
    (SessionState.IDLE, SessionEvent.START): SessionState.CONNECTING,
    (SessionState.CONNECTING, SessionEvent.READY): SessionState.LISTENING,
    (SessionState.LISTENING, SessionEvent.USER_INPUT): SessionState.GENERATING,
    (SessionState.LISTENING, SessionEvent.GREET): SessionState.SPEAKING,
    (SessionState.GENERATING, SessionEvent.GENERATION_COMPLETE): SessionState.SPEAKING,
    (SessionState.GENERATING, SessionEvent.GENERATION_FAILED): SessionState.SPEAKING,
    (SessionState.SPEAKING, SessionEvent.OUTPUT_COMPLETE): SessionState.LISTENING,
    (SessionState.GENERATING, SessionEvent.INTERRUPT): SessionState.LISTENING,
    (SessionState.SPEAKING, SessionEvent.INTERRUPT): SessionState.LISTENING,
}
# STOP is legal from every state that has not already ended
for _state in SessionState:
    if _state is not SessionState.ENDED:
        TRANSITIONS[(_state, SessionEvent.STOP)] = SessionState.ENDED

StateListener = Callable[[SessionState, SessionState], None]


class SessionStateMachine:
    """Tracks the current state and rejects events the table does not allow."""

    def __init__(self, on_change: StateListener | None = None) -> None:
        self._state = SessionState.IDLE
        self._on_change = on_change

    @property
    def state(self) -> SessionState:
        return self._state

    def can_fire(self, event: SessionEvent) -> bool:
        return (self._state, event) in TRANSITIONS

    def fire(self, event: SessionEvent) -> SessionState:
        """Apply an event and return the new state.

        Raises:
            InvalidTransition: If the event is not legal in the current state
        """
        try:
            new_state = TRANSITIONS[(self._state, event)]
        except KeyError:
            raise InvalidTransition(self._state.value, event.value) from None

        old_state, self._state = self._state, new_state
        logger.debug("Session %s --%s--> %s", old_state.value, event.value, new_state.value)
        if self._on_change is not None:
            self._on_change(old_state, new_state)
        return new_state
