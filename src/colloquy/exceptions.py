"""Exception taxonomy for Colloquy.

Component-level errors are raised inside the library; the conversation
session catches all of them and turns them into a single fallback utterance.
"""


class ColloquyError(Exception):
    """Base class for all Colloquy errors."""


class IngestionError(ColloquyError):
    """Raised when a source cannot be turned into fragments.

    Attributes:
        source_id: Identifier of the source that failed.
    """

    def __init__(self, message: str, source_id: str | None = None) -> None:
        super().__init__(message)
        self.source_id = source_id


class UnsupportedFormat(IngestionError):
    """Raised when a document's declared media type has no registered loader."""

    def __init__(self, media_type: str, source_id: str | None = None) -> None:
        super().__init__(f"Unsupported media type: {media_type!r}", source_id=source_id)
        self.media_type = media_type


class IndexUnavailable(ColloquyError):
    """Raised by index implementations queried before they are built.

    Callers treat it as an empty result ("no knowledge"), never as a failure.
    """


class GenerationFailure(ColloquyError):
    """The generative backend was unreachable, timed out, or returned nothing usable."""

    def __init__(self, message: str, *, timed_out: bool = False) -> None:
        super().__init__(message)
        self.timed_out = timed_out


class InvalidTransition(ColloquyError):
    """Raised when a session event is not allowed in the current state."""

    def __init__(self, state: str, event: str) -> None:
        super().__init__(f"Event {event!r} is not allowed in state {state!r}")
        self.state = state
        self.event = event
