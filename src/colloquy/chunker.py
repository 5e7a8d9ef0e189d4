# src/colloquy/chunker.py
"""Fixed-window chunking with exact overlap."""

from colloquy.models import Chunk, Fragment

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200


class Chunker:
    """Split fragments into bounded, overlapping character windows.

    Windows start every ``chunk_size - overlap`` characters, so consecutive
    chunks of one fragment share exactly ``overlap`` characters. Every chunk
    is at most ``chunk_size`` long and only the final chunk may be shorter.
    The split is a pure function of the fragment text and the policy.
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        overlap: int = DEFAULT_CHUNK_OVERLAP,
    ) -> None:
        """Initialize the chunker.

        Args:
            chunk_size: Maximum characters per chunk
            overlap: Characters shared by consecutive chunks

        Raises:
            ValueError: If the policy does not satisfy chunk_size > overlap >= 0
        """
        if overlap < 0:
            raise ValueError(f"overlap ({overlap}) must be non-negative")
        if overlap >= chunk_size:
            raise ValueError(f"overlap ({overlap}) must be less than chunk_size ({chunk_size})")
        self.chunk_size = chunk_size
        self.overlap = overlap

    @property
    def stride(self) -> int:
        return self.chunk_size - self.overlap

    def split(self, fragment: Fragment) -> list[Chunk]:
        """Split one fragment into ordered chunks (always at least one)."""
        text = fragment.text
        if len(text) <= self.chunk_size:
            return [self._make_chunk(fragment, 0, text)]

        chunks = []
        offset = 0
        while True:
            piece = text[offset : offset + self.chunk_size]
            chunks.append(self._make_chunk(fragment, offset, piece))
            if offset + self.chunk_size >= len(text):
                break
            offset += self.stride
        return chunks

    def split_many(self, fragments: list[Fragment]) -> list[Chunk]:
        """Split fragments in order, concatenating their chunks."""
        return [chunk for fragment in fragments for chunk in self.split(fragment)]

    def _make_chunk(self, fragment: Fragment, offset: int, text: str) -> Chunk:
        return Chunk(
            fragment_id=fragment.id,
            offset=offset,
            length=len(text),
            text=text,
            source_id=fragment.source_id,
            source_type=fragment.source_type,
        )


def merge_chunks(chunks: list[Chunk]) -> str:
    """Reassemble the text of one fragment from its chunks.

    Uses each chunk's offset, so it works for any overlap policy.
    """
    text = ""
    for chunk in sorted(chunks, key=lambda c: c.offset):
        text = text[: chunk.offset] + chunk.text
    return text
