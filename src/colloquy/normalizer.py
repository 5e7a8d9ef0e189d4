# src/colloquy/normalizer.py
"""Clean and bound generated text for spoken output."""

from collections.abc import Sequence

DEFAULT_STOP_MARKERS = (
    "\n\n",
    "User:",
    "Assistant:",
    "Human:",
    "AI:",
    "\nUser",
    "\nAssistant",
)

SENTENCE_ENDINGS = ".!?"


class ResponseNormalizer:
    """Trim raw generations to a short, sentence-aligned reply.

    Steps, in order:

    1. strip surrounding whitespace;
    2. cut at the earliest stop marker found after the first character
       (a reply that *starts* with a marker is left alone);
    3. if still longer than ``max_length``, hard-cut at ``max_length`` and
       then back off to the last ``.``, ``!`` or ``?`` when it lies beyond
       half of ``max_length``; otherwise keep the hard cut.
    """

    def __init__(self, stop_markers: Sequence[str] = DEFAULT_STOP_MARKERS) -> None:
        self.stop_markers = tuple(m for m in stop_markers if m)

    def normalize(self, raw_text: str, max_length: int) -> str:
        if max_length <= 0:
            raise ValueError(f"max_length must be positive, got {max_length}")

        text = raw_text.strip()
        text = self._cut_at_stop_marker(text)

        if len(text) <= max_length:
            return text

        cut = text[:max_length]
        last_end = max(cut.rfind(ch) for ch in SENTENCE_ENDINGS)
        if last_end > max_length // 2:
            return cut[: last_end + 1]
        return cut

    def _cut_at_stop_marker(self, text: str) -> str:
        positions = [text.find(marker, 1) for marker in self.stop_markers]
        positions = [p for p in positions if p > 0]
        if not positions:
            return text
        return text[: min(positions)].rstrip()
