# src/colloquy/loaders/corpus.py
"""Corpus loading: documents, curated facts and records into fragments."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from colloquy.exceptions import IngestionError
from colloquy.loaders.records import record_to_fragment
from colloquy.loaders.registry import LoaderRegistry, media_type_for
from colloquy.models import (
    DocumentSource,
    FactSource,
    Fragment,
    RecordSource,
    Source,
    SourceType,
)

logger = logging.getLogger(__name__)


@dataclass
class IngestionReport:
    """Outcome of loading a batch of sources.

    Attributes:
        fragments: Fragments from every source that loaded, in source order.
        errors: One IngestionError per source that failed.
    """

    fragments: list[Fragment] = field(default_factory=list)
    errors: list[IngestionError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class CorpusLoader:
    """Turns raw sources into normalized fragments.

    Pure with respect to the outside world: no network calls, no disk writes.
    """

    def __init__(self, registry: LoaderRegistry | None = None) -> None:
        self.registry = registry if registry is not None else LoaderRegistry.default()

    def load(self, sources: list[Source]) -> IngestionReport:
        """Load a batch of sources.

        A failing source is recorded in the report and logged; it never
        aborts the rest of the batch.
        """
        report = IngestionReport()
        for source in sources:
            try:
                report.fragments.extend(self.load_one(source))
            except IngestionError as e:
                logger.warning("Skipping source %s: %s", e.source_id or source.source_id, e)
                report.errors.append(e)

        logger.info(
            "Loaded %d fragments from %d sources (%d failed)",
            len(report.fragments),
            len(sources),
            len(report.errors),
        )
        return report

    def load_one(self, source: Source) -> list[Fragment]:
        """Load a single source.

        Raises:
            UnsupportedFormat: If a document's media type has no loader
            IngestionError: If the source cannot be read
        """
        if isinstance(source, DocumentSource):
            return self.registry.load(source.data, source.media_type, source.source_id)
        if isinstance(source, RecordSource):
            return [record_to_fragment(source)]
        if isinstance(source, FactSource):
            text = source.text.strip()
            if not text:
                return []
            return [
                Fragment(
                    text=text,
                    source_id=source.source_id,
                    source_type=SourceType.CURATED_FACT,
                    metadata={"type": "fact"},
                )
            ]
        raise IngestionError(f"Unknown source kind: {type(source).__name__}")


def document_from_path(path: str | Path, source_id: str | None = None) -> DocumentSource:
    """Read a file into a DocumentSource, declaring its media type from the extension.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    return DocumentSource(
        source_id=source_id or file_path.name,
        media_type=media_type_for(file_path),
        data=file_path.read_bytes(),
    )


def facts_to_sources(facts: list[str], prefix: str = "fact") -> list[FactSource]:
    """Wrap curated knowledge strings as FactSources with stable ids."""
    return [FactSource(source_id=f"{prefix}-{i}", text=fact) for i, fact in enumerate(facts)]
