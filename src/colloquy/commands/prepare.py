# src/colloquy/commands/prepare.py
"""Build a Colloquy instance from configuration and load its knowledge."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from colloquy.commands.base import IngestSummary, PrepareResult
from colloquy.config import ConfigError, create_colloquy, get_colloquy_config, load_env_file
from colloquy.loaders import document_from_path
from colloquy.models import Source


def prepare(
    documents: Sequence[str | Path] = (),
    config_path: str | Path | None = None,
    builtin: bool | None = None,
) -> PrepareResult:
    """Create a Colloquy instance and ingest its knowledge.

    Knowledge is the built-in operations dataset (unless disabled), the
    documents listed in the config file and ``documents``.

    Args:
        documents: Extra files to ingest
        config_path: Override config file path
        builtin: Force the built-in knowledge on or off (None follows config)

    Returns:
        PrepareResult holding the ready instance, or an error
    """
    load_env_file()

    config = get_colloquy_config(config_path)
    if isinstance(config, ConfigError):
        error = config.message
        if config.suggestion:
            error = f"{error} ({config.suggestion})"
        return PrepareResult(success=False, error=error)

    try:
        colloquy = create_colloquy(config)
    except Exception as e:
        return PrepareResult(success=False, error=f"Failed to create Colloquy: {e}")

    sources: list[Source] = []
    use_builtin = config.builtin_knowledge if builtin is None else builtin
    if use_builtin:
        from colloquy.knowledge import builtin_sources

        sources.extend(builtin_sources())

    warnings: list[str] = []
    for path in [*config.documents, *documents]:
        try:
            sources.append(document_from_path(path))
        except FileNotFoundError as e:
            warnings.append(str(e))

    try:
        report = colloquy.ingest(sources)
    except Exception as e:
        return PrepareResult(success=False, error=f"Failed to index knowledge: {e}")

    failures = [(e.source_id or "?", str(e)) for e in report.errors]
    return PrepareResult(
        success=True,
        colloquy=colloquy,
        ingest=IngestSummary(
            sources=len(sources),
            fragments=len(report.fragments),
            chunks=len(colloquy.index),
            failures=failures,
        ),
        warnings=warnings,
    )
