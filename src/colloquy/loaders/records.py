# src/colloquy/loaders/records.py
"""Deterministic prose serialization for structured records."""

import re
from collections.abc import Mapping, Sequence
from typing import Any

from colloquy.models import Fragment, RecordSource, SourceType


def serialize_record(record: Mapping[str, Any], field_order: Sequence[str] = ()) -> str:
    """Serialize a key/value record into labeled prose lines.

    Fields named in ``field_order`` come first, in that order; the remaining
    keys follow sorted by name. Nested mappings are flattened with their
    parent label as prefix, sequences are joined with commas and ``None``
    values are skipped. The output depends only on the record's content, so
    serializing the same record twice (in any key insertion order) yields
    the same text.

    Example:
        >>> serialize_record({"sla_hours": 48, "name": "John Kim"}, ["name"])
        'Name: John Kim\\nSla Hours: 48'
    """
    lines: list[str] = []
    _append_fields(lines, record, field_order, prefix="")
    return "\n".join(lines)


def _append_fields(
    lines: list[str],
    record: Mapping[str, Any],
    field_order: Sequence[str],
    prefix: str,
) -> None:
    leading = [key for key in field_order if key in record]
    rest = sorted((key for key in record if key not in leading), key=str)

    for key in [*leading, *rest]:
        value = record[key]
        if value is None:
            continue
        label = f"{prefix}{_label(str(key))}"
        if isinstance(value, Mapping):
            _append_fields(lines, value, (), prefix=f"{label} ")
        else:
            lines.append(f"{label}: {_format_value(value)}")


def _label(key: str) -> str:
    """Turn ``slaHours`` / ``sla_hours`` / ``sla-hours`` into ``Sla Hours``."""
    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", key)
    words = re.split(r"[\s_\-]+", spaced.strip())
    return " ".join(w if w.isupper() else w.capitalize() for w in words if w)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (int, float)):
        return f"{value:,}"
    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value, key=str) if isinstance(value, (set, frozenset)) else value
        return ", ".join(_format_value(v) for v in items)
    if isinstance(value, Mapping):
        return "; ".join(f"{_label(str(k))}: {_format_value(v)}" for k, v in sorted(value.items()))
    return str(value).strip()


def record_to_fragment(source: RecordSource) -> Fragment:
    """Wrap a serialized record as a structured-record fragment."""
    return Fragment(
        text=serialize_record(source.record, source.field_order),
        source_id=source.source_id,
        source_type=SourceType.STRUCTURED_RECORD,
        metadata={"type": "record"},
    )
