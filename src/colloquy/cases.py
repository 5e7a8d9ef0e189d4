# src/colloquy/cases.py
"""Client onboarding cases tracked by the operations assistant."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from colloquy.models import RecordSource

STALLED_THRESHOLD_HOURS = 24

CASE_FIELD_ORDER = (
    "name",
    "advisor",
    "status",
    "pending_step",
    "responsible_person",
    "SLA_hours",
    "notes",
)


class ClientCase(BaseModel):
    """One client onboarding and where it is stuck."""

    model_config = ConfigDict(frozen=True)

    name: str
    advisor: str
    status: str
    pending_step: str
    responsible_person: str
    sla_hours: int = Field(ge=0)
    notes: str = ""

    def to_record(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "advisor": self.advisor,
            "status": self.status,
            "pending_step": self.pending_step,
            "responsible_person": self.responsible_person,
            "SLA_hours": self.sla_hours,
            "notes": self.notes or None,
        }


class CaseBook:
    """Read-only collection of client cases."""

    def __init__(self, cases: Iterable[ClientCase] = ()) -> None:
        self._cases = tuple(cases)

    def __len__(self) -> int:
        return len(self._cases)

    def __iter__(self) -> Iterator[ClientCase]:
        return iter(self._cases)

    def find(self, name: str) -> list[ClientCase]:
        """Cases whose client name contains ``name``, ignoring case."""
        needle = name.strip().casefold()
        if not needle:
            return []
        return [case for case in self._cases if needle in case.name.casefold()]

    def stalled(self, threshold_hours: int = STALLED_THRESHOLD_HOURS) -> list[ClientCase]:
        """Cases that have been pending longer than ``threshold_hours``."""
        return [case for case in self._cases if case.sla_hours > threshold_hours]

    def to_sources(self, prefix: str = "case") -> list[RecordSource]:
        """Structured-record sources, one per case, ready for ingestion."""
        return [
            RecordSource(
                source_id=f"{prefix}-{_slug(case.name)}",
                record=case.to_record(),
                field_order=CASE_FIELD_ORDER,
            )
            for case in self._cases
        ]


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.casefold()).strip("-")
