# src/colloquy/commands/cases.py
"""Cases command - list client onboarding cases."""

from __future__ import annotations

from colloquy.cases import STALLED_THRESHOLD_HOURS, CaseBook, ClientCase
from colloquy.commands.base import CaseInfo, CasesResult


def _to_info(case: ClientCase) -> CaseInfo:
    return CaseInfo(
        name=case.name,
        advisor=case.advisor,
        status=case.status,
        pending_step=case.pending_step,
        responsible_person=case.responsible_person,
        sla_hours=case.sla_hours,
        notes=case.notes,
    )


def cases(
    name: str | None = None,
    stalled: bool = False,
    threshold_hours: int = STALLED_THRESHOLD_HOURS,
    book: CaseBook | None = None,
) -> CasesResult:
    """List client cases, optionally filtered by name or stalled status.

    Args:
        name: Case-insensitive substring of the client name
        stalled: Only cases pending longer than ``threshold_hours``
        threshold_hours: SLA threshold for ``stalled``
        book: Cases to search (default: the built-in dataset)
    """
    if book is None:
        from colloquy.knowledge import CLIENT_CASES

        book = CLIENT_CASES

    selected = book.stalled(threshold_hours) if stalled else list(book)
    if name:
        matches = book.find(name)
        selected = [case for case in selected if case in matches]

    return CasesResult(
        success=True,
        cases=[_to_info(case) for case in selected],
        threshold_hours=threshold_hours if stalled else None,
    )
