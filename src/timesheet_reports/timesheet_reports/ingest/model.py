from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence, Union

from ..common.calendar_utils import canonical_date_key
from ..core.enums import RejectReason


@dataclass(frozen=True)
class AttendanceRecord:
    """One worked day of one employee on one project."""

    employee_name: str
    work_date: date
    project_code: str
    project_name: str
    entered_by: str
    row_number: int


@dataclass(frozen=True)
class Accepted:
    record: AttendanceRecord


@dataclass(frozen=True)
class Rejected:
    row_number: int
    reason: RejectReason


RowOutcome = Union[Accepted, Rejected]


@dataclass(frozen=True)
class IngestResult:
    """Records of the target month, grouped by employee in source order."""

    month: int
    year: int
    records: list[AttendanceRecord]
    records_by_employee: dict[str, list[AttendanceRecord]]
    rejected: list[Rejected] = field(default_factory=list)

    @property
    def employee_names(self) -> list[str]:
        return sorted(self.records_by_employee)


def group_by_date(records: Sequence[AttendanceRecord]) -> dict[str, list[AttendanceRecord]]:
    """Records keyed by canonical date, in first-seen order."""
    out: dict[str, list[AttendanceRecord]] = {}
    for r in records:
        out.setdefault(canonical_date_key(r.work_date), []).append(r)
    return out
