from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import ValidationStatus
from ..ingest.model import AttendanceRecord


@dataclass
class ValidationRecord:
    """An attendance row plus its audit tag. Owned by one audit run."""

    record: AttendanceRecord
    date_key: str
    status: ValidationStatus = ValidationStatus.CLEAN

    @property
    def row_number(self) -> int:
        return self.record.row_number

    @property
    def key(self) -> tuple[str, str]:
        return (self.record.employee_name, self.date_key)


@dataclass(frozen=True)
class DuplicateGroup:
    employee_name: str
    date_key: str
    occurrences: int
    row_numbers: list[int]
    project_codes: list[str]


@dataclass(frozen=True)
class InconsistencyGroup:
    project_code: str
    project_names: list[str]
    row_numbers: list[int]

    @property
    def count(self) -> int:
        return len(self.project_names)


@dataclass(frozen=True)
class AuditStatistics:
    total_records: int
    clean_records: int
    duplicates_found: int
    inconsistencies_found: int
    clean_with_inconsistencies: int
    validation_rate: float
    duplicate_rate: float
    inconsistency_rate: float

    @property
    def fully_clean(self) -> int:
        return self.clean_records - self.clean_with_inconsistencies


@dataclass(frozen=True)
class AuditReport:
    records: list[ValidationRecord]
    duplicates: list[DuplicateGroup]
    inconsistencies: list[InconsistencyGroup]
    clean_records: list[ValidationRecord]
    statistics: AuditStatistics
    top_duplicate_employees: list[tuple[str, int]] = field(default_factory=list)
    top_inconsistent_codes: list[tuple[str, int]] = field(default_factory=list)
