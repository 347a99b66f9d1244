from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Collection, Iterable, Optional, Sequence, Union

from ..absence.model import AbsenceReport
from ..absence.service import AbsenceReconciler
from ..allocation.model import AllocationReport
from ..allocation.service import ProjectAllocationAggregator
from ..allowance.model import AllowanceReport
from ..allowance.policy_loader import PolicyTableLoader
from ..allowance.service import FoodAllowanceEvaluator
from ..audit.model import AuditReport
from ..audit.service import DataQualityAuditor
from ..core.enums import ReportKind
from ..core.exceptions import ValidationError
from ..ingest.model import IngestResult
from ..ingest.service import AttendanceIngestService

logger = logging.getLogger(__name__)

Rows = Iterable[Sequence[Any]]
DerivedReport = Union[AbsenceReport, AuditReport, AllowanceReport, AllocationReport]


@dataclass(frozen=True)
class ReportResult:
    kind: ReportKind
    ingest: IngestResult
    report: DerivedReport

    @property
    def month(self) -> int:
        return self.ingest.month

    @property
    def year(self) -> int:
        return self.ingest.year


def parse_report_kind(value: Union[str, ReportKind]) -> ReportKind:
    if isinstance(value, ReportKind):
        return value
    try:
        return ReportKind(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown report type: {value}") from None


class ReportEngine:
    """Ingests a timesheet once and runs one derivation on it.

    The derivations do not know about each other; each only sees the
    ingested records (plus policy tables for the food allowance).
    """

    def __init__(
        self,
        ingest: AttendanceIngestService,
        reconciler: AbsenceReconciler,
        auditor: DataQualityAuditor,
        allowance: FoodAllowanceEvaluator,
        allocation: ProjectAllocationAggregator,
        *,
        policy_loader: Optional[PolicyTableLoader] = None,
    ):
        self._ingest = ingest
        self._reconciler = reconciler
        self._auditor = auditor
        self._allowance = allowance
        self._allocation = allocation
        self._policies = policy_loader or PolicyTableLoader()

    def list_employees(self, rows: Rows, month: int, year: int) -> list[str]:
        return self._ingest.ingest(rows, month, year).employee_names

    def run(
        self,
        kind: ReportKind,
        rows: Rows,
        month: int,
        year: int,
        *,
        fri_sat_members: Collection[str] = (),
        project_policy_rows: Optional[Rows] = None,
        employee_policy_rows: Optional[Rows] = None,
    ) -> ReportResult:
        kind = parse_report_kind(kind)
        if kind == ReportKind.ALLOWANCE and (project_policy_rows is None or employee_policy_rows is None):
            raise ValidationError("Food allowance needs both the project and the employee policy tables")

        ingested = self._ingest.ingest(rows, month, year)

        if kind in (ReportKind.ABSENCE, ReportKind.TIMESHEET):
            report: DerivedReport = self._reconciler.reconcile(
                ingested.records_by_employee, ingested.month, ingested.year, fri_sat_members
            )
        elif kind == ReportKind.AUDIT:
            report = self._auditor.audit(ingested.records)
        elif kind == ReportKind.ALLOWANCE:
            report = self._allowance.evaluate(
                ingested,
                self._policies.load_project_policies(project_policy_rows),
                self._policies.load_employee_policies(employee_policy_rows),
            )
        else:
            report = self._allocation.aggregate(ingested.records_by_employee)

        logger.info("Built %s report for %02d/%s", kind.value, ingested.month, ingested.year)
        return ReportResult(kind=kind, ingest=ingested, report=report)
