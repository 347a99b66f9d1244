from __future__ import annotations

from dataclasses import dataclass

from .absence.factory import RestDayStrategyFactory
from .absence.service import AbsenceReconciler
from .allocation.service import ProjectAllocationAggregator
from .allowance.leave import LeaveMarker
from .allowance.policy_loader import PolicyTableLoader
from .allowance.service import FoodAllowanceEvaluator
from .audit.service import DataQualityAuditor
from .ingest.excel_source import ExcelRowSource
from .ingest.service import AttendanceIngestService
from .reports.excel_writer import ExcelReportWriter
from .reports.service import ReportEngine


@dataclass(frozen=True)
class Container:
    excel_source: ExcelRowSource
    excel_writer: ExcelReportWriter
    policy_loader: PolicyTableLoader

    ingest_service: AttendanceIngestService
    absence_reconciler: AbsenceReconciler
    auditor: DataQualityAuditor
    allowance_evaluator: FoodAllowanceEvaluator
    allocation_aggregator: ProjectAllocationAggregator
    report_engine: ReportEngine


def build_container(*, settings: object | None = None) -> Container:
    leave_marker = LeaveMarker(
        code=getattr(settings, "ANNUAL_LEAVE_CODE", LeaveMarker.code) or None,
        phrase=getattr(settings, "ANNUAL_LEAVE_PHRASE", LeaveMarker.phrase) or None,
    )

    excel_source = ExcelRowSource()
    excel_writer = ExcelReportWriter()
    policy_loader = PolicyTableLoader()

    ingest_service = AttendanceIngestService()
    absence_reconciler = AbsenceReconciler(strategy_factory=RestDayStrategyFactory())
    auditor = DataQualityAuditor()
    allowance_evaluator = FoodAllowanceEvaluator(leave_marker=leave_marker)
    allocation_aggregator = ProjectAllocationAggregator()
    report_engine = ReportEngine(
        ingest_service,
        absence_reconciler,
        auditor,
        allowance_evaluator,
        allocation_aggregator,
        policy_loader=policy_loader,
    )

    return Container(
        excel_source=excel_source,
        excel_writer=excel_writer,
        policy_loader=policy_loader,
        ingest_service=ingest_service,
        absence_reconciler=absence_reconciler,
        auditor=auditor,
        allowance_evaluator=allowance_evaluator,
        allocation_aggregator=allocation_aggregator,
        report_engine=report_engine,
    )
