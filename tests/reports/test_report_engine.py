from datetime import date
from decimal import Decimal

import pytest

from src.timesheet_reports.timesheet_reports.absence.model import AbsenceReport
from src.timesheet_reports.timesheet_reports.allocation.model import AllocationReport
from src.timesheet_reports.timesheet_reports.allowance.model import AllowanceReport
from src.timesheet_reports.timesheet_reports.audit.model import AuditReport
from src.timesheet_reports.timesheet_reports.container import build_container
from src.timesheet_reports.timesheet_reports.core.enums import ReportKind
from src.timesheet_reports.timesheet_reports.core.exceptions import StructuralError, ValidationError
from src.timesheet_reports.timesheet_reports.reports.service import parse_report_kind

PROJECT_POLICIES = [
    ("Project Code", "Project Name", "Location", "Food Policy 1", "Food Policy 2"),
    ("P1", "Website Redesign", "HQ", "Yes", "No"),
    ("P2", "Site Relaunch", "HQ", "no", "YES"),
]

EMPLOYEE_POLICIES = [
    ("Employee Name", "Amount", "Food Policy"),
    ("A", 200, "Food Policy 1"),
]


@pytest.fixture
def engine():
    return build_container().report_engine


def test_list_employees_only_counts_the_selected_month(engine, march_2024_rows):
    assert engine.list_employees(march_2024_rows, 3, 2024) == ["A", "B"]
    assert engine.list_employees(march_2024_rows, 4, 2024) == ["B"]


@pytest.mark.parametrize(
    "kind, report_type",
    [
        (ReportKind.TIMESHEET, AbsenceReport),
        (ReportKind.ABSENCE, AbsenceReport),
        (ReportKind.AUDIT, AuditReport),
        (ReportKind.ALLOCATION, AllocationReport),
    ],
)
def test_run_dispatches_by_kind(engine, march_2024_rows, kind, report_type):
    result = engine.run(kind, march_2024_rows, 3, 2024)

    assert result.kind == kind
    assert isinstance(result.report, report_type)
    assert (result.month, result.year) == (3, 2024)
    assert len(result.ingest.records) == 4


def test_run_accepts_kind_as_text(engine, march_2024_rows):
    result = engine.run("Absence", march_2024_rows, 3, 2024)

    assert result.kind == ReportKind.ABSENCE
    assert result.report.summaries["A"].total_absent_days == 26


def test_allowance_uses_policy_tables(engine, march_2024_rows):
    result = engine.run(
        ReportKind.ALLOWANCE,
        march_2024_rows,
        3,
        2024,
        project_policy_rows=PROJECT_POLICIES,
        employee_policy_rows=EMPLOYEE_POLICIES,
    )

    assert isinstance(result.report, AllowanceReport)
    assert set(result.report.summaries) == {"A"}
    assert result.report.grand_total == Decimal("400")


def test_allowance_without_policy_tables_is_refused(engine, march_2024_rows):
    with pytest.raises(ValidationError):
        engine.run(ReportKind.ALLOWANCE, march_2024_rows, 3, 2024, project_policy_rows=PROJECT_POLICIES)


def test_same_records_feed_absence_but_not_allowance(engine, march_2024_rows):
    absence = engine.run(ReportKind.ABSENCE, march_2024_rows, 3, 2024)
    allowance = engine.run(
        ReportKind.ALLOWANCE,
        march_2024_rows,
        3,
        2024,
        project_policy_rows=PROJECT_POLICIES,
        employee_policy_rows=EMPLOYEE_POLICIES,
    )

    assert "B" in absence.report.summaries
    assert "B" not in allowance.report.summaries


def test_fri_sat_members_are_passed_through(engine, make_sheet):
    rows = make_sheet(*[("P1", "X", date(2024, 3, d), "C", "hr") for d in range(1, 32)])

    result = engine.run(ReportKind.ABSENCE, rows, 3, 2024, fri_sat_members=["C"])

    assert result.report.summaries["C"].worked_saturdays == 5


def test_empty_timesheet_is_structural_error(engine):
    with pytest.raises(StructuralError):
        engine.run(ReportKind.AUDIT, [], 3, 2024)


def test_unknown_kind():
    with pytest.raises(ValidationError):
        parse_report_kind("payroll")


def test_kind_enum_passes_through():
    assert parse_report_kind(ReportKind.AUDIT) is ReportKind.AUDIT
    assert parse_report_kind(" Allocation ") is ReportKind.ALLOCATION
