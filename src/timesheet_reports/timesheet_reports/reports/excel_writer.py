from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, Union

import pandas as pd

from ..absence.model import AbsenceReport
from ..allocation.model import AllocationReport
from ..allowance.model import AllowanceReport
from ..audit.model import AuditReport
from ..common.calendar_utils import canonical_date_key, month_name
from ..core.constants import UNASSIGNED_PROJECT
from ..core.enums import AllocationMode, ReportKind, ValidationStatus
from .service import ReportResult

logger = logging.getLogger(__name__)

Target = Union[str, Path, IO[bytes]]

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_STATUS_LABELS = {
    ValidationStatus.CLEAN: "✅ Clean",
    ValidationStatus.DUPLICATE: "🟡 Duplicate",
    ValidationStatus.INCONSISTENT: "🔴 Inconsistent",
}

_FILE_PREFIX = {
    ReportKind.TIMESHEET: "Timesheets",
    ReportKind.ABSENCE: "Absence_Report",
    ReportKind.AUDIT: "Data_Validation",
    ReportKind.ALLOWANCE: "Food_Allowance",
    ReportKind.ALLOCATION: "Project_Summary",
}


def _pct(value: float) -> str:
    return f"{value:.1f}%" if value > 0 else "0%"


def _join(values) -> str:
    return ", ".join(str(v) for v in values)


class ExcelReportWriter:
    """Report emission: one DataFrame per sheet, written with openpyxl.

    The target (path or binary buffer) is supplied by the caller; the
    writer keeps no output location of its own.
    """

    def filename_for(self, result: ReportResult) -> str:
        return f"{_FILE_PREFIX[result.kind]}_{result.month:02d}_{result.year}.xlsx"

    def write(self, result: ReportResult, target: Target) -> None:
        sheets = self.build_sheets(result)
        with pd.ExcelWriter(target, engine="openpyxl") as writer:
            for sheet_name, df in sheets.items():
                df.to_excel(writer, sheet_name=sheet_name[:31], index=False)
        logger.info("Wrote %s workbook with %s sheets", result.kind.value, len(sheets))

    def to_bytes(self, result: ReportResult) -> io.BytesIO:
        buf = io.BytesIO()
        self.write(result, buf)
        buf.seek(0)
        return buf

    def build_sheets(self, result: ReportResult) -> dict[str, pd.DataFrame]:
        if result.kind == ReportKind.TIMESHEET:
            return self._timesheet_sheets(result)
        if result.kind == ReportKind.ABSENCE:
            return self._absence_sheets(result.report)
        if result.kind == ReportKind.AUDIT:
            return self._audit_sheets(result.report, result.month, result.year)
        if result.kind == ReportKind.ALLOWANCE:
            return self._allowance_sheets(result.report)
        return self._allocation_sheets(result.report)

    # ------------------------------------------------------------------
    def _timesheet_sheets(self, result: ReportResult) -> dict[str, pd.DataFrame]:
        report: AbsenceReport = result.report
        entries = []
        for name in sorted(result.ingest.records_by_employee):
            for r in sorted(result.ingest.records_by_employee[name], key=lambda r: r.work_date):
                entries.append({
                    "Employee Name": name,
                    "Date": canonical_date_key(r.work_date),
                    "Code": r.project_code,
                    "Project": r.project_name,
                    "Status": "Worked",
                })
        summary = [
            {"Employee Name": s.employee_name, "Absent": s.total_absent_days, "Payrun Days": s.payrun_days}
            for s in report.sorted_summaries()
        ]
        return {
            "Timesheet": pd.DataFrame(entries, columns=["Employee Name", "Date", "Code", "Project", "Status"]),
            "Summary": pd.DataFrame(summary, columns=["Employee Name", "Absent", "Payrun Days"]),
        }

    def _absence_sheets(self, report: AbsenceReport) -> dict[str, pd.DataFrame]:
        payrun = [
            {
                "Employee Name": s.employee_name,
                "Total Worked Days": s.worked_days,
                "Worked Fridays": s.worked_fridays,
                "Payrun Days": s.payrun_days,
                "Absence": s.total_absent_days,
            }
            for s in report.sorted_summaries()
        ]
        absence = [
            {
                "Employee Name": s.employee_name,
                "Total Worked Days": s.worked_days,
                "Absence": s.total_absent_days,
                "Absent Dates": _join(canonical_date_key(d) for d in s.absent_dates),
            }
            for s in report.with_absence()
        ]
        detail = [
            {
                "Employee Name": s.employee_name,
                "Date": canonical_date_key(row.work_date),
                "Project Code": row.project_codes,
                "Project Name": row.project_names,
                "Status": row.status,
            }
            for s in report.sorted_summaries()
            for row in s.daily_rows
        ]
        return {
            "Payrun Summary": pd.DataFrame(
                payrun, columns=["Employee Name", "Total Worked Days", "Worked Fridays", "Payrun Days", "Absence"]
            ),
            "Absence Summary": pd.DataFrame(
                absence, columns=["Employee Name", "Total Worked Days", "Absence", "Absent Dates"]
            ),
            "Detailed Records": pd.DataFrame(
                detail, columns=["Employee Name", "Date", "Project Code", "Project Name", "Status"]
            ),
        }

    def _audit_sheets(self, report: AuditReport, month: int, year: int) -> dict[str, pd.DataFrame]:
        def record_row(vr, with_status: bool) -> dict:
            row = {
                "Project Code": vr.record.project_code,
                "Project Name": vr.record.project_name,
                "Date": vr.date_key,
                "Employee Name": vr.record.employee_name,
                "Entered By": vr.record.entered_by,
            }
            if with_status:
                row["Status"] = _STATUS_LABELS[vr.status]
            return row

        stats = report.statistics
        summary = [
            ("DATA VALIDATION SUMMARY", ""),
            (f"Month: {month_name(month)} {year}", ""),
            ("Total Records:", stats.total_records),
            ("Clean Records (No Duplicates):", stats.clean_records),
            ("  - Fully Clean:", stats.fully_clean),
            ("  - With Inconsistencies:", stats.clean_with_inconsistencies),
            ("Duplicates Removed:", stats.duplicates_found),
            ("Inconsistencies Found:", stats.inconsistencies_found),
            ("Validation Rate:", f"{stats.validation_rate:.1f}%"),
            ("Duplicate Rate:", f"{stats.duplicate_rate:.1f}%"),
            ("Inconsistency Rate:", f"{stats.inconsistency_rate:.1f}%"),
            ("TOP ISSUES", ""),
        ]
        summary += [(f'• Employee "{name}" has {count} duplicate day(s)', "") for name, count in report.top_duplicate_employees]
        summary += [(f'• Project Code "{code}" has {count} different names', "") for code, count in report.top_inconsistent_codes]

        return {
            "All Data": pd.DataFrame([record_row(vr, True) for vr in report.records],
                                     columns=["Project Code", "Project Name", "Date", "Employee Name", "Entered By", "Status"]),
            "Clean Validated Data": pd.DataFrame([record_row(vr, False) for vr in report.clean_records],
                                                 columns=["Project Code", "Project Name", "Date", "Employee Name", "Entered By"]),
            "Duplicates Report": pd.DataFrame(
                [
                    {
                        "Employee Name": d.employee_name,
                        "Date": d.date_key,
                        "Occurrences": d.occurrences,
                        "Row Numbers": _join(d.row_numbers),
                        "Projects": _join(d.project_codes),
                    }
                    for d in report.duplicates
                ],
                columns=["Employee Name", "Date", "Occurrences", "Row Numbers", "Projects"],
            ),
            "Inconsistencies Report": pd.DataFrame(
                [
                    {
                        "Project Code": i.project_code,
                        "Project Names Found": _join(i.project_names),
                        "Count": i.count,
                        "Row Numbers": _join(i.row_numbers),
                    }
                    for i in report.inconsistencies
                ],
                columns=["Project Code", "Project Names Found", "Count", "Row Numbers"],
            ),
            "Summary": pd.DataFrame(summary, columns=["Item", "Value"]),
        }

    def _allowance_sheets(self, report: AllowanceReport) -> dict[str, pd.DataFrame]:
        summary = [
            {
                "Unique Employee Name": s.employee_name,
                "Food Allowance Amount / Day": float(s.amount_per_day),
                "Food Allowance Days": s.eligible_days,
                "Total": float(s.total_amount),
            }
            for s in report.sorted_summaries()
        ]
        summary.append({"Unique Employee Name": "Grand Total", "Total": float(report.grand_total)})

        breakdown = [
            {
                "Employee Name": s.employee_name,
                "Date": canonical_date_key(day.work_date),
                "Project Code(s)": _join(day.project_codes),
                "Policy": s.policy.value,
                "Amount/Day": float(s.amount_per_day),
                "Eligible?": "Yes" if day.eligible else "No",
                "Reason/Projects": _join(day.eligible_projects) if day.eligible else day.reason,
            }
            for s in report.sorted_summaries()
            for day in s.daily_breakdown
        ]

        projects = report.by_project()
        project_rows = [
            {
                "Project Code": p.project_code,
                "Project Name": p.project_name,
                "Policy 1 Days": p.policy1_days,
                "Policy 1 Amount": float(p.policy1_amount),
                "Policy 2 Days": p.policy2_days,
                "Policy 2 Amount": float(p.policy2_amount),
                "Total Amount": float(p.total_amount),
            }
            for p in projects
        ]
        project_rows.append({
            "Project Code": "Total",
            "Project Name": "",
            "Policy 1 Days": sum(p.policy1_days for p in projects),
            "Policy 1 Amount": float(sum(p.policy1_amount for p in projects)),
            "Policy 2 Days": sum(p.policy2_days for p in projects),
            "Policy 2 Amount": float(sum(p.policy2_amount for p in projects)),
            "Total Amount": float(sum(p.total_amount for p in projects)),
        })

        policies = report.by_policy()
        policy_rows = [
            {"Policy": p.policy.value, "Total Employees": p.employees, "Total Days": p.days, "Total Amount": float(p.amount)}
            for p in policies
        ]
        policy_rows.append({
            "Policy": "Total",
            "Total Employees": sum(p.employees for p in policies),
            "Total Days": sum(p.days for p in policies),
            "Total Amount": float(sum(p.amount for p in policies)),
        })

        return {
            f"Food Allowance - {report.month:02d}{report.year}": pd.DataFrame(
                summary, columns=["Unique Employee Name", "Food Allowance Amount / Day", "Food Allowance Days", "Total"]
            ),
            "Daily Breakdown": pd.DataFrame(
                breakdown,
                columns=["Employee Name", "Date", "Project Code(s)", "Policy", "Amount/Day", "Eligible?", "Reason/Projects"],
            ),
            "Project Summary": pd.DataFrame(
                project_rows,
                columns=["Project Code", "Project Name", "Policy 1 Days", "Policy 1 Amount",
                         "Policy 2 Days", "Policy 2 Amount", "Total Amount"],
            ),
            "Policy Summary": pd.DataFrame(policy_rows, columns=["Policy", "Total Employees", "Total Days", "Total Amount"]),
        }

    def _allocation_sheets(self, report: AllocationReport) -> dict[str, pd.DataFrame]:
        def frame(mode: AllocationMode) -> pd.DataFrame:
            columns = ["Employee Name", *report.projects]
            if mode == AllocationMode.WITH_UNASSIGNED:
                columns.append(UNASSIGNED_PROJECT)
            columns.append("Total")
            if mode == AllocationMode.HIGHLIGHTED:
                columns.append("Review")

            data = []
            for row in report.rows(mode):
                values = [row.employee_name, *(_pct(p) for p in row.percentages)]
                if mode == AllocationMode.WITH_UNASSIGNED:
                    values.append(_pct(row.unassigned))
                values.append(f"{row.total:.1f}%")
                if mode == AllocationMode.HIGHLIGHTED:
                    values.append("Check" if row.needs_review else "OK")
                data.append(values)
            return pd.DataFrame(data, columns=columns)

        return {
            "Highlighted": frame(AllocationMode.HIGHLIGHTED),
            "With Unassigned": frame(AllocationMode.WITH_UNASSIGNED),
            "Raw": frame(AllocationMode.RAW),
        }
