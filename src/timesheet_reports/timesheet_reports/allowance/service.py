from __future__ import annotations

import logging
from typing import Mapping, Sequence

from ..ingest.model import AttendanceRecord, IngestResult, group_by_date
from .leave import LeaveMarker
from .model import AllowanceReport, AllowanceSummary, DayEligibility, EmployeePolicy, ProjectPolicy

logger = logging.getLogger(__name__)

REASON_ANNUAL_LEAVE = "Annual Leave"
REASON_NOT_ELIGIBLE = "Project not eligible"


class FoodAllowanceEvaluator:
    """Use case: food allowance days and amount per opted-in employee.

    Employees missing from the employee policy table are left out of the
    report on purpose; they are not an error.
    """

    def __init__(self, *, leave_marker: LeaveMarker | None = None):
        self._leave = leave_marker or LeaveMarker()

    def evaluate(
        self,
        ingest: IngestResult,
        project_policies: Mapping[str, ProjectPolicy],
        employee_policies: Mapping[str, EmployeePolicy],
    ) -> AllowanceReport:
        summaries: dict[str, AllowanceSummary] = {}
        for name, records in ingest.records_by_employee.items():
            policy = employee_policies.get(name)
            if policy is None:
                continue
            summaries[name] = self.evaluate_employee(records, policy, project_policies)

        report = AllowanceReport(
            month=ingest.month,
            year=ingest.year,
            summaries=summaries,
            project_policies=dict(project_policies),
        )
        logger.info(
            "Food allowance: %s of %s employees opted in, grand total %s",
            len(summaries), len(ingest.records_by_employee), report.grand_total,
        )
        return report

    def evaluate_employee(
        self,
        records: Sequence[AttendanceRecord],
        policy: EmployeePolicy,
        project_policies: Mapping[str, ProjectPolicy],
    ) -> AllowanceSummary:
        breakdown = [self._evaluate_day(entries, policy, project_policies) for entries in group_by_date(records).values()]
        eligible_days = sum(1 for day in breakdown if day.eligible)
        return AllowanceSummary(
            employee_name=policy.employee_name,
            policy=policy.policy,
            amount_per_day=policy.amount_per_day,
            eligible_days=eligible_days,
            total_amount=policy.amount_per_day * eligible_days,
            daily_breakdown=breakdown,
        )

    def _evaluate_day(
        self,
        entries: Sequence[AttendanceRecord],
        policy: EmployeePolicy,
        project_policies: Mapping[str, ProjectPolicy],
    ) -> DayEligibility:
        work_date = entries[0].work_date
        codes = [e.project_code for e in entries]

        if any(self._leave.is_annual_leave(e) for e in entries):
            return DayEligibility(work_date, codes, eligible=False, reason=REASON_ANNUAL_LEAVE)

        # One matching project is enough for the whole day.
        matching = []
        for e in entries:
            project = project_policies.get(e.project_code)
            if project and project.is_eligible_for(policy.policy):
                matching.append(e.project_code)

        if matching:
            return DayEligibility(work_date, codes, eligible=True, eligible_projects=matching)
        return DayEligibility(work_date, codes, eligible=False, reason=REASON_NOT_ELIGIBLE)
