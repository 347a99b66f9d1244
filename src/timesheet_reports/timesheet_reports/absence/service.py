from __future__ import annotations

import logging
from typing import Collection, Mapping, Sequence

from ..common.calendar_utils import (
    canonical_date_key,
    count_weekday,
    days_in_month,
    iter_month_days,
    weekday_of_date,
)
from ..common.validators import require_month, require_year
from ..core.constants import PAYRUN_BASELINE_DAYS
from ..core.enums import RestDayPolicy, Weekday
from ..ingest.model import AttendanceRecord, group_by_date
from .factory import RestDayStrategyFactory
from .model import AbsenceReport, AbsenceSummary, DailyTimesheetRow, MonthStats, WorkedDays
from .strategies.base import RestDayStrategy

logger = logging.getLogger(__name__)

STATUS_WORKED = "Actual Records"
STATUS_POSSIBLE_ABSENT = "Auto Filled Possible Absent"


def month_stats(year: int, month: int) -> MonthStats:
    return MonthStats(
        year=year,
        month=month,
        days=days_in_month(year, month),
        fridays=count_weekday(year, month, Weekday.FRIDAY),
        saturdays=count_weekday(year, month, Weekday.SATURDAY),
    )


def compute_absence(policy: RestDayPolicy, stats: MonthStats, worked: WorkedDays) -> int:
    """Absence under a rest-day policy, never below zero."""
    return RestDayStrategyFactory().for_policy(policy).absence(stats, worked)


def _join_non_empty(values) -> str:
    return ", ".join(v for v in values if v)


class AbsenceReconciler:
    """Use case: worked days, absence and payrun days per employee."""

    def __init__(self, *, strategy_factory: RestDayStrategyFactory | None = None):
        self._factory = strategy_factory or RestDayStrategyFactory()

    def reconcile(
        self,
        records_by_employee: Mapping[str, Sequence[AttendanceRecord]],
        month: int,
        year: int,
        fri_sat_members: Collection[str] = (),
    ) -> AbsenceReport:
        stats = month_stats(require_year(year), require_month(month))
        members = frozenset(fri_sat_members)

        summaries: dict[str, AbsenceSummary] = {}
        for name, records in records_by_employee.items():
            strategy = self._factory.for_employee(name, members)
            summaries[name] = self._summarize(name, records, stats, strategy)

        logger.info(
            "Reconciled %s employees for %02d/%s (%s Fri+Sat)",
            len(summaries), stats.month, stats.year, sum(1 for n in summaries if n in members),
        )
        return AbsenceReport(stats=stats, summaries=summaries)

    def _summarize(
        self,
        name: str,
        records: Sequence[AttendanceRecord],
        stats: MonthStats,
        strategy: RestDayStrategy,
    ) -> AbsenceSummary:
        by_date = group_by_date(records)

        fridays = saturdays = 0
        for entries in by_date.values():
            weekday = weekday_of_date(entries[0].work_date)
            if weekday == Weekday.FRIDAY:
                fridays += 1
            elif weekday == Weekday.SATURDAY:
                saturdays += 1

        worked = WorkedDays(days=len(by_date), fridays=fridays, saturdays=saturdays)
        absence = strategy.absence(stats, worked)

        absent_dates = []
        daily_rows = []
        for day in iter_month_days(stats.year, stats.month):
            entries = by_date.get(canonical_date_key(day))
            if entries:
                daily_rows.append(
                    DailyTimesheetRow(
                        work_date=day,
                        project_codes=_join_non_empty(e.project_code for e in entries),
                        project_names=_join_non_empty(e.project_name for e in entries),
                        status=STATUS_WORKED,
                    )
                )
                continue
            if strategy.is_rest_day(weekday_of_date(day)):
                continue
            absent_dates.append(day)
            daily_rows.append(DailyTimesheetRow(day, "", "", STATUS_POSSIBLE_ABSENT))

        return AbsenceSummary(
            employee_name=name,
            policy=strategy.policy,
            worked_days=worked.days,
            worked_fridays=worked.fridays,
            worked_saturdays=worked.saturdays,
            total_absent_days=absence,
            payrun_days=PAYRUN_BASELINE_DAYS - absence,
            absent_dates=absent_dates,
            daily_rows=daily_rows,
        )
