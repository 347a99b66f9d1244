from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import RestDayPolicy


@dataclass(frozen=True)
class MonthStats:
    """Month-level constants shared by every employee in a run."""

    year: int
    month: int
    days: int
    fridays: int
    saturdays: int


@dataclass(frozen=True)
class WorkedDays:
    """Distinct worked dates of one employee and how many fell on rest days."""

    days: int
    fridays: int
    saturdays: int


@dataclass(frozen=True)
class DailyTimesheetRow:
    """One line of an employee's month: a worked day or a possible absence."""

    work_date: date
    project_codes: str
    project_names: str
    status: str


@dataclass(frozen=True)
class AbsenceSummary:
    employee_name: str
    policy: RestDayPolicy
    worked_days: int
    worked_fridays: int
    worked_saturdays: int
    total_absent_days: int
    payrun_days: int
    absent_dates: list[date] = field(default_factory=list)
    daily_rows: list[DailyTimesheetRow] = field(default_factory=list)


@dataclass(frozen=True)
class AbsenceReport:
    stats: MonthStats
    summaries: dict[str, AbsenceSummary]

    def sorted_summaries(self) -> list[AbsenceSummary]:
        return [self.summaries[name] for name in sorted(self.summaries)]

    def with_absence(self) -> list[AbsenceSummary]:
        return [s for s in self.sorted_summaries() if s.total_absent_days > 0]
