from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import ALLOCATION_REVIEW_TOLERANCE
from ..core.enums import AllocationMode


@dataclass(frozen=True)
class ProjectShare:
    days: int
    percentage: float


@dataclass(frozen=True)
class AllocationSummary:
    """Share of one employee's worked days per project (every project listed)."""

    employee_name: str
    total_days: int
    shares: dict[str, ProjectShare]

    @property
    def total_percentage(self) -> float:
        return sum(s.percentage for s in self.shares.values())


@dataclass(frozen=True)
class AllocationRow:
    """An AllocationSummary laid out for one presentation mode."""

    employee_name: str
    percentages: list[float]
    total: float
    unassigned: Optional[float] = None
    needs_review: bool = False


@dataclass(frozen=True)
class AllocationStatistics:
    total_employees: int
    total_projects: int
    project_list: list[str]


@dataclass(frozen=True)
class AllocationReport:
    projects: list[str]
    summaries: dict[str, AllocationSummary]

    def sorted_summaries(self) -> list[AllocationSummary]:
        return [self.summaries[name] for name in sorted(self.summaries)]

    def rows(self, mode: AllocationMode) -> list[AllocationRow]:
        mode = AllocationMode(mode)
        return [self._row(s, mode) for s in self.sorted_summaries()]

    def _row(self, summary: AllocationSummary, mode: AllocationMode) -> AllocationRow:
        percentages = [summary.shares[p].percentage for p in self.projects]
        total = sum(percentages)

        if mode == AllocationMode.WITH_UNASSIGNED:
            # Unassigned tops the row up; the total is 100 by construction.
            return AllocationRow(
                employee_name=summary.employee_name,
                percentages=percentages,
                unassigned=max(0.0, 100.0 - total),
                total=100.0,
            )

        needs_review = False
        if mode == AllocationMode.HIGHLIGHTED:
            needs_review = abs(round(total, 1) - 100.0) > ALLOCATION_REVIEW_TOLERANCE
        return AllocationRow(
            employee_name=summary.employee_name,
            percentages=percentages,
            total=total,
            needs_review=needs_review,
        )

    def statistics(self) -> AllocationStatistics:
        return AllocationStatistics(
            total_employees=len(self.summaries),
            total_projects=len(self.projects),
            project_list=list(self.projects),
        )
