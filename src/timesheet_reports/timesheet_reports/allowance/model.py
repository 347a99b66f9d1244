from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import FoodPolicy


@dataclass(frozen=True)
class ProjectPolicy:
    project_code: str
    project_name: str
    location: str
    policy1_eligible: bool
    policy2_eligible: bool

    def is_eligible_for(self, policy: FoodPolicy) -> bool:
        if policy == FoodPolicy.POLICY_1:
            return self.policy1_eligible
        return self.policy2_eligible


@dataclass(frozen=True)
class EmployeePolicy:
    employee_name: str
    policy: FoodPolicy
    amount_per_day: Decimal


@dataclass(frozen=True)
class DayEligibility:
    work_date: date
    project_codes: list[str]
    eligible: bool
    eligible_projects: list[str] = field(default_factory=list)
    reason: Optional[str] = None


@dataclass(frozen=True)
class AllowanceSummary:
    employee_name: str
    policy: FoodPolicy
    amount_per_day: Decimal
    eligible_days: int
    total_amount: Decimal
    daily_breakdown: list[DayEligibility]


@dataclass
class ProjectAllowanceTotals:
    project_code: str
    project_name: str = ""
    policy1_days: int = 0
    policy2_days: int = 0
    policy1_amount: Decimal = Decimal("0")
    policy2_amount: Decimal = Decimal("0")

    @property
    def total_amount(self) -> Decimal:
        return self.policy1_amount + self.policy2_amount


@dataclass
class PolicyAllowanceTotals:
    policy: FoodPolicy
    employees: int = 0
    days: int = 0
    amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class AllowanceReport:
    month: int
    year: int
    summaries: dict[str, AllowanceSummary]
    project_policies: dict[str, ProjectPolicy] = field(default_factory=dict)

    def sorted_summaries(self) -> list[AllowanceSummary]:
        return [self.summaries[name] for name in sorted(self.summaries)]

    @property
    def grand_total(self) -> Decimal:
        return sum((s.total_amount for s in self.summaries.values()), Decimal("0"))

    def by_project(self) -> list[ProjectAllowanceTotals]:
        """Allowance spread over every project of each eligible day."""
        totals: dict[str, ProjectAllowanceTotals] = {}
        for summary in self.summaries.values():
            for day in summary.daily_breakdown:
                if not day.eligible:
                    continue
                for code in day.project_codes:
                    t = totals.get(code)
                    if t is None:
                        pp = self.project_policies.get(code)
                        t = totals[code] = ProjectAllowanceTotals(code, pp.project_name if pp else "")
                    if summary.policy == FoodPolicy.POLICY_1:
                        t.policy1_days += 1
                        t.policy1_amount += summary.amount_per_day
                    else:
                        t.policy2_days += 1
                        t.policy2_amount += summary.amount_per_day
        return [totals[code] for code in sorted(totals)]

    def by_policy(self) -> list[PolicyAllowanceTotals]:
        totals = {p: PolicyAllowanceTotals(p) for p in FoodPolicy}
        for summary in self.summaries.values():
            t = totals[summary.policy]
            t.employees += 1
            t.days += summary.eligible_days
            t.amount += summary.total_amount
        return list(totals.values())
