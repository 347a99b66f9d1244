from __future__ import annotations

from dataclasses import dataclass
from typing import Collection

from ..core.enums import RestDayPolicy
from .strategies.base import RestDayStrategy
from .strategies.friday_only_strategy import FridayOnlyStrategy
from .strategies.friday_saturday_strategy import FridayAndSaturdayStrategy


@dataclass
class RestDayStrategyFactory:
    """Factory Pattern: choose the rest-day rule for an employee."""

    def for_policy(self, policy: RestDayPolicy) -> RestDayStrategy:
        if policy == RestDayPolicy.FRIDAY_AND_SATURDAY:
            return FridayAndSaturdayStrategy()
        return FridayOnlyStrategy()

    def for_employee(self, employee_name: str, fri_sat_members: Collection[str]) -> RestDayStrategy:
        if employee_name in fri_sat_members:
            return FridayAndSaturdayStrategy()
        return FridayOnlyStrategy()
