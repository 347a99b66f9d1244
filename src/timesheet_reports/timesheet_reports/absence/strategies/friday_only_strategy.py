from __future__ import annotations

from ...core.enums import RestDayPolicy, Weekday
from ..model import MonthStats, WorkedDays
from .base import RestDayStrategy


class FridayOnlyStrategy(RestDayStrategy):
    """Regular employees: only Friday is off."""

    policy = RestDayPolicy.FRIDAY_ONLY

    def excused_rest_days(self, stats: MonthStats, worked: WorkedDays) -> int:
        return stats.fridays - worked.fridays

    def is_rest_day(self, weekday: Weekday) -> bool:
        return weekday == Weekday.FRIDAY
