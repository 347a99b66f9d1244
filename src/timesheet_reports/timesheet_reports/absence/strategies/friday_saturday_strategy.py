from __future__ import annotations

from ...core.enums import RestDayPolicy, Weekday
from ..model import MonthStats, WorkedDays
from .base import RestDayStrategy


class FridayAndSaturdayStrategy(RestDayStrategy):
    """Friday and Saturday are both off."""

    policy = RestDayPolicy.FRIDAY_AND_SATURDAY

    def excused_rest_days(self, stats: MonthStats, worked: WorkedDays) -> int:
        return stats.fridays + stats.saturdays - worked.fridays - worked.saturdays

    def is_rest_day(self, weekday: Weekday) -> bool:
        return weekday in (Weekday.FRIDAY, Weekday.SATURDAY)
