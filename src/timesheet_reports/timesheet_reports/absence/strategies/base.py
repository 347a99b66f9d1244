from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import RestDayPolicy, Weekday
from ..model import MonthStats, WorkedDays


class RestDayStrategy(ABC):
    """Strategy Pattern: how rest days are excused from absence."""

    policy: RestDayPolicy

    @abstractmethod
    def excused_rest_days(self, stats: MonthStats, worked: WorkedDays) -> int:
        """Rest days in the month that the employee did not work."""
        raise NotImplementedError

    @abstractmethod
    def is_rest_day(self, weekday: Weekday) -> bool:
        raise NotImplementedError

    def absence(self, stats: MonthStats, worked: WorkedDays) -> int:
        return max(0, stats.days - worked.days - self.excused_rest_days(stats, worked))
