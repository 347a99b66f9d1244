from src.timesheet_reports.timesheet_reports.absence.factory import RestDayStrategyFactory
from src.timesheet_reports.timesheet_reports.absence.model import MonthStats, WorkedDays
from src.timesheet_reports.timesheet_reports.absence.strategies.friday_only_strategy import FridayOnlyStrategy
from src.timesheet_reports.timesheet_reports.absence.strategies.friday_saturday_strategy import (
    FridayAndSaturdayStrategy,
)
from src.timesheet_reports.timesheet_reports.core.enums import Weekday


def test_factory_picks_strategy_by_membership():
    factory = RestDayStrategyFactory()

    assert isinstance(factory.for_employee("A", ["B"]), FridayOnlyStrategy)
    assert isinstance(factory.for_employee("B", ["B"]), FridayAndSaturdayStrategy)


def test_membership_is_exact_match():
    assert isinstance(RestDayStrategyFactory().for_employee("b", ["B"]), FridayOnlyStrategy)


def test_rest_days():
    assert FridayOnlyStrategy().is_rest_day(Weekday.FRIDAY)
    assert not FridayOnlyStrategy().is_rest_day(Weekday.SATURDAY)
    assert FridayAndSaturdayStrategy().is_rest_day(Weekday.SATURDAY)
    assert not FridayAndSaturdayStrategy().is_rest_day(Weekday.SUNDAY)


def test_working_extra_days_clamps_at_zero():
    stats = MonthStats(year=2024, month=2, days=29, fridays=4, saturdays=4)
    worked = WorkedDays(days=29, fridays=4, saturdays=4)

    assert FridayOnlyStrategy().absence(stats, worked) == 0
    assert FridayAndSaturdayStrategy().absence(stats, worked) == 0
