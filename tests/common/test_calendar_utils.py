from datetime import date

import pytest

from src.timesheet_reports.timesheet_reports.common.calendar_utils import (
    canonical_date_key,
    count_weekday,
    days_in_month,
    iter_month_days,
    month_name,
    weekday_of,
)
from src.timesheet_reports.timesheet_reports.core.enums import Weekday
from src.timesheet_reports.timesheet_reports.core.exceptions import ValidationError


def test_days_in_month_handles_leap_years():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(1900, 2) == 28
    assert days_in_month(2000, 2) == 29
    assert days_in_month(2024, 3) == 31
    assert days_in_month(2024, 4) == 30


def test_days_in_month_rejects_bad_month():
    with pytest.raises(ValidationError):
        days_in_month(2024, 13)
    with pytest.raises(ValidationError):
        days_in_month(2024, 0)


def test_weekday_of_is_sunday_first():
    assert weekday_of(2024, 3, 1) == Weekday.FRIDAY
    assert weekday_of(2024, 3, 2) == Weekday.SATURDAY
    assert weekday_of(2024, 3, 3) == Weekday.SUNDAY
    assert int(Weekday.SUNDAY) == 0
    assert int(Weekday.SATURDAY) == 6


def test_march_2024_has_five_fridays_and_five_saturdays():
    assert count_weekday(2024, 3, Weekday.FRIDAY) == 5
    assert count_weekday(2024, 3, Weekday.SATURDAY) == 5
    assert count_weekday(2024, 2, Weekday.FRIDAY) == 4


@pytest.mark.parametrize("year", [2023, 2024, 2025])
@pytest.mark.parametrize("month", range(1, 13))
def test_weekday_counts_cover_the_whole_month(year, month):
    assert sum(count_weekday(year, month, wd) for wd in Weekday) == days_in_month(year, month)


def test_canonical_date_key_is_zero_padded():
    assert canonical_date_key(date(2024, 3, 8)) == "2024-03-08"
    assert canonical_date_key(date(987, 1, 2)) == "0987-01-02"


def test_iter_month_days_and_month_name():
    days = list(iter_month_days(2024, 2))
    assert days[0] == date(2024, 2, 1)
    assert days[-1] == date(2024, 2, 29)
    assert month_name(3) == "March"
