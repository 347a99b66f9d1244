from __future__ import annotations

import calendar
from datetime import date
from typing import Iterator

from ..core.enums import Weekday
from .validators import require_month, require_year


def days_in_month(year: int, month: int) -> int:
    require_month(month)
    return calendar.monthrange(require_year(year), month)[1]


def weekday_of(year: int, month: int, day: int) -> Weekday:
    """Weekday of a calendar date, Sunday first."""
    return weekday_of_date(date(year, month, day))


def weekday_of_date(value: date) -> Weekday:
    # date.weekday() is Monday=0; shift to Sunday=0.
    return Weekday((value.weekday() + 1) % 7)


def count_weekday(year: int, month: int, weekday: Weekday) -> int:
    return sum(1 for d in iter_month_days(year, month) if weekday_of_date(d) == weekday)


def iter_month_days(year: int, month: int) -> Iterator[date]:
    for day in range(1, days_in_month(year, month) + 1):
        yield date(year, month, day)


def canonical_date_key(value: date) -> str:
    """Format as YYYY-MM-DD from the date's own fields.

    Note: never goes through isoformat()/strftime on aware values, so the key
    cannot shift by a day.
    """
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def month_name(month: int) -> str:
    return calendar.month_name[require_month(month)]
