from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Any, Optional, Sequence

import pandas as pd

from ..core.constants import EXCEL_EPOCH_OFFSET, MISSING_VALUE, SECONDS_PER_DAY
from ..core.enums import RejectReason
from ..common.validators import clean_text
from .model import Accepted, AttendanceRecord, Rejected, RowOutcome

_UNIX_EPOCH = datetime(1970, 1, 1)
_DATE_DELIMITER = re.compile(r"[-/]")

# Positional layout of a timesheet row.
COL_PROJECT_CODE = 0
COL_PROJECT_NAME = 1
COL_DATE = 2
COL_EMPLOYEE = 3
COL_ENTERED_BY = 4


def parse_date_value(value: Any) -> Optional[date]:
    """Turn a raw date cell into a calendar date, or None if it cannot be read.

    Accepted shapes, in order:
    - native date/datetime (incl. pandas.Timestamp): date part as-is
    - number: Excel 1900 serial
    - three numeric parts split on "-" or "/": literal year, month, day
    - anything else: best-effort pandas parse
    """
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _from_excel_serial(value)
    if isinstance(value, str):
        return _from_text(value.strip())
    return None


def _from_excel_serial(serial: float) -> Optional[date]:
    if serial != serial:  # NaN
        return None
    try:
        return (_UNIX_EPOCH + timedelta(seconds=(serial - EXCEL_EPOCH_OFFSET) * SECONDS_PER_DAY)).date()
    except (OverflowError, ValueError):
        return None


def _from_text(text: str) -> Optional[date]:
    if not text:
        return None

    # Three numeric parts are always year, month, day; never guessed.
    parts = _DATE_DELIMITER.split(text)
    if len(parts) == 3 and all(p.isascii() and p.isdigit() for p in parts):
        year, month, day = (int(p) for p in parts)
        try:
            return date(year, month, day)
        except ValueError:
            return None

    try:
        parsed = pd.to_datetime(text, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if parsed is pd.NaT or pd.isna(parsed):
        return None
    return parsed.date()


def _cell(row: Sequence[Any], index: int) -> Any:
    return row[index] if index < len(row) else None


def classify_row(row: Sequence[Any], *, row_number: int, month: int, year: int) -> RowOutcome:
    """Accept or reject one timesheet row for the month/year window."""
    employee_name = clean_text(_cell(row, COL_EMPLOYEE))
    if not employee_name:
        return Rejected(row_number=row_number, reason=RejectReason.MISSING_EMPLOYEE)

    raw_date = _cell(row, COL_DATE)
    if raw_date is None or (isinstance(raw_date, str) and not raw_date.strip()):
        return Rejected(row_number=row_number, reason=RejectReason.MISSING_DATE)

    work_date = parse_date_value(raw_date)
    if work_date is None:
        return Rejected(row_number=row_number, reason=RejectReason.UNPARSEABLE_DATE)
    if work_date.month != month or work_date.year != year:
        return Rejected(row_number=row_number, reason=RejectReason.OUT_OF_WINDOW)

    return Accepted(
        AttendanceRecord(
            employee_name=employee_name,
            work_date=work_date,
            project_code=clean_text(_cell(row, COL_PROJECT_CODE)) or MISSING_VALUE,
            project_name=clean_text(_cell(row, COL_PROJECT_NAME)) or MISSING_VALUE,
            entered_by=clean_text(_cell(row, COL_ENTERED_BY)) or MISSING_VALUE,
            row_number=row_number,
        )
    )
