from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import ANNUAL_LEAVE_CODE, ANNUAL_LEAVE_PHRASE
from ..ingest.model import AttendanceRecord


@dataclass(frozen=True)
class LeaveMarker:
    """Tells whether a timesheet row is annual leave.

    A row matches on its project code (case-insensitive, exact) or on a
    phrase inside its project name (case-insensitive). Either check can be
    switched off by passing None.
    """

    code: Optional[str] = ANNUAL_LEAVE_CODE
    phrase: Optional[str] = ANNUAL_LEAVE_PHRASE

    def is_annual_leave(self, record: AttendanceRecord) -> bool:
        if self.code and record.project_code.upper() == self.code.upper():
            return True
        if self.phrase and self.phrase.lower() in record.project_name.lower():
            return True
        return False
