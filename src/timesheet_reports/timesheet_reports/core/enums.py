from __future__ import annotations

from enum import Enum, IntEnum


class Weekday(IntEnum):
    """Day of week, Sunday first (0) to Saturday (6)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class RestDayPolicy(str, Enum):
    """Weekly rest days an employee is not expected to work."""

    FRIDAY_ONLY = "FRIDAY_ONLY"
    FRIDAY_AND_SATURDAY = "FRIDAY_AND_SATURDAY"


class ValidationStatus(str, Enum):
    """Audit tag of a single attendance row."""

    CLEAN = "Clean"
    DUPLICATE = "Duplicate"
    INCONSISTENT = "Inconsistent"


class RejectReason(str, Enum):
    MISSING_EMPLOYEE = "MISSING_EMPLOYEE"
    MISSING_DATE = "MISSING_DATE"
    UNPARSEABLE_DATE = "UNPARSEABLE_DATE"
    OUT_OF_WINDOW = "OUT_OF_WINDOW"


class FoodPolicy(str, Enum):
    """The two food allowance policies an employee can be assigned to."""

    POLICY_1 = "Food Policy 1"
    POLICY_2 = "Food Policy 2"


class AllocationMode(str, Enum):
    RAW = "raw"
    HIGHLIGHTED = "highlighted"
    WITH_UNASSIGNED = "with-unassigned"


class ReportKind(str, Enum):
    """Reports the engine can produce from one upload."""

    TIMESHEET = "timesheet"
    ABSENCE = "absence"
    AUDIT = "audit"
    ALLOWANCE = "allowance"
    ALLOCATION = "allocation"
