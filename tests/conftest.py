from __future__ import annotations

from datetime import date

import pytest

from src.timesheet_reports.timesheet_reports.ingest.service import AttendanceIngestService

HEADER = ("Project Code", "Project Name", "Date", "Employee Name", "Entered By")


def sheet(*rows):
    """Timesheet rows with the header row in front."""
    return [HEADER, *rows]


@pytest.fixture
def march_2024_rows():
    return sheet(
        ("P1", "Website Redesign", date(2024, 3, 1), "A", "hr"),
        ("P2", "Site Relaunch", date(2024, 3, 1), "A", "hr"),
        ("P1", "Website Redesign", date(2024, 3, 8), "A", "hr"),
        ("P1", "Website Redesign", date(2024, 3, 4), "B", "hr"),
        ("P1", "Website Redesign", date(2024, 4, 1), "B", "hr"),
    )


@pytest.fixture
def ingest():
    svc = AttendanceIngestService()

    def _ingest(rows, month=3, year=2024):
        return svc.ingest(rows, month, year)

    return _ingest


@pytest.fixture
def make_sheet():
    return sheet
