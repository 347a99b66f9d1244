from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from ..common.validators import require_month, require_year
from ..core.exceptions import StructuralError
from .model import Accepted, AttendanceRecord, IngestResult, Rejected
from .parser import classify_row

logger = logging.getLogger(__name__)


class AttendanceIngestService:
    """Use case: turn raw sheet rows into the month's attendance records.

    Row 1 is always the header. Bad rows are skipped and kept in
    `IngestResult.rejected`; only an empty source is an error.
    """

    def ingest(self, rows: Iterable[Sequence[Any]], month: int, year: int) -> IngestResult:
        month = require_month(month)
        year = require_year(year)

        records: list[AttendanceRecord] = []
        by_employee: dict[str, list[AttendanceRecord]] = {}
        rejected: list[Rejected] = []

        seen_header = False
        for row_number, row in enumerate(rows, start=1):
            if row_number == 1:
                seen_header = True
                continue

            outcome = classify_row(row, row_number=row_number, month=month, year=year)
            if isinstance(outcome, Accepted):
                rec = outcome.record
                records.append(rec)
                by_employee.setdefault(rec.employee_name, []).append(rec)
            else:
                logger.debug("Skipping row %s: %s", outcome.row_number, outcome.reason.value)
                rejected.append(outcome)

        if not seen_header:
            raise StructuralError("Timesheet is empty: expected a header row")

        logger.info(
            "Ingested %s records for %s employees (%02d/%s), skipped %s rows",
            len(records), len(by_employee), month, year, len(rejected),
        )
        return IngestResult(
            month=month,
            year=year,
            records=records,
            records_by_employee=by_employee,
            rejected=rejected,
        )
