from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Iterable

from ..common.calendar_utils import canonical_date_key
from ..core.constants import TOP_ISSUES_LIMIT
from ..core.enums import ValidationStatus
from ..ingest.model import AttendanceRecord
from .model import AuditReport, AuditStatistics, DuplicateGroup, InconsistencyGroup, ValidationRecord

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize_project_name(name: str) -> str:
    return _WHITESPACE.sub(" ", name.lower().strip())


def _rate(part: int, total: int) -> float:
    return round(part / total * 100, 1) if total > 0 else 0.0


class DataQualityAuditor:
    """Use case: flag duplicate days and project codes with several names.

    Every call works on fresh ValidationRecords, so auditing the same
    records twice yields the same report.
    """

    def __init__(self, *, top_limit: int = TOP_ISSUES_LIMIT):
        self._top_limit = top_limit

    def audit(self, records: Iterable[AttendanceRecord]) -> AuditReport:
        tagged = [ValidationRecord(record=r, date_key=canonical_date_key(r.work_date)) for r in records]

        duplicates = self._check_duplicates(tagged)
        inconsistencies = self._check_inconsistencies(tagged)
        clean = self._clean_records(tagged)
        stats = self._statistics(tagged, clean)

        logger.info(
            "Audit: %s records, %s duplicates, %s inconsistent",
            stats.total_records, stats.duplicates_found, stats.inconsistencies_found,
        )
        return AuditReport(
            records=tagged,
            duplicates=duplicates,
            inconsistencies=inconsistencies,
            clean_records=clean,
            statistics=stats,
            top_duplicate_employees=self._top_duplicates(duplicates),
            top_inconsistent_codes=self._top_inconsistencies(inconsistencies),
        )

    def _check_duplicates(self, tagged: list[ValidationRecord]) -> list[DuplicateGroup]:
        groups: dict[tuple[str, str], list[ValidationRecord]] = {}
        for vr in tagged:
            group = groups.setdefault(vr.key, [])
            if group:
                vr.status = ValidationStatus.DUPLICATE
            group.append(vr)

        return [
            DuplicateGroup(
                employee_name=employee,
                date_key=date_key,
                occurrences=len(group),
                row_numbers=[vr.row_number for vr in group],
                project_codes=[vr.record.project_code for vr in group],
            )
            for (employee, date_key), group in groups.items()
            if len(group) > 1
        ]

    def _check_inconsistencies(self, tagged: list[ValidationRecord]) -> list[InconsistencyGroup]:
        by_code: dict[str, list[ValidationRecord]] = {}
        for vr in tagged:
            by_code.setdefault(vr.record.project_code, []).append(vr)

        out: list[InconsistencyGroup] = []
        for code, group in by_code.items():
            normalized = {normalize_project_name(vr.record.project_name) for vr in group}
            if len(normalized) <= 1:
                continue

            for vr in group:
                # Duplicate wins; a row carries one tag only.
                if vr.status == ValidationStatus.CLEAN:
                    vr.status = ValidationStatus.INCONSISTENT

            originals = list(dict.fromkeys(vr.record.project_name for vr in group))
            out.append(
                InconsistencyGroup(
                    project_code=code,
                    project_names=originals,
                    row_numbers=[vr.row_number for vr in group],
                )
            )
        return out

    def _clean_records(self, tagged: list[ValidationRecord]) -> list[ValidationRecord]:
        seen: set[tuple[str, str]] = set()
        clean: list[ValidationRecord] = []
        for vr in tagged:
            if vr.key in seen:
                continue
            seen.add(vr.key)
            clean.append(vr)
        return clean

    def _statistics(self, tagged: list[ValidationRecord], clean: list[ValidationRecord]) -> AuditStatistics:
        total = len(tagged)
        duplicates = sum(1 for vr in tagged if vr.status == ValidationStatus.DUPLICATE)
        inconsistent = sum(1 for vr in tagged if vr.status == ValidationStatus.INCONSISTENT)
        return AuditStatistics(
            total_records=total,
            clean_records=len(clean),
            duplicates_found=duplicates,
            inconsistencies_found=inconsistent,
            clean_with_inconsistencies=sum(1 for vr in clean if vr.status == ValidationStatus.INCONSISTENT),
            validation_rate=_rate(len(clean), total),
            duplicate_rate=_rate(duplicates, total),
            inconsistency_rate=_rate(inconsistent, total),
        )

    def _top_duplicates(self, duplicates: list[DuplicateGroup]) -> list[tuple[str, int]]:
        extra_days: Counter[str] = Counter()
        for dup in duplicates:
            extra_days[dup.employee_name] += dup.occurrences - 1
        return extra_days.most_common(self._top_limit)

    def _top_inconsistencies(self, inconsistencies: list[InconsistencyGroup]) -> list[tuple[str, int]]:
        ranked = sorted(inconsistencies, key=lambda inc: inc.count, reverse=True)
        return [(inc.project_code, inc.count) for inc in ranked[: self._top_limit]]
