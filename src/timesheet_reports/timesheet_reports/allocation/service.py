from __future__ import annotations

import logging
from typing import Mapping, Sequence

from ..common.calendar_utils import canonical_date_key
from ..core.constants import MISSING_VALUE
from ..ingest.model import AttendanceRecord
from .model import AllocationReport, AllocationSummary, ProjectShare

logger = logging.getLogger(__name__)


class ProjectAllocationAggregator:
    """Use case: percentage of each employee's worked days per project.

    A project is identified by its trimmed name. A day counts once per
    project listed that day, so re-entering the same project on the same
    day does not inflate it.
    """

    def aggregate(self, records_by_employee: Mapping[str, Sequence[AttendanceRecord]]) -> AllocationReport:
        worked: dict[str, set[str]] = {}
        project_days: dict[str, dict[str, set[str]]] = {}
        all_projects: set[str] = set()

        for name, records in records_by_employee.items():
            for r in records:
                project = r.project_name.strip()
                if not project or project == MISSING_VALUE:
                    continue
                key = canonical_date_key(r.work_date)
                worked.setdefault(name, set()).add(key)
                project_days.setdefault(name, {}).setdefault(project, set()).add(key)
                all_projects.add(project)

        projects = sorted(all_projects)
        summaries: dict[str, AllocationSummary] = {}
        for name, days in worked.items():
            total = len(days)
            shares = {}
            for project in projects:
                count = len(project_days[name].get(project, ()))
                shares[project] = ProjectShare(days=count, percentage=(count / total * 100) if total else 0.0)
            summaries[name] = AllocationSummary(employee_name=name, total_days=total, shares=shares)

        logger.info("Allocation: %s employees across %s projects", len(summaries), len(projects))
        return AllocationReport(projects=projects, summaries=summaries)
