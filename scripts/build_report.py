"""Build one timesheet report from a workbook on disk.

Example:
    python scripts/build_report.py absence march.xlsx --month 3 --year 2024 -o absence.xlsx
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.timesheet_reports.timesheet_reports.container import build_container
from src.timesheet_reports.timesheet_reports.core.enums import ReportKind
from src.timesheet_reports.timesheet_reports.core.exceptions import DomainError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a monthly timesheet report workbook.")
    parser.add_argument("kind", choices=[k.value for k in ReportKind])
    parser.add_argument("timesheet", type=Path)
    parser.add_argument("--month", type=int, required=True)
    parser.add_argument("--year", type=int, required=True)
    parser.add_argument("-o", "--output", type=Path, help="defaults to the standard report file name")
    parser.add_argument("--fri-sat", nargs="*", default=[], metavar="NAME", help="employees resting Friday and Saturday")
    parser.add_argument("--project-policies", type=Path)
    parser.add_argument("--employee-policies", type=Path)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format="%(levelname)s [%(name)s] %(message)s")

    container = build_container(settings=settings)
    source = container.excel_source

    try:
        result = container.report_engine.run(
            args.kind,
            source.read_rows(args.timesheet),
            args.month,
            args.year,
            fri_sat_members=[*getattr(settings, "FRI_SAT_EMPLOYEES", []), *args.fri_sat],
            project_policy_rows=source.read_rows(args.project_policies) if args.project_policies else None,
            employee_policy_rows=source.read_rows(args.employee_policies) if args.employee_policies else None,
        )
    except DomainError as e:
        raise SystemExit(f"ERROR: {e}")

    if not result.ingest.records:
        raise SystemExit(f"No data found for {args.month:02d}/{args.year}")

    output = args.output or Path(container.excel_writer.filename_for(result))
    container.excel_writer.write(result, output)
    print(f"OK: {result.kind.value} report -> {output}")


if __name__ == "__main__":
    main()
