from datetime import datetime

import pandas as pd
import pytest

from scripts.build_report import main


@pytest.fixture
def timesheet_path(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    path = tmp_path / "march.xlsx"
    pd.DataFrame(
        [
            ("P1", "Tower", datetime(2024, 3, 1), "A", "hr"),
            ("P1", "Tower", datetime(2024, 3, 4), "B", "hr"),
        ],
        columns=["Project Code", "Project Name", "Date", "Employee Name", "Entered By"],
    ).to_excel(path, index=False, engine="openpyxl")
    return path


def test_writes_report_to_output_path(timesheet_path, tmp_path):
    out = tmp_path / "allocation.xlsx"

    main(["allocation", str(timesheet_path), "--month", "3", "--year", "2024", "-o", str(out)])

    raw = pd.read_excel(out, sheet_name="Raw", engine="openpyxl")
    assert list(raw["Employee Name"]) == ["A", "B"]


def test_allowance_without_policies_exits(timesheet_path):
    with pytest.raises(SystemExit, match="policy tables"):
        main(["allowance", str(timesheet_path), "--month", "3", "--year", "2024"])


def test_empty_month_exits(timesheet_path, tmp_path):
    with pytest.raises(SystemExit, match="No data found"):
        main(["audit", str(timesheet_path), "--month", "5", "--year", "2024", "-o", str(tmp_path / "x.xlsx")])
