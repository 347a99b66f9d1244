import io
from datetime import datetime

import pandas as pd
import pytest

from src.timesheet_reports.timesheet_reports.core.exceptions import StructuralError
from src.timesheet_reports.timesheet_reports.ingest.excel_source import ExcelRowSource


def test_reads_header_and_rows_with_blank_cells_as_none(tmp_path):
    path = tmp_path / "march.xlsx"
    pd.DataFrame(
        [("P1", "Tower", datetime(2024, 3, 1), "A", None)],
        columns=["Project Code", "Project Name", "Date", "Employee Name", "Entered By"],
    ).to_excel(path, index=False, engine="openpyxl")

    rows = ExcelRowSource().read_rows(path)

    assert rows[0] == ("Project Code", "Project Name", "Date", "Employee Name", "Entered By")
    assert rows[1][0] == "P1"
    assert rows[1][2].date() == datetime(2024, 3, 1).date()
    assert rows[1][4] is None


def test_garbage_is_structural_error():
    with pytest.raises(StructuralError):
        ExcelRowSource().read_rows(io.BytesIO(b"definitely not xlsx"))
