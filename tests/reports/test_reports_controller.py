import io
import json
from datetime import datetime

import pandas as pd
import pytest

from src.timesheet_reports.timesheet_reports.main import create_app

COLUMNS = ["Project Code", "Project Name", "Date", "Employee Name", "Entered By"]


def workbook(rows, columns=COLUMNS) -> io.BytesIO:
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        pd.DataFrame(rows, columns=columns).to_excel(writer, index=False)
    buf.seek(0)
    return buf


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()


@pytest.fixture
def timesheet():
    return [
        ("P1", "Website Redesign", datetime(2024, 3, 1), "A", "hr"),
        ("P2", "Site Relaunch", datetime(2024, 3, 1), "A", "hr"),
        ("P1", "Website Redesign", datetime(2024, 3, 8), "A", "hr"),
        ("P1", "Website Redesign", datetime(2024, 3, 4), "B", "hr"),
        ("P1", "Website Redesign", datetime(2024, 4, 1), "B", "hr"),
    ]


def test_report_kinds(client):
    resp = client.get("/api/reports")

    assert resp.status_code == 200
    assert resp.get_json()["reports"] == ["timesheet", "absence", "audit", "allowance", "allocation"]


def test_list_employees(client, timesheet):
    resp = client.post(
        "/api/employees",
        data={"file": (workbook(timesheet), "march.xlsx"), "month": "3", "year": "2024"},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    assert resp.get_json() == {"employees": ["A", "B"]}


def test_absence_report_download(client, timesheet):
    resp = client.post(
        "/api/reports/absence",
        data={
            "file": (workbook(timesheet), "march.xlsx"),
            "month": "3",
            "year": "2024",
            "fri_sat_employees": json.dumps(["B"]),
        },
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    assert "Absence_Report_03_2024.xlsx" in resp.headers["Content-Disposition"]
    payrun = pd.read_excel(io.BytesIO(resp.data), sheet_name="Payrun Summary", engine="openpyxl")
    assert payrun.set_index("Employee Name").loc["A", "Payrun Days"] == 4


def test_allowance_report_reads_policy_uploads(client, timesheet):
    projects = workbook(
        [("P1", "Website Redesign", "HQ", "Yes", "No")],
        columns=["Project Code", "Project Name", "Location", "Food Policy 1", "Food Policy 2"],
    )
    employees = workbook([("A", 200, "Food Policy 1")], columns=["Employee Name", "Amount", "Food Policy"])

    resp = client.post(
        "/api/reports/allowance",
        data={
            "file": (workbook(timesheet), "march.xlsx"),
            "project_policies": (projects, "projects.xlsx"),
            "employee_policies": (employees, "employees.xlsx"),
            "month": "3",
            "year": "2024",
        },
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    summary = pd.read_excel(io.BytesIO(resp.data), sheet_name="Food Allowance - 032024", engine="openpyxl")
    assert summary.iloc[-1]["Total"] == 400


def test_allowance_without_policy_files(client, timesheet):
    resp = client.post(
        "/api/reports/allowance",
        data={"file": (workbook(timesheet), "march.xlsx"), "month": "3", "year": "2024"},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No file uploaded"


def test_missing_file(client):
    resp = client.post("/api/reports/audit", data={"month": "3", "year": "2024"}, content_type="multipart/form-data")

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No file uploaded"


def test_non_excel_upload_is_refused(client):
    resp = client.post(
        "/api/reports/audit",
        data={"file": (io.BytesIO(b"a,b,c"), "data.csv"), "month": "3", "year": "2024"},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Only Excel files are allowed!"


def test_unknown_report_kind(client, timesheet):
    resp = client.post(
        "/api/reports/payroll",
        data={"file": (workbook(timesheet), "march.xlsx"), "month": "3", "year": "2024"},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 400


def test_bad_month(client, timesheet):
    resp = client.post(
        "/api/reports/absence",
        data={"file": (workbook(timesheet), "march.xlsx"), "month": "13", "year": "2024"},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 400


def test_no_records_for_month(client, timesheet):
    resp = client.post(
        "/api/reports/audit",
        data={"file": (workbook(timesheet), "march.xlsx"), "month": "6", "year": "2024"},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "No data found for the selected month/year"


def test_unreadable_workbook(client):
    resp = client.post(
        "/api/reports/audit",
        data={"file": (io.BytesIO(b"not a workbook"), "broken.xlsx"), "month": "3", "year": "2024"},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 400
