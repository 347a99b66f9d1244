from __future__ import annotations

import io
import json
import logging

from flask import Flask, current_app, jsonify, request, send_file
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..common.validators import require_month, require_year
from ..core.enums import ReportKind
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from .excel_writer import XLSX_MIMETYPE
from .service import parse_report_kind

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".xlsx", ".xls")


def _read_upload(container: Container, field: str, *, required: bool = True):
    upload: FileStorage | None = request.files.get(field)
    if upload is None or not upload.filename:
        if required:
            raise ValidationError("No file uploaded")
        return None

    filename = secure_filename(upload.filename)
    if not filename.lower().endswith(ALLOWED_EXTENSIONS):
        raise ValidationError("Only Excel files are allowed!")

    # Read into memory: nothing is staged on disk between requests.
    return container.excel_source.read_rows(io.BytesIO(upload.read()))


def _month_year():
    return require_month(request.form.get("month")), require_year(request.form.get("year"))


def _fri_sat_members() -> list[str]:
    members = list(current_app.config.get("FRI_SAT_EMPLOYEES", []))
    raw = request.form.get("fri_sat_employees") or request.form.get("satFriEmployees")
    if raw:
        try:
            extra = json.loads(raw)
        except json.JSONDecodeError:
            raise ValidationError("fri_sat_employees must be a JSON list of names") from None
        if not isinstance(extra, list):
            raise ValidationError("fri_sat_employees must be a JSON list of names")
        members.extend(str(name) for name in extra)
    return members


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"error": str(e)}), 400

    @app.route("/api/reports", methods=["GET"], endpoint="report_kinds")
    def report_kinds():
        return jsonify({"reports": [k.value for k in ReportKind]})

    @app.route("/api/employees", methods=["POST"], endpoint="list_employees")
    def list_employees():
        rows = _read_upload(container, "file")
        month, year = _month_year()
        return jsonify({"employees": container.report_engine.list_employees(rows, month, year)})

    @app.route("/api/reports/<kind>", methods=["POST"], endpoint="generate_report")
    def generate_report(kind: str):
        report_kind = parse_report_kind(kind)
        rows = _read_upload(container, "file")
        month, year = _month_year()

        project_rows = employee_rows = None
        if report_kind == ReportKind.ALLOWANCE:
            project_rows = _read_upload(container, "project_policies")
            employee_rows = _read_upload(container, "employee_policies")

        try:
            result = container.report_engine.run(
                report_kind,
                rows,
                month,
                year,
                fri_sat_members=_fri_sat_members(),
                project_policy_rows=project_rows,
                employee_policy_rows=employee_rows,
            )
        except DomainError:
            raise
        except Exception:
            logger.exception("Report generation failed (%s %02d/%s)", report_kind.value, month, year)
            return jsonify({"error": "Internal error while generating the report"}), 500

        if not result.ingest.records:
            return jsonify({"error": "No data found for the selected month/year"}), 400

        buf = container.excel_writer.to_bytes(result)
        return send_file(
            buf,
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=container.excel_writer.filename_for(result),
        )
