# marksportal/routes/report_routes.py

from flask import Blueprint, jsonify, request, send_file

from marksportal.errors import MarksPortalError
from marksportal.store import get_store
from marksportal.utils.exports import PDF_MIMETYPE, XLSX_MIMETYPE, report_to_pdf, report_to_xlsx
from marksportal.utils.params import require_query_params
from marksportal.utils.reports import SECTION_ALL, build_performance_report

report = Blueprint("report", __name__)

REPORT_FILTERS = ("assessment_type", "academic_year", "department", "section", "subject_code")


# =====================================================
# HELPER: RUN THE PERFORMANCE QUERY
# =====================================================
def _performance_report():
    assessment_type, academic_year, department, section, subject_code = require_query_params(*REPORT_FILTERS)
    filters = {
        "assessment_type": assessment_type,
        "academic_year": academic_year,
        "department": department,
        "section": section,
        "subject_code": subject_code,
    }

    rows = get_store().category_stats(
        assessment_type,
        academic_year,
        department,
        None if section == SECTION_ALL else section,
        subject_code,
    )
    return build_performance_report(rows), filters


# =====================================================
# PERFORMANCE REPORT (JSON)
# =====================================================
@report.get("/performance")
def performance():
    data, _ = _performance_report()
    return jsonify(data), 200


# =====================================================
# PERFORMANCE REPORT -> EXCEL / PDF
# =====================================================
@report.get("/performance/export")
def export_performance():
    fmt = request.args.get("format", "xlsx").strip().lower()
    if fmt not in ("xlsx", "pdf"):
        raise MarksPortalError("format must be xlsx or pdf")

    data, filters = _performance_report()
    name = "_".join([
        filters["department"], filters["section"], filters["subject_code"],
        filters["assessment_type"], filters["academic_year"],
    ])

    if fmt == "pdf":
        return send_file(
            report_to_pdf(data, filters),
            mimetype=PDF_MIMETYPE,
            as_attachment=True,
            download_name=f"{name}_performance.pdf",
        )

    return send_file(
        report_to_xlsx(data),
        mimetype=XLSX_MIMETYPE,
        as_attachment=True,
        download_name=f"{name}_performance.xlsx",
    )
