# marksportal/utils/exports.py
from io import BytesIO

import pandas as pd
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

EXPORT_COLUMNS = ["Category", "Total", "Pass", "Fail", "Pass %"]

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PDF_MIMETYPE = "application/pdf"


def _row_percentage(passed, total):
    return round(passed / total * 100, 2) if total else 0


def report_dataframe(report):
    rows = [
        [
            r["category"],
            r["total"],
            r["pass"],
            r["fail"],
            _row_percentage(r["pass"], r["total"]),
        ]
        for r in report["categoryStats"]
    ]
    totals = report["totals"]
    rows.append([
        "TOTAL",
        totals["total"],
        totals["pass"],
        totals["fail"],
        float(report["passPercentage"]),
    ])
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def report_to_xlsx(report, sheet_name="Performance"):
    out = BytesIO()
    df = report_dataframe(report)
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
    out.seek(0)
    return out


def report_to_pdf(report, filters):
    out = BytesIO()
    c = canvas.Canvas(out, pagesize=A4)
    _, height = A4

    c.setFont("Helvetica-Bold", 16)
    c.drawString(50, height - 60, "Performance Report")

    c.setFont("Helvetica", 12)
    y = height - 90
    for label, key in (
        ("Assessment", "assessment_type"),
        ("Academic Year", "academic_year"),
        ("Department", "department"),
        ("Section", "section"),
        ("Subject", "subject_code"),
    ):
        c.drawString(50, y, f"{label}: {filters.get(key, '')}")
        y -= 18

    y -= 12
    c.setFont("Helvetica-Bold", 12)
    for x, title in zip((50, 250, 320, 390, 460), EXPORT_COLUMNS):
        c.drawString(x, y, title)
    y -= 18

    c.setFont("Helvetica", 12)
    for row in report_dataframe(report).itertuples(index=False):
        for x, value in zip((50, 250, 320, 390, 460), row):
            c.drawString(x, y, str(value))
        y -= 18
        if y < 50:
            c.showPage()
            c.setFont("Helvetica", 12)
            y = height - 60

    c.save()
    out.seek(0)
    return out
