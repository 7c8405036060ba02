from io import BytesIO

import pandas as pd
import pytest

from marksportal.utils.reports import build_performance_report, pass_percentage, summarize
from tests.conftest import make_student, mark_record

REPORT_QUERY = (
    "/api/reports/performance?assessment_type=internal1&academic_year=2024-25"
    "&department=CSE&subject_code=CS201&section={section}"
)


@pytest.fixture()
def marked_class(client):
    records = []
    for reg, section, category, score in (
        ("A1", "A", "GEN", 80),
        ("A2", "A", "GEN", 39),
        ("A3", "A", "SC", 40),
        ("B1", "B", "GEN", 55),
        ("B2", "B", "OBC", 12),
    ):
        student_id = make_student(client, reg, section=section, category=category)
        records.append(mark_record(student_id, score))
    # other subject and other department must not leak in
    other = make_student(client, "E1", department="ECE", category="GEN")
    records.append(mark_record(other, 99))
    records.append(mark_record(records[0]["student_id"], 5, subject_code="CS202"))

    resp = client.post("/api/marks/bulk", json={"marks": records})
    assert resp.status_code == 200
    return client


def test_pass_percentage_formatting():
    assert pass_percentage({"total": 10, "pass": 3, "fail": 7}) == "30.00"
    assert pass_percentage({"total": 3, "pass": 2, "fail": 1}) == "66.67"
    assert pass_percentage({"total": 0, "pass": 0, "fail": 0}) == 0


def test_summarize_adds_categories():
    rows = [
        {"category": "GEN", "total": 4, "pass": 3, "fail": 1},
        {"category": "SC", "total": 6, "pass": 0, "fail": 6},
    ]
    assert summarize(rows) == {"total": 10, "pass": 3, "fail": 7}
    assert build_performance_report(rows)["passPercentage"] == "30.00"


def test_report_for_one_section(marked_class):
    body = marked_class.get(REPORT_QUERY.format(section="A")).get_json()
    assert body["categoryStats"] == [
        {"category": "GEN", "total": 2, "pass": 1, "fail": 1},
        {"category": "SC", "total": 1, "pass": 1, "fail": 0},
    ]
    assert body["totals"] == {"total": 3, "pass": 2, "fail": 1}
    assert body["passPercentage"] == "66.67"


def test_report_for_all_sections(marked_class):
    body = marked_class.get(REPORT_QUERY.format(section="all")).get_json()
    assert body["categoryStats"] == [
        {"category": "GEN", "total": 3, "pass": 2, "fail": 1},
        {"category": "OBC", "total": 1, "pass": 0, "fail": 1},
        {"category": "SC", "total": 1, "pass": 1, "fail": 0},
    ]
    assert body["totals"] == {"total": 5, "pass": 3, "fail": 2}
    assert body["passPercentage"] == "60.00"


def test_report_with_no_marks(client):
    body = client.get(REPORT_QUERY.format(section="A")).get_json()
    assert body == {
        "categoryStats": [],
        "totals": {"total": 0, "pass": 0, "fail": 0},
        "passPercentage": 0,
    }


def test_report_requires_filters(client):
    resp = client.get("/api/reports/performance?assessment_type=internal1&section=all")
    assert resp.status_code == 400
    assert "department" in resp.get_json()["error"]


def test_export_xlsx(marked_class):
    resp = marked_class.get(REPORT_QUERY.format(section="all").replace("performance?", "performance/export?"))
    assert resp.status_code == 200
    assert resp.mimetype.endswith("spreadsheetml.sheet")

    df = pd.read_excel(BytesIO(resp.data))
    assert list(df["Category"]) == ["GEN", "OBC", "SC", "TOTAL"]
    assert df.iloc[-1]["Total"] == 5
    assert df.iloc[-1]["Pass %"] == 60.0


def test_export_pdf(marked_class):
    url = REPORT_QUERY.format(section="A").replace("performance?", "performance/export?format=pdf&")
    resp = marked_class.get(url)
    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert resp.data.startswith(b"%PDF")


def test_export_rejects_unknown_format(marked_class):
    url = REPORT_QUERY.format(section="A").replace("performance?", "performance/export?format=csv&")
    assert marked_class.get(url).status_code == 400
