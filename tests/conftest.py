import pytest

from marksportal import create_app
from marksportal.database import db
from marksportal.store import get_store


@pytest.fixture()
def app(tmp_path):
    db_path = tmp_path / "test.db"
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_path}",
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    with app.app_context():
        yield get_store()


def make_student(client, reg_number, section="A", category="GEN", year="2", department="CSE", full_name=None):
    resp = client.post("/api/students", json={
        "reg_number": reg_number,
        "full_name": full_name or f"Student {reg_number}",
        "year": year,
        "department": department,
        "section": section,
        "category": category,
    })
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()["data"]["id"]


def mark_record(student_id, marks, subject_code="CS201", assessment_type="internal1", academic_year="2024-25"):
    return {
        "student_id": student_id,
        "subject_code": subject_code,
        "subject_name": "Data Structures",
        "assessment_type": assessment_type,
        "marks": marks,
        "academic_year": academic_year,
    }
