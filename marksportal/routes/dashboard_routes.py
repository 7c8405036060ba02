# marksportal/routes/dashboard_routes.py

from flask import Blueprint, jsonify

from marksportal.store import get_store

dashboard = Blueprint("dashboard", __name__)


@dashboard.get("/stats")
def stats():
    store = get_store()
    return jsonify({
        "totalStudents": store.count_students(),
        "totalSubjects": store.count_subjects(),
        "totalMarksEntries": store.count_marks()
    }), 200
