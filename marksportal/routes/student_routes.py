# marksportal/routes/student_routes.py

from flask import Blueprint, jsonify

from marksportal.store import get_store
from marksportal.utils.params import json_body, query_param, require_query_params

student = Blueprint("student", __name__)


# =====================================================
# LIST STUDENTS (LATEST 10, OPTIONAL CLASS FILTER)
# =====================================================
@student.get("")
def list_students():
    students = get_store().list_students(
        year=query_param("year"),
        department=query_param("department"),
        section=query_param("section"),
    )
    return jsonify({"students": students}), 200


# =====================================================
# CLASS ROSTER (FOR MARKS ENTRY)
# =====================================================
@student.get("/class")
def class_roster():
    year, department, section = require_query_params(
        "year", "department", "section",
        message="Year, department, and section are required",
    )
    students = get_store().class_roster(year, department, section)
    return jsonify({"students": students}), 200


# =====================================================
# ADD STUDENT
# =====================================================
@student.post("")
def add_student():
    data = json_body()
    student_id = get_store().add_student(data)
    return jsonify({
        "message": "Student added successfully",
        "data": {"id": student_id}
    }), 200


# =====================================================
# DELETE STUDENT (IDEMPOTENT, TAKES THEIR MARKS WITH IT)
# =====================================================
@student.delete("/<int:student_id>")
def delete_student(student_id):
    get_store().delete_student(student_id)
    return jsonify({"message": "Student deleted successfully"}), 200
