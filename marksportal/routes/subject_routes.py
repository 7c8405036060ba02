# marksportal/routes/subject_routes.py

from flask import Blueprint, jsonify

from marksportal.store import get_store
from marksportal.utils.params import json_body, query_param

subject = Blueprint("subject", __name__)


@subject.get("")
def list_subjects():
    subjects = get_store().list_subjects(
        year=query_param("year"),
        department=query_param("department"),
    )
    return jsonify({"subjects": subjects}), 200


@subject.post("")
def add_subject():
    data = json_body()
    subject_id = get_store().add_subject(data)
    return jsonify({
        "message": "Subject added successfully",
        "data": {"id": subject_id}
    }), 200


@subject.delete("/<int:subject_id>")
def delete_subject(subject_id):
    get_store().delete_subject(subject_id)
    return jsonify({"message": "Subject deleted successfully"}), 200
