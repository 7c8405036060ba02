# marksportal/routes/mark_routes.py

from flask import Blueprint, jsonify

from marksportal.errors import MarksPortalError
from marksportal.store import get_store
from marksportal.utils.params import json_body, require_query_params

mark = Blueprint("mark", __name__)

MARK_FILTERS = ("assessment_type", "academic_year", "department", "section", "subject_code")


# =====================================================
# MARKS FOR ONE CLASS / SUBJECT / ASSESSMENT
# =====================================================
@mark.get("")
def fetch_marks():
    filters = require_query_params(*MARK_FILTERS)
    marks = get_store().fetch_marks(*filters)
    return jsonify({"marks": marks}), 200


# =====================================================
# BULK SAVE (ALL OR NOTHING)
# =====================================================
@mark.post("/bulk")
def bulk_save():
    data = json_body()
    records = data.get("marks")

    if not isinstance(records, list):
        raise MarksPortalError("marks must be a list of mark records")

    get_store().upsert_marks(records)
    return jsonify({"message": "All marks saved successfully"}), 200
