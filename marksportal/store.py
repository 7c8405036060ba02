# marksportal/store.py
import logging
from functools import wraps

from flask import current_app
from sqlalchemy import case, func
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError

from marksportal.database import db
from marksportal.errors import MarksPortalError, StoreError
from marksportal.models import Mark, Student, Subject
from marksportal.models.mark import MARK_KEY_COLUMNS, PASS_MARK

logger = logging.getLogger(__name__)

STUDENT_LIST_LIMIT = 10

STUDENT_FIELDS = ("reg_number", "full_name", "year", "department", "section", "category")
SUBJECT_FIELDS = ("year", "department", "semester", "subject_code", "subject_name")
MARK_FIELDS = ("student_id", "subject_code", "subject_name", "assessment_type", "marks", "academic_year")

EXTENSION_KEY = "marks_store"


def get_store():
    return current_app.extensions[EXTENSION_KEY]


def _store_call(fn):
    # every public operation is one unit of work: roll back and re-raise as StoreError
    @wraps(fn)
    def wrapper(self, *args, **kwargs):
        try:
            return fn(self, *args, **kwargs)
        except SQLAlchemyError as e:
            self.session.rollback()
            err = StoreError.from_exception(e)
            logger.warning("%s failed: %s", fn.__name__, err.message)
            raise err from e
    return wrapper


class MarksStore:
    """All reads and writes against the students, subjects and marks tables."""

    def __init__(self, database=db):
        self.db = database

    @property
    def session(self):
        return self.db.session

    # =====================================================
    # STUDENTS
    # =====================================================
    @_store_call
    def list_students(self, year=None, department=None, section=None):
        query = Student.query
        if year and department and section:
            query = query.filter_by(year=year, department=department, section=section)
        elif year and department:
            query = query.filter_by(year=year, department=department)

        rows = (
            query.order_by(Student.created_at.desc(), Student.id.desc())
            .limit(STUDENT_LIST_LIMIT)
            .all()
        )
        return [s.to_dict() for s in rows]

    @_store_call
    def class_roster(self, year, department, section):
        rows = (
            Student.query
            .filter_by(year=year, department=department, section=section)
            .order_by(Student.reg_number.asc())
            .all()
        )
        return [s.to_dict() for s in rows]

    @_store_call
    def add_student(self, data):
        student = Student(**{f: data.get(f) for f in STUDENT_FIELDS})
        self.session.add(student)
        self.session.commit()
        return student.id

    @_store_call
    def delete_student(self, student_id):
        # marks go with their student
        Mark.query.filter_by(student_id=student_id).delete(synchronize_session=False)
        Student.query.filter_by(id=student_id).delete(synchronize_session=False)
        self.session.commit()

    # =====================================================
    # SUBJECTS
    # =====================================================
    @_store_call
    def list_subjects(self, year=None, department=None):
        query = Subject.query
        if year and department:
            query = query.filter_by(year=year, department=department)
        return [s.to_dict() for s in query.order_by(Subject.id.asc()).all()]

    @_store_call
    def add_subject(self, data):
        subject = Subject(**{f: data.get(f) for f in SUBJECT_FIELDS})
        self.session.add(subject)
        self.session.commit()
        return subject.id

    @_store_call
    def delete_subject(self, subject_id):
        Subject.query.filter_by(id=subject_id).delete(synchronize_session=False)
        self.session.commit()

    # =====================================================
    # MARKS
    # =====================================================
    @_store_call
    def fetch_marks(self, assessment_type, academic_year, department, section, subject_code):
        rows = (
            self.session.query(Mark, Student.reg_number, Student.full_name, Student.category)
            .join(Student, Mark.student_id == Student.id)
            .filter(
                Mark.assessment_type == assessment_type,
                Mark.academic_year == academic_year,
                Student.department == department,
                Student.section == section,
                Mark.subject_code == subject_code,
            )
            .order_by(Student.reg_number.asc())
            .all()
        )

        result = []
        for mark, reg_number, full_name, category in rows:
            item = mark.to_dict()
            item.update({"reg_number": reg_number, "full_name": full_name, "category": category})
            result.append(item)
        return result

    @_store_call
    def upsert_marks(self, records):
        """Insert-or-replace every record on the (student, subject, assessment, year) key.

        Runs as a single transaction: one bad record leaves the table untouched.
        """
        rows = []
        for record in records:
            if not isinstance(record, dict):
                raise MarksPortalError("Each mark record must be an object")
            row = {f: record.get(f) for f in MARK_FIELDS}
            # SQLite would keep "abc" as TEXT, which sorts above every integer
            if row["marks"] is not None:
                try:
                    row["marks"] = int(row["marks"])
                except (TypeError, ValueError):
                    raise MarksPortalError(f"marks must be an integer, got {row['marks']!r}")
            rows.append(row)

        if not rows:
            return 0

        stmt = sqlite_insert(Mark.__table__)
        stmt = stmt.on_conflict_do_update(
            index_elements=list(MARK_KEY_COLUMNS),
            set_={
                "subject_name": stmt.excluded.subject_name,
                "marks": stmt.excluded.marks,
                "created_at": func.current_timestamp(),
            },
        )
        self.session.execute(stmt, rows)
        self.session.commit()
        logger.info("Upserted %d mark records", len(rows))
        return len(rows)

    # =====================================================
    # DASHBOARD
    # =====================================================
    @_store_call
    def count_students(self):
        return self.session.query(func.count(Student.id)).scalar()

    @_store_call
    def count_subjects(self):
        return self.session.query(func.count(Subject.id)).scalar()

    @_store_call
    def count_marks(self):
        return self.session.query(func.count(Mark.id)).scalar()

    # =====================================================
    # REPORTS
    # =====================================================
    @_store_call
    def category_stats(self, assessment_type, academic_year, department, section, subject_code):
        """Pass/fail counts per student category. ``section=None`` spans every section."""
        passed = func.sum(case((Mark.marks >= PASS_MARK, 1), else_=0))
        failed = func.sum(case((Mark.marks < PASS_MARK, 1), else_=0))

        query = (
            self.session.query(
                Student.category,
                func.count(Mark.id).label("total"),
                passed.label("pass"),
                failed.label("fail"),
            )
            .join(Student, Mark.student_id == Student.id)
            .filter(
                Mark.assessment_type == assessment_type,
                Mark.academic_year == academic_year,
                Student.department == department,
                Mark.subject_code == subject_code,
            )
        )
        if section is not None:
            query = query.filter(Student.section == section)

        rows = query.group_by(Student.category).order_by(Student.category.asc()).all()
        return [
            {"category": category, "total": int(total), "pass": int(p or 0), "fail": int(f or 0)}
            for category, total, p, f in rows
        ]
