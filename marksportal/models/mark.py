# marksportal/models/mark.py
from sqlalchemy import func

from marksportal.database import db
from marksportal.models.base import SerializerMixin

# marks >= PASS_MARK count as a pass in reports; nothing enforces it on write
PASS_MARK = 40

MARK_KEY_COLUMNS = ("student_id", "subject_code", "assessment_type", "academic_year")


class Mark(SerializerMixin, db.Model):
    __tablename__ = "marks"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    student_id = db.Column(db.Integer, db.ForeignKey("students.id"), nullable=False)
    subject_code = db.Column(db.Text, nullable=False)
    subject_name = db.Column(db.Text, nullable=False)
    assessment_type = db.Column(db.Text, nullable=False)
    marks = db.Column(db.Integer, nullable=False)
    academic_year = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, server_default=func.current_timestamp())

    __table_args__ = (
        db.UniqueConstraint(*MARK_KEY_COLUMNS, name="uq_mark_student_subject_assessment_year"),
    )

    def __repr__(self):
        return f"<Mark student={self.student_id} {self.subject_code}/{self.assessment_type}>"
