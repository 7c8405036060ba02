# marksportal/models/subject.py
from sqlalchemy import func

from marksportal.database import db
from marksportal.models.base import SerializerMixin


class Subject(SerializerMixin, db.Model):
    __tablename__ = "subjects"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    year = db.Column(db.Text, nullable=False)
    department = db.Column(db.Text, nullable=False)
    semester = db.Column(db.Text, nullable=False)
    subject_code = db.Column(db.Text, nullable=False)
    subject_name = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, server_default=func.current_timestamp())

    __table_args__ = (
        db.UniqueConstraint("year", "department", "subject_code", name="uq_subject_year_dept_code"),
    )

    def __repr__(self):
        return f"<Subject {self.year}/{self.department}/{self.subject_code}>"
