# marksportal/models/student.py
from sqlalchemy import func

from marksportal.database import db
from marksportal.models.base import SerializerMixin


class Student(SerializerMixin, db.Model):
    __tablename__ = "students"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    reg_number = db.Column(db.Text, unique=True, nullable=False)
    full_name = db.Column(db.Text, nullable=False)
    year = db.Column(db.Text, nullable=False)
    department = db.Column(db.Text, nullable=False)
    section = db.Column(db.Text, nullable=False)
    category = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<Student {self.reg_number}>"
