from marksportal.models.mark import Mark
from marksportal.models.student import Student
from marksportal.models.subject import Subject

__all__ = ["Mark", "Student", "Subject"]
