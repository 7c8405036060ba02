# marksportal/models/base.py
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class SerializerMixin:
    """Dumps every column of a row, timestamps in SQLite's CURRENT_TIMESTAMP format."""

    def to_dict(self):
        data = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)
            if isinstance(value, datetime):
                value = value.strftime(TIMESTAMP_FORMAT)
            data[column.name] = value
        return data
