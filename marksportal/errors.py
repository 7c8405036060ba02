# marksportal/errors.py
import logging

from flask import jsonify
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from marksportal.database import db

logger = logging.getLogger(__name__)


class MarksPortalError(Exception):
    status_code = 400

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MissingParameters(MarksPortalError):
    def __init__(self, names, message=None):
        self.names = list(names)
        super().__init__(message or f"Missing required parameters: {', '.join(self.names)}")


class StoreError(MarksPortalError):
    """A statement failed in the store; carries the driver's message verbatim."""

    @classmethod
    def from_exception(cls, exc):
        return cls(store_message(exc))


def store_message(exc):
    # DBAPIError wraps the driver exception; its str() adds SQL and a docs link
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def register_error_handlers(app):
    @app.errorhandler(MarksPortalError)
    def handle_marks_portal_error(err):
        return jsonify({"error": err.message}), err.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(err):
        db.session.rollback()
        message = store_message(err)
        logger.warning("Store error: %s", message)
        return jsonify({"error": message}), 400
