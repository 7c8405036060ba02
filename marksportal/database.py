# marksportal/database.py
import logging
import sqlite3

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_schema(app):
    """Create the students, subjects and marks tables if they are missing.

    An unreachable database is fatal: the error is logged and re-raised.
    A table that cannot be created is logged and skipped so the remaining
    tables still get a chance.
    """
    from marksportal.models import Mark, Student, Subject

    with app.app_context():
        try:
            with db.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.critical("Error opening database %s: %s", db.engine.url, e)
            raise

        logger.info("Connected to database at: %s", db.engine.url)

        for model in (Student, Subject, Mark):
            try:
                model.__table__.create(bind=db.engine, checkfirst=True)
            except SQLAlchemyError as e:
                logger.error("Could not create table %s: %s", model.__tablename__, e)

        logger.info("Database tables initialized: %s", inspect(db.engine).get_table_names())
