# marksportal/__init__.py
import os

from flask import Flask
from flask_cors import CORS

from marksportal.config import Config
from marksportal.database import db, init_schema
from marksportal.errors import register_error_handlers
from marksportal.logging_config import setup_logging
from marksportal.store import EXTENSION_KEY, MarksStore


def create_app(test_config=None, store=None):
    """Build the API.

    ``test_config`` is applied on top of :class:`Config`; ``store`` replaces
    the SQLAlchemy-backed :class:`MarksStore` handed to every request handler.
    """
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    if not app.testing:
        setup_logging(app.config["LOG_LEVEL"], app.config["LOG_DIR"])

    CORS(app)

    # =====================================================
    # DATABASE
    # =====================================================
    db_uri = app.config["SQLALCHEMY_DATABASE_URI"]
    if db_uri.startswith("sqlite:///"):
        db_dir = os.path.dirname(db_uri[len("sqlite:///"):])
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    db.init_app(app)
    init_schema(app)

    app.extensions[EXTENSION_KEY] = store if store is not None else MarksStore(db)

    # =====================================================
    # BLUEPRINTS
    # =====================================================
    from marksportal.routes.dashboard_routes import dashboard
    from marksportal.routes.frontend_routes import frontend
    from marksportal.routes.mark_routes import mark
    from marksportal.routes.report_routes import report
    from marksportal.routes.student_routes import student
    from marksportal.routes.subject_routes import subject

    app.register_blueprint(student, url_prefix="/api/students")
    app.register_blueprint(subject, url_prefix="/api/subjects")
    app.register_blueprint(mark, url_prefix="/api/marks")
    app.register_blueprint(dashboard, url_prefix="/api/dashboard")
    app.register_blueprint(report, url_prefix="/api/reports")
    # catch-all last
    app.register_blueprint(frontend)

    register_error_handlers(app)

    return app
