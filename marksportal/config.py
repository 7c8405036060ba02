# marksportal/config.py
import os

# =====================================================
# BASE DIRECTORY
# =====================================================
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_DIR = os.path.dirname(BASE_DIR)


def _database_uri():
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    db_path = os.getenv("DATABASE_PATH", os.path.join(PROJECT_DIR, "marksportal.db"))
    return f"sqlite:///{os.path.abspath(db_path)}"


class Config:
    PORT = int(os.getenv("PORT", "3000"))

    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    STATIC_FOLDER = os.getenv("STATIC_FOLDER", os.path.join(BASE_DIR, "static"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", os.path.join(PROJECT_DIR, "logs"))
