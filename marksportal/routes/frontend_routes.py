# marksportal/routes/frontend_routes.py
import os

from flask import Blueprint, current_app, jsonify, send_from_directory

frontend = Blueprint("frontend", __name__)

INDEX_FILE = "index.html"


# =====================================================
# HEALTH CHECK (HOSTING PLATFORM PROBES)
# =====================================================
@frontend.get("/health")
def health():
    return jsonify({"status": "ok"})


# =====================================================
# SINGLE PAGE APP: REAL FILES, ELSE index.html
# =====================================================
@frontend.get("/", defaults={"path": ""})
@frontend.get("/<path:path>")
def serve_frontend(path):
    static_folder = current_app.config["STATIC_FOLDER"]

    if path and os.path.isfile(os.path.join(static_folder, path)):
        return send_from_directory(static_folder, path)

    if not os.path.isfile(os.path.join(static_folder, INDEX_FILE)):
        return jsonify({"error": "Front end not built"}), 404

    return send_from_directory(static_folder, INDEX_FILE)
