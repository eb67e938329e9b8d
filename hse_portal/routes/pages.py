from flask import Blueprint, current_app, jsonify, send_from_directory

bp = Blueprint("pages", __name__)

MODULES = ["notices", "factories", "reports", "ppe", "training", "policies", "gallery", "visitors", "ptw", "chat"]


@bp.get("/")
def index():
    return "HSE Backend is running successfully!"


@bp.get("/api")
def api_root():
    return jsonify({"ok": True, "message": "HSE API running", "modules": MODULES})


@bp.get("/uploads/<path:filename>")
def serve_upload(filename):
    return send_from_directory(current_app.config["UPLOADS_DIR"], filename)
