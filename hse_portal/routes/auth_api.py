from flask import Blueprint, current_app, jsonify

from ..errors import BadRequest
from ..extensions import store
from ..services.auth import login
from .records_api import json_body

bp = Blueprint("auth_api", __name__)


@bp.post("/auth/login")
def auth_login():
    body = json_body()
    if not isinstance(body, dict):
        raise BadRequest("Body must be a JSON object")
    result = login(
        store,
        body.get("username"),
        body.get("password"),
        admin_username=current_app.config["ADMIN_USERNAME"],
        admin_password=current_app.config["ADMIN_PASSWORD"],
    )
    current_app.logger.info("Login for %s", result["user"]["username"])
    return jsonify(result)
