import json
import time

from flask import Blueprint, current_app, jsonify, request

from ..errors import BadRequest
from ..extensions import collections
from ..services.uploads import save_upload
from .records_api import json_body

bp = Blueprint("uploads_api", __name__)


def _payload() -> dict:
    """Form fields for multipart posts, the JSON body otherwise."""
    if request.files or request.form:
        return request.form.to_dict()
    body = json_body()
    if not isinstance(body, dict):
        raise BadRequest("Body must be a JSON object")
    return body


def _uploaded_file():
    f = request.files.get("file")
    if not f or not f.filename:
        return None
    path = save_upload(f, current_app.config["UPLOADS_DIR"])
    current_app.logger.info("Stored upload %s as %s", f.filename, path)
    return path


@bp.post("/visitors")
def create_visitor():
    """
    Multipart form-data:
      - file (photo) optional
      - meta (JSON string) optional, merged under the other form fields
    Without a file the body is stored as sent (e.g. an inline data: photo).
    """
    body = _payload()
    photo = _uploaded_file()
    if photo:
        raw_meta = body.pop("meta", None) or "{}"
        try:
            meta = json.loads(raw_meta)
        except ValueError:
            raise BadRequest("meta must be a JSON object")
        if not isinstance(meta, dict):
            raise BadRequest("meta must be a JSON object")
        body = {**meta, **body, "photo": photo}
    return jsonify(collections.insert_one("visitors", body))


def _document_record(body: dict) -> dict:
    record = {}
    url = _uploaded_file()
    if url:
        record["url"] = url
    elif body.get("data"):
        record["data"] = body["data"]
    return record


@bp.post("/policies")
def create_policy():
    body = _payload()
    record = {"title": body.get("title") or f"Policy {int(time.time() * 1000)}"}
    record.update(_document_record(body))
    return jsonify(collections.insert_one("policies", record))


@bp.post("/gallery")
def create_gallery_item():
    record = _document_record(_payload())
    return jsonify(collections.insert_one("gallery", record))

