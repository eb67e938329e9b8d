from flask import Blueprint, current_app, jsonify, request

from ..errors import NotFound
from ..extensions import collections

bp = Blueprint("records_api", __name__)

# Plain list collections: GET / POST / PUT / DELETE all generic.
PLAIN = "any(notices, reports, ptw, chat)"
# List collections whose GET / DELETE are generic.
LISTED = "any(notices, reports, ptw, chat, ppe, visitors, policies, gallery)"
# PUT is generic everywhere except ppe, where stock is guarded.
EDITABLE = "any(notices, reports, ptw, chat, visitors, policies, gallery)"


def json_body():
    body = request.get_json(silent=True)
    return {} if body is None else body


@bp.get(f"/<{LISTED}:collection>")
def list_records(collection):
    return jsonify(collections.get_all(collection))


@bp.post(f"/<{PLAIN}:collection>")
def create_record(collection):
    record = collections.insert_one(collection, json_body())
    return jsonify(record)


@bp.put(f"/<{EDITABLE}:collection>/<record_id>")
def update_record(collection, record_id):
    updated = collections.update_one(collection, record_id, json_body())
    return jsonify(updated)


@bp.delete(f"/<{LISTED}:collection>/<record_id>")
def delete_record(collection, record_id):
    if not collections.delete_one(collection, record_id):
        raise NotFound()
    current_app.logger.info("Deleted %s/%s", collection, record_id)
    return jsonify({"ok": True})
