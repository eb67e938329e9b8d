from flask import Blueprint, jsonify

from ..extensions import training_book
from ..services.training import parse_training_action
from .records_api import json_body

bp = Blueprint("training_api", __name__)


@bp.get("/training")
def get_training():
    return jsonify(training_book.document())


@bp.post("/training")
def training_post():
    """
    JSON body:
      { "action": "addModule", "module": {...} }
      { "action": "addRecord", "record": {...} }
    Returns the whole {modules, records} document.
    """
    action = parse_training_action(json_body())
    return jsonify(training_book.apply(action))


@bp.put("/training/<entry_id>")
def update_training(entry_id):
    return jsonify(training_book.update(entry_id, json_body()))


@bp.delete("/training/<entry_id>")
def delete_training(entry_id):
    training_book.delete(entry_id)
    return jsonify({"ok": True})
