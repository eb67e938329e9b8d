from flask import Blueprint, jsonify

from ..extensions import collections, factory_board
from .records_api import json_body

bp = Blueprint("factories_api", __name__)

STATS_COLLECTION = "stats"


@bp.get("/factories")
def get_factories():
    return jsonify(factory_board.all())


@bp.post("/factories")
@bp.put("/factories")
def replace_factories():
    # PUT also accepts [{name, fire, firstAid, manpower}, ...]
    return jsonify(factory_board.replace(json_body()))


@bp.delete("/factories/<name>")
def delete_factory(name):
    factory_board.delete(name)
    return jsonify({"ok": True})


# -----------------------------
# Small stats document
# -----------------------------
@bp.get("/stats")
def get_stats():
    return jsonify(collections.store.read(STATS_COLLECTION))


@bp.put("/stats")
def put_stats():
    return jsonify(collections.replace_all(STATS_COLLECTION, json_body()))
