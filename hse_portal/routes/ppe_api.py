from flask import Blueprint, current_app, jsonify

from ..extensions import ppe_ledger
from ..services.ppe_ledger import IssueRequest, parse_ppe_action
from .records_api import json_body

bp = Blueprint("ppe_api", __name__)


@bp.post("/ppe")
def ppe_post():
    """
    JSON body, one of:
      { "action": "restock", "id": ..., "qty": ... }
      { "action": "issue", "id": ..., "qty": ..., "to": "..." }
      { ...new item fields... }   (no action: add a PPE item)
    """
    body = json_body()
    request_ = parse_ppe_action(body)
    if request_ is None:
        return jsonify(ppe_ledger.add_item(body))

    item = ppe_ledger.apply(request_)
    if isinstance(request_, IssueRequest):
        current_app.logger.info("Issued %s x %s to %r", request_.qty, item.get("name"), request_.to)
        return jsonify({"ok": True, "item": item})
    return jsonify(item)


@bp.put("/ppe/<item_id>")
def update_ppe_item(item_id):
    return jsonify(ppe_ledger.update_item(item_id, json_body()))


@bp.get("/ppe/logs")
def ppe_logs():
    return jsonify(ppe_ledger.logs())
