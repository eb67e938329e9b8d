"""PPE stock ledger: issue/restock against the ``ppe`` collection.

Every successful issue leaves one entry in ``ppe_logs`` (newest first).
Quantities are only ever changed through :meth:`PpeLedger.restock` and
:meth:`PpeLedger.issue`; an issue that would take stock below zero is refused.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

from ..errors import BadRequest, InsufficientStock, InvalidAction, NotFound, StorageCorrupt
from ..storage.collection_store import CollectionStore, Record, find_index, merge, next_id

PPE_COLLECTION = "ppe"
PPE_LOG_COLLECTION = "ppe_logs"


@dataclass(frozen=True)
class RestockRequest:
    id: object
    qty: int


@dataclass(frozen=True)
class IssueRequest:
    id: object
    qty: int
    to: str = ""


PpeAction = Union[RestockRequest, IssueRequest]


def _quantity(value) -> int:
    """Whole, non-negative stock amount; missing means 0."""
    if value in (None, ""):
        return 0
    if isinstance(value, bool):
        raise BadRequest("qty must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise BadRequest("qty must be a number")
    if number != number or number < 0:
        raise BadRequest("qty must be a non-negative number")
    if not number.is_integer():
        raise BadRequest("qty must be a whole number")
    return int(number)


def _stock(item: Record) -> int:
    try:
        return _quantity(item.get("qty"))
    except BadRequest:
        raise StorageCorrupt(PPE_COLLECTION)


def parse_ppe_action(body: dict) -> Optional[PpeAction]:
    """Turn a POST /ppe body into a ledger request; None means "add a new item"."""
    if not isinstance(body, dict):
        raise BadRequest("Body must be a JSON object")
    action = body.get("action")
    if not action:
        return None
    if action == "restock":
        return RestockRequest(id=body.get("id"), qty=_quantity(body.get("qty")))
    if action == "issue":
        return IssueRequest(id=body.get("id"), qty=_quantity(body.get("qty")), to=body.get("to") or "")
    raise InvalidAction()


class PpeLedger:
    def __init__(self, collections: CollectionStore):
        self.collections = collections
        self.store = collections.store

    def items(self):
        return self.collections.get_all(PPE_COLLECTION)

    def logs(self):
        return self.collections.get_all(PPE_LOG_COLLECTION)

    def add_item(self, item: Record) -> Record:
        if not isinstance(item, dict):
            raise BadRequest("Record must be a JSON object")
        item["qty"] = _quantity(item.get("qty"))
        return self.collections.insert_one(PPE_COLLECTION, item)

    def update_item(self, item_id, patch: Record) -> Record:
        """Edit item details; stock only moves through restock and issue."""
        with self.store.locked(PPE_COLLECTION):
            items = self.collections.get_all(PPE_COLLECTION)
            idx = find_index(items, item_id)
            if idx == -1:
                raise NotFound("Item not found")
            if isinstance(patch, dict) and "qty" in patch:
                if _quantity(patch["qty"]) != _stock(items[idx]):
                    raise BadRequest("qty can only change through restock or issue")
                patch = {k: v for k, v in patch.items() if k != "qty"}
            items[idx] = merge(items[idx], patch)
            self.store.write(PPE_COLLECTION, items)
            return items[idx]

    def apply(self, request: PpeAction) -> Record:
        if isinstance(request, RestockRequest):
            return self.restock(request.id, request.qty)
        if isinstance(request, IssueRequest):
            return self.issue(request.id, request.qty, request.to)
        raise InvalidAction()

    def restock(self, item_id, qty) -> Record:
        with self.store.locked(PPE_COLLECTION):
            items = self.collections.get_all(PPE_COLLECTION)
            idx = find_index(items, item_id)
            if idx == -1:
                raise NotFound("Item not found")
            items[idx]["qty"] = _stock(items[idx]) + qty
            self.store.write(PPE_COLLECTION, items)
            return items[idx]

    def issue(self, item_id, qty, to: str = "") -> Record:
        # lock order: ppe, then ppe_logs
        with self.store.locked(PPE_COLLECTION):
            items = self.collections.get_all(PPE_COLLECTION)
            idx = find_index(items, item_id)
            if idx == -1:
                raise NotFound("Item not found")
            item = items[idx]
            stock = _stock(item)
            if stock < qty:
                raise InsufficientStock()
            item["qty"] = stock - qty
            self.store.write(PPE_COLLECTION, items)

            with self.store.locked(PPE_LOG_COLLECTION):
                logs = self.collections.get_all(PPE_LOG_COLLECTION)
                logs.insert(0, {
                    "id": next_id(logs),
                    "date": datetime.now(timezone.utc).isoformat(),
                    "item": item.get("name"),
                    "qty": qty,
                    "to": to,
                })
                self.store.write(PPE_LOG_COLLECTION, logs)
            return item
