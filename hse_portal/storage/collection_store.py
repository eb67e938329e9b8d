import time
from typing import Any, Dict, Iterable, List, Optional

from ..errors import BadRequest, NotFound, StorageCorrupt
from .json_store import JsonStore

Record = Dict[str, Any]


def as_number(value) -> Optional[float]:
    """Numeric form of an id, or None when it is not numeric."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if number != number else number


def same_id(a, b) -> bool:
    na, nb = as_number(a), as_number(b)
    return na is not None and na == nb


def next_id(existing: Iterable[Record]) -> int:
    """Millisecond timestamp, bumped past any id already taken."""
    taken = {as_number(r.get("id")) for r in existing}
    candidate = int(time.time() * 1000)
    while candidate in taken:
        candidate += 1
    return candidate


def find_index(records: List[Record], record_id) -> int:
    for idx, r in enumerate(records):
        if same_id(r.get("id"), record_id):
            return idx
    return -1


def merge(record: Record, patch: Record) -> Record:
    if not isinstance(patch, dict):
        raise BadRequest("Update body must be a JSON object")
    merged = {**record, **patch}
    merged["id"] = record.get("id")
    return merged


class CollectionStore:
    """List-shaped CRUD on top of a JsonStore."""

    def __init__(self, store: JsonStore):
        self.store = store

    def _records(self, collection: str) -> List[Record]:
        data = self.store.read(collection)
        if not isinstance(data, list):
            raise StorageCorrupt(collection)
        return data

    def get_all(self, collection: str) -> List[Record]:
        return self._records(collection)

    def find_by_id(self, collection: str, record_id) -> Optional[Record]:
        records = self._records(collection)
        idx = find_index(records, record_id)
        return records[idx] if idx != -1 else None

    def insert_one(self, collection: str, record: Record) -> Record:
        if not isinstance(record, dict):
            raise BadRequest("Record must be a JSON object")
        with self.store.locked(collection):
            records = self._records(collection)
            if not record.get("id"):
                record["id"] = next_id(records)
            records.insert(0, record)
            self.store.write(collection, records)
        return record

    def update_one(self, collection: str, record_id, patch: Record) -> Record:
        with self.store.locked(collection):
            records = self._records(collection)
            idx = find_index(records, record_id)
            if idx == -1:
                raise NotFound()
            records[idx] = merge(records[idx], patch)
            self.store.write(collection, records)
            return records[idx]

    def delete_one(self, collection: str, record_id) -> bool:
        with self.store.locked(collection):
            records = self._records(collection)
            idx = find_index(records, record_id)
            if idx == -1:
                return False
            records.pop(idx)
            self.store.write(collection, records)
        return True

    def replace_all(self, collection: str, value: Any) -> Any:
        self.store.write(collection, value)
        return value
