from dataclasses import dataclass, field
from typing import Any, Dict, Union

from ..errors import InvalidAction, NotFound, StorageCorrupt
from ..storage.collection_store import Record, find_index, merge, next_id, same_id

TRAINING_COLLECTION = "training"
SECTIONS = ("modules", "records")


@dataclass
class AddModule:
    module: Record = field(default_factory=dict)


@dataclass
class AddRecord:
    record: Record = field(default_factory=dict)


TrainingAction = Union[AddModule, AddRecord]


def parse_training_action(body: dict) -> TrainingAction:
    if not isinstance(body, dict):
        raise InvalidAction("Unsupported action")
    action = body.get("action")
    if action == "addModule" and isinstance(body.get("module"), dict):
        return AddModule(body["module"])
    if action == "addRecord" and isinstance(body.get("record"), dict):
        return AddRecord(body["record"])
    raise InvalidAction("Unsupported action")


class TrainingBook:
    """Training modules and completion records, persisted together as one document."""

    def __init__(self, store):
        self.store = store

    def document(self) -> Dict[str, Any]:
        doc = self.store.read(TRAINING_COLLECTION)
        if not isinstance(doc, dict):
            raise StorageCorrupt(TRAINING_COLLECTION)
        for section in SECTIONS:
            doc.setdefault(section, [])
        return doc

    def apply(self, action: TrainingAction) -> Dict[str, Any]:
        if isinstance(action, AddModule):
            return self.add_module(action.module)
        if isinstance(action, AddRecord):
            return self.add_record(action.record)
        raise InvalidAction("Unsupported action")

    def _append(self, section: str, entry: Record) -> Dict[str, Any]:
        with self.store.locked(TRAINING_COLLECTION):
            doc = self.document()
            if not entry.get("id"):
                entry["id"] = next_id(doc["modules"] + doc["records"])
            doc[section].append(entry)
            self.store.write(TRAINING_COLLECTION, doc)
            return doc

    def add_module(self, module: Record) -> Dict[str, Any]:
        return self._append("modules", module)

    def add_record(self, record: Record) -> Dict[str, Any]:
        return self._append("records", record)

    def update(self, entry_id, patch: Record) -> Record:
        with self.store.locked(TRAINING_COLLECTION):
            doc = self.document()
            for section in SECTIONS:
                idx = find_index(doc[section], entry_id)
                if idx != -1:
                    doc[section][idx] = merge(doc[section][idx], patch)
                    self.store.write(TRAINING_COLLECTION, doc)
                    return doc[section][idx]
        raise NotFound()

    def delete(self, entry_id) -> int:
        """Drop the id from both sections; returns how many entries went."""
        with self.store.locked(TRAINING_COLLECTION):
            doc = self.document()
            removed = 0
            for section in SECTIONS:
                kept = [e for e in doc[section] if not same_id(e.get("id"), entry_id)]
                removed += len(doc[section]) - len(kept)
                doc[section] = kept
            self.store.write(TRAINING_COLLECTION, doc)
            return removed
