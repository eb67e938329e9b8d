from contextlib import contextmanager
from pathlib import Path
import json
import logging
import os
import threading
from typing import Any, Optional

from ..errors import StorageCorrupt
from .defaults import default_for

log = logging.getLogger(__name__)


class JsonStore:
    """JSON-on-disk documents: one file per collection.

    A document is whatever JSON value the collection holds (a list of records
    for most collections, a map for factories/stats/training). Reads never
    return "missing": an absent file is created with the collection default.
    """

    def __init__(self, data_dir: Optional[Path] = None, recover_corrupt: bool = False):
        self.data_dir = None
        self.recover_corrupt = recover_corrupt
        self._locks = {}
        self._locks_guard = threading.Lock()
        if data_dir is not None:
            self.configure(data_dir)

    def init_app(self, app):
        self.configure(app.config["DATA_DIR"])
        self.recover_corrupt = bool(app.config.get("RECOVER_CORRUPT_DATA", False))
        app.extensions["json_store"] = self

    def configure(self, data_dir):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def _load(self, collection: str, default: Any) -> Any:
        p = self._path(collection)
        try:
            with p.open("r", encoding="utf-8") as f:
                text = f.read()
            return json.loads(text) if text.strip() else default
        except (json.JSONDecodeError, UnicodeDecodeError):
            log.exception("Could not parse %s", p)
            if self.recover_corrupt:
                return default
            raise StorageCorrupt(collection)

    def _save(self, collection: str, obj: Any):
        p = self._path(collection)
        tmp = p.with_name(p.name + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(obj, f, indent=2, ensure_ascii=False)
        os.replace(tmp, p)

    def exists(self, collection: str) -> bool:
        return self._path(collection).exists()

    @contextmanager
    def locked(self, collection: str):
        """Hold the collection's lock across a read-modify-write."""
        with self._locks_guard:
            lock = self._locks.setdefault(collection, threading.RLock())
        with lock:
            yield

    def read(self, collection: str, default: Any = None) -> Any:
        if default is None:
            default = default_for(collection)
        with self.locked(collection):
            if not self.exists(collection):
                log.info("Initialising collection %s", collection)
                self._save(collection, default)
                return default
            return self._load(collection, default)

    def write(self, collection: str, value: Any):
        with self.locked(collection):
            self._save(collection, value)
