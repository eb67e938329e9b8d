"""
Shared test fixtures and configuration for HSE Portal tests.
"""
import io
import json
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from hse_portal import create_app
from hse_portal.config import Config
from hse_portal.storage.collection_store import CollectionStore
from hse_portal.storage.json_store import JsonStore


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory for JsonStore tests."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def json_store(temp_data_dir: Path) -> JsonStore:
    """Create a JsonStore instance with temporary directory."""
    return JsonStore(str(temp_data_dir))


@pytest.fixture
def collection_store(json_store: JsonStore) -> CollectionStore:
    return CollectionStore(json_store)


@pytest.fixture
def app(tmp_path: Path) -> Flask:
    """Create a test Flask application writing to a temporary data dir."""

    class TestConfig(Config):
        TESTING = True
        DATA_DIR = tmp_path / "data"
        UPLOADS_DIR = tmp_path / "uploads"
        RECOVER_CORRUPT_DATA = False
        ADMIN_USERNAME = "admin"
        ADMIN_PASSWORD = "admin123"

    app = create_app(TestConfig)
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def data_dir(app: Flask) -> Path:
    return Path(app.config["DATA_DIR"])


# Helper functions for tests

def read_document(data_dir: Path, name: str):
    """Load a persisted collection straight from disk."""
    with open(data_dir / f"{name}.json", encoding="utf-8") as f:
        return json.load(f)


def write_document(data_dir: Path, name: str, value) -> None:
    with open(data_dir / f"{name}.json", "w", encoding="utf-8") as f:
        json.dump(value, f)


def fake_file(content: bytes = b"img", name: str = "photo.png"):
    return (io.BytesIO(content), name)
