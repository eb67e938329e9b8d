import random
import time
from pathlib import Path

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

UPLOADS_URL_PREFIX = "/uploads"


def upload_name(original_filename: str) -> str:
    """<epoch ms>-<random><ext>, keeping only the sanitized extension of the client name."""
    ext = Path(secure_filename(original_filename or "")).suffix.lower()
    return f"{int(time.time() * 1000)}-{random.randint(0, 999999)}{ext}"


def save_upload(f: FileStorage, uploads_dir: Path) -> str:
    """Store an uploaded file and return the path it is served under."""
    uploads_dir = Path(uploads_dir)
    uploads_dir.mkdir(parents=True, exist_ok=True)
    name = upload_name(f.filename)
    while (uploads_dir / name).exists():
        name = upload_name(f.filename)
    f.save(uploads_dir / name)
    return f"{UPLOADS_URL_PREFIX}/{name}"
