import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_DIR = Path(os.getenv("HSE_DATA_DIR", BASE_DIR / "data"))
    UPLOADS_DIR = Path(os.getenv("HSE_UPLOADS_DIR", BASE_DIR / "uploads"))
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024
    RECOVER_CORRUPT_DATA = _env_flag("HSE_RECOVER_CORRUPT_DATA")
    ADMIN_USERNAME = os.getenv("HSE_ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD = os.getenv("HSE_ADMIN_PASSWORD", "admin123")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False
