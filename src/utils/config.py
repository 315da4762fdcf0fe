"""Environment-driven server configuration."""

import os
from pathlib import Path
from src.utils.errors import ConfigError

BASE_DIR = Path(__file__).resolve().parent.parent.parent

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"

LISTINGS_FILENAME = "listings.json"
CONTACTS_FILENAME = "contacts.json"
INDEX_FILENAME = "index.html"


def get_port() -> int:
    """Get listen port from environment."""
    raw = os.environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {raw!r}")
    if not 0 <= port <= 65535:
        raise ConfigError(f"PORT out of range: {port}")
    return port


def get_host() -> str:
    return os.environ.get("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST


def get_data_dir() -> Path:
    """Directory holding the JSON collection files."""
    custom = os.environ.get("DATA_DIR", "").strip()
    return Path(custom) if custom else BASE_DIR / "data"


def get_public_dir() -> Path:
    """Directory served as static assets."""
    custom = os.environ.get("PUBLIC_DIR", "").strip()
    return Path(custom) if custom else BASE_DIR / "public"


def get_listings_file() -> Path:
    return get_data_dir() / LISTINGS_FILENAME


def get_contacts_file() -> Path:
    return get_data_dir() / CONTACTS_FILENAME


def get_cors_origin() -> str:
    return os.environ.get("CORS_ORIGIN", "*").strip() or "*"
