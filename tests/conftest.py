"""Shared pytest fixtures and configuration."""

import os
import threading
import pytest
from freezegun import freeze_time
from tests.utils.helpers import ENTRY_HTML, STYLESHEET

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")



@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Point the data directory at a temporary location for every test."""
    path = tmp_path / "data"
    monkeypatch.setenv("DATA_DIR", str(path))
    return path


@pytest.fixture
def public_dir(tmp_path, monkeypatch):
    """Temporary public directory with an entry document and one asset."""
    path = tmp_path / "public"
    (path / "css").mkdir(parents=True)
    (path / "index.html").write_text(ENTRY_HTML, encoding="utf-8")
    (path / "css" / "site.css").write_text(STYLESHEET, encoding="utf-8")
    monkeypatch.setenv("PUBLIC_DIR", str(path))
    return path


@pytest.fixture
def listings_file(data_dir):
    return data_dir / "listings.json"


@pytest.fixture
def contacts_file(data_dir):
    return data_dir / "contacts.json"


@pytest.fixture
def json_store():
    """Fresh JSON store (independent locks)."""
    from src.services.json_store import JsonStore
    return JsonStore()


@pytest.fixture
def sample_listing_payload():
    """Minimal valid listing request body."""
    return {
        "title": "Sunny Two Bedroom",
        "location": "Downtown",
        "price": 500000
    }


@pytest.fixture
def sample_contact_payload():
    """Minimal valid contact request body."""
    return {
        "name": "Alice",
        "email": "a@example.com"
    }


@pytest.fixture
def freeze_time_fixture():
    """Fixture for freezing time in tests."""
    with freeze_time("2024-12-09 12:00:00") as frozen_time:
        yield frozen_time


@pytest.fixture
def live_server(public_dir):
    """Run the site server on an ephemeral port; yields (host, port)."""
    from src.server import create_server
    
    server = create_server(host="127.0.0.1", port=0, public_dir=public_dir)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server.server_address[0], server.server_address[1]
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)
