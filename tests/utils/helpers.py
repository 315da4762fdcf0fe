"""Test helper functions."""

import json
import http.client
from email.message import Message
from typing import Any, Dict, Optional, Tuple


def create_request(
    method: str = "POST",
    path: str = "/api/contact",
    body: Any = None,
    headers: Dict[str, str] = None
) -> Dict[str, Any]:
    """Create an endpoint request object for testing."""
    if headers is None:
        headers = {
            "content-type": "application/json"
        }
    
    return {
        "method": method,
        "path": path,
        "headers": headers,
        "body": json.dumps(body) if isinstance(body, (dict, list)) else body,
        "query": {}
    }


def http_request(
    address: Tuple[str, int],
    method: str,
    path: str,
    body: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None
) -> Tuple[int, Message, bytes]:
    """Send a request to a live server; returns (status, headers, body). Header lookup is case-insensitive."""
    host, port = address
    headers = dict(headers or {})
    payload = None
    if isinstance(body, (dict, list)):
        payload = json.dumps(body).encode("utf-8")
        headers.setdefault("Content-Type", "application/json")
    elif isinstance(body, str):
        payload = body.encode("utf-8")
    elif isinstance(body, bytes):
        payload = body
    
    conn = http.client.HTTPConnection(host, port, timeout=5)
    try:
        conn.request(method, path, body=payload, headers=headers)
        response = conn.getresponse()
        return response.status, response.headers, response.read()
    finally:
        conn.close()


ENTRY_HTML = "<!DOCTYPE html><html><body><h1>Listings entry</h1></body></html>"
STYLESHEET = "body { margin: 0; }"
