"""HTTP server - API routing, static assets, and the HTML entry fallback."""

import json
import os
from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Callable, Optional
from urllib.parse import parse_qsl, urlsplit

from api import contact, listings
from api.admin import listings as admin_listings
from src.utils.config import (
    INDEX_FILENAME,
    get_cors_origin,
    get_host,
    get_port,
    get_public_dir,
)
from src.utils.logging import correlation_context, get_structured_logger, log_timing
from src.utils.logging_config import LoggingConfig

logger = get_structured_logger(__name__)
access_logger = get_structured_logger(LoggingConfig.ACCESS_LOGGER_NAME)

ROUTES: dict[tuple[str, str], Callable[[dict], dict]] = {
    ("GET", "/api/listings"): listings.handler,
    ("POST", "/api/admin/listings"): admin_listings.handler,
    ("POST", "/api/contact"): contact.handler,
}

CORS_ALLOWED_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"
STATIC_CACHE_CONTROL = "public, max-age=0"


def parse_request_body(content_type: str, raw_body: bytes):
    """
    Decode a request body by content type.

    JSON bodies are passed through as text for the endpoint to parse, form
    bodies become a dict, and anything else is an empty dict.
    """
    media_type = (content_type or "").split(";")[0].strip().lower()
    if not raw_body:
        return {}
    if media_type == "application/json" or media_type.endswith("+json"):
        return raw_body.decode("utf-8", errors="replace")
    if media_type == "application/x-www-form-urlencoded":
        return dict(parse_qsl(raw_body.decode("utf-8", errors="replace"), keep_blank_values=True))
    return {}


class SiteRequestHandler(SimpleHTTPRequestHandler):
    """Routes API calls, serves the public directory, and falls back to index.html."""

    server_version = "ListingsSite/1.0"

    def __init__(self, *args, directory: Optional[str] = None, **kwargs):
        self._correlation_id: Optional[str] = None
        self._serving_static = False
        super().__init__(*args, directory=str(directory or get_public_dir()), **kwargs)

    def do_GET(self):
        self._dispatch("GET")

    def do_HEAD(self):
        self._dispatch("HEAD")

    def do_POST(self):
        self._dispatch("POST")

    def do_PUT(self):
        self._dispatch("PUT")

    def do_PATCH(self):
        self._dispatch("PATCH")

    def do_DELETE(self):
        self._dispatch("DELETE")

    def do_OPTIONS(self):
        """Answer CORS preflight requests."""
        with correlation_context(self._incoming_correlation_id()) as correlation_id:
            self._correlation_id = correlation_id
            self.send_response(204)
            self.send_header("Access-Control-Allow-Methods", CORS_ALLOWED_METHODS)
            requested_headers = self.headers.get("Access-Control-Request-Headers")
            if requested_headers:
                self.send_header("Access-Control-Allow-Headers", requested_headers)
                self.send_header("Vary", "Access-Control-Request-Headers")
            self.send_header("Content-Length", "0")
            self.end_headers()

    def end_headers(self):
        self.send_header("Access-Control-Allow-Origin", get_cors_origin())
        if self._correlation_id:
            self.send_header(LoggingConfig.LOG_CORRELATION_ID_HEADER, self._correlation_id)
        if self._serving_static:
            self.send_header("Cache-Control", STATIC_CACHE_CONTROL)
        super().end_headers()

    def log_message(self, format, *args):
        access_logger.info(
            "HTTP request",
            client_address=self.address_string(),
            request_line=format % args
        )

    def _incoming_correlation_id(self) -> Optional[str]:
        return self.headers.get(LoggingConfig.LOG_CORRELATION_ID_HEADER) or None

    def _dispatch(self, method: str) -> None:
        url = urlsplit(self.path)
        route_path = url.path.rstrip("/") or "/"

        with correlation_context(self._incoming_correlation_id()) as correlation_id:
            self._correlation_id = correlation_id
            with log_timing("http_request", logger=logger, method=method, route=route_path):
                route = ROUTES.get(("GET" if method == "HEAD" else method, route_path))
                if route is not None:
                    self._handle_api(route, method, url.path, url.query)
                elif method in ("GET", "HEAD") and self._is_static_file():
                    self._serving_static = True
                    if method == "HEAD":
                        super().do_HEAD()
                    else:
                        super().do_GET()
                else:
                    self._send_entry_document(method)

    def _read_body(self) -> bytes:
        """Read the request body, honouring Content-Length or chunked transfer encoding."""
        if "chunked" in self.headers.get("Transfer-Encoding", "").lower():
            chunks = []
            while True:
                size_line = self.rfile.readline()
                size = int(size_line.split(b";")[0].strip() or b"0", 16)
                if size == 0:
                    # trailers end with a blank line
                    while self.rfile.readline().strip():
                        pass
                    break
                chunks.append(self.rfile.read(size))
                self.rfile.readline()
            return b"".join(chunks)

        try:
            content_length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            content_length = 0
        return self.rfile.read(content_length) if content_length > 0 else b""

    def _handle_api(self, route: Callable[[dict], dict], method: str, path: str, query: str) -> None:
        try:
            request = {
                "method": method,
                "path": path,
                "headers": dict(self.headers),
                "body": parse_request_body(self.headers.get("Content-Type", ""), self._read_body()),
                "query": dict(parse_qsl(query)),
            }
            response = route(request)
            status_code = response.get("statusCode", 200)
            headers = response.get("headers", {})
            body = response.get("body", "").encode("utf-8")
        except Exception as e:
            logger.error("Unhandled API error", exc_info=True, route=path, error=str(e))
            status_code = 500
            headers = {"Content-Type": "application/json; charset=utf-8"}
            body = json.dumps({"error": "internal server error"}).encode("utf-8")

        self.send_response(status_code)
        for name, value in headers.items():
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if method != "HEAD":
            self.wfile.write(body)

    def _is_static_file(self) -> bool:
        """True when the request path names a servable file under the public directory."""
        target = self.translate_path(self.path)
        if os.path.isdir(target):
            return os.path.isfile(os.path.join(target, INDEX_FILENAME))
        return os.path.isfile(target)

    def _send_entry_document(self, method: str) -> None:
        index_file = Path(self.directory) / INDEX_FILENAME
        try:
            content = index_file.read_bytes()
        except OSError as e:
            logger.warning("Entry document unavailable", index_file=str(index_file), error=str(e))
            body = json.dumps({"error": "not found"}).encode("utf-8")
            self.send_response(404)
            self.send_header("Content-Type", "application/json; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            if method != "HEAD":
                self.wfile.write(body)
            return

        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.send_header("Content-Length", str(len(content)))
        self.end_headers()
        if method != "HEAD":
            self.wfile.write(content)


def create_server(
    host: Optional[str] = None,
    port: Optional[int] = None,
    public_dir: Optional[Path] = None
) -> ThreadingHTTPServer:
    """Build (but do not start) the site server."""
    host = get_host() if host is None else host
    port = get_port() if port is None else port
    handler_class = partial(SiteRequestHandler, directory=str(public_dir or get_public_dir()))
    return ThreadingHTTPServer((host, port), handler_class)


def main() -> None:
    """Run the site server until interrupted."""
    LoggingConfig.setup_logging()
    server = create_server()
    port = server.server_address[1]
    logger.info(f"Server running on http://localhost:{port}", port=port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Server shutting down")
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
