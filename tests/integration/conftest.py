from __future__ import annotations

import json
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict, Iterator, List

import pytest

BOT_ID = 264811613708746752

_SEARCH = {
    "results": [{"id": str(BOT_ID), "username": "Luca", "points": 10, "monthlyPoints": 2}],
    "limit": 1,
    "offset": 0,
    "count": 1,
    "total": 1,
}
_VOTES = [{"id": "18446744073709551615", "username": "voter"}]
_VOTE_STATUS = {"created_at": "2025-05-01T00:00:00Z", "expires_at": "2025-05-01T12:00:00Z", "weight": 1}


class LocalApi:
    def __init__(self, base_url: str, requests: List[Dict[str, Any]]) -> None:
        self.base_url = base_url
        self.requests = requests

    @property
    def legacy_base_url(self) -> str:
        return f"{self.base_url}/api"

    @property
    def current_base_url(self) -> str:
        return f"{self.base_url}/api/v1"


@pytest.fixture
def local_api() -> Iterator[LocalApi]:
    received: List[Dict[str, Any]] = []

    class Handler(BaseHTTPRequestHandler):
        def _reply(self, status: int, body: Any = None, headers: Dict[str, str] = None) -> None:
            payload = b"" if body is None else (body if isinstance(body, bytes) else json.dumps(body).encode())
            self.send_response(status)
            for key, value in (headers or {}).items():
                self.send_header(key, value)
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)

        def _record(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            received.append(
                {
                    "method": self.command,
                    "path": self.path,
                    "authorization": self.headers.get("Authorization"),
                    "body": self.rfile.read(length).decode() if length else None,
                }
            )

        def do_GET(self) -> None:  # noqa: N802
            self._record()
            path = self.path.split("?")[0]
            if path == "/api/bots":
                self._reply(200, _SEARCH)
            elif path == f"/api/bots/{BOT_ID}/stats":
                self._reply(200, {"server_count": 42})
            elif path == f"/api/bots/{BOT_ID}/votes":
                self._reply(200, _VOTES)
            elif path == f"/api/bots/{BOT_ID}/check":
                self._reply(200, {"voted": 1})
            elif path.startswith("/api/v1/projects/@me/votes/"):
                self._reply(200, _VOTE_STATUS)
            elif path == "/api/limited":
                self._reply(429, {"retry-after": 3600})
            elif path == "/api/broken":
                self._reply(502, b"bad gateway")
            elif path == "/api/slow":
                time.sleep(0.5)
                self._reply(200, {})
            else:
                self._reply(404, {"title": "Not Found", "detail": path})

        def do_POST(self) -> None:  # noqa: N802
            self._record()
            if self.path in (f"/api/bots/{BOT_ID}/stats", "/api/v1/projects/@me/commands"):
                self._reply(204)
            else:
                self._reply(404)

        def log_message(self, format: str, *args: Any) -> None:  # noqa: A003
            return

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        host, port = server.server_address
        yield LocalApi(f"http://{host}:{port}", received)
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=1)
