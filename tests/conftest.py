"""
Pytest configuration and fixtures

Provides a local HTTP server that echoes JSON, reports multipart uploads and
returns error responses, so helpers can be exercised end to end.
"""

import json
import threading
from email import policy
from email.parser import BytesParser
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest


class _TestHandler(BaseHTTPRequestHandler):
    """Request handler for the local test server"""

    def _read_body(self) -> bytes:
        length = int(self.headers.get("Content-Length", 0))
        return self.rfile.read(length) if length else b""

    def _send(self, status: int, body: bytes, content_type: str = "application/json"):
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):
        if self.path.startswith("/json"):
            payload = {"path": self.path, "items": [1, 2, 3], "ok": True}
            self._send(200, json.dumps(payload).encode("utf-8"))
        elif self.path.startswith("/text"):
            self._send(200, b"hello, not json", "text/plain")
        else:
            self._send(404, b'{"error": "not found"}')

    def do_POST(self):
        body = self._read_body()

        if self.path.startswith("/echo"):
            self._send(200, body, self.headers.get("Content-Type", "application/json"))
        elif self.path.startswith("/error"):
            self._send(500, b'{"error": "internal"}')
        elif self.path.startswith("/upload"):
            self._send(200, json.dumps(self._describe_upload(body)).encode("utf-8"))
        else:
            self._send(404, b'{"error": "not found"}')

    def _describe_upload(self, body: bytes) -> dict:
        content_type = self.headers.get("Content-Type", "")
        message = BytesParser(policy=policy.default).parsebytes(
            b"Content-Type: " + content_type.encode("latin-1") + b"\r\n\r\n" + body
        )
        boundary = message.get_boundary()
        parts = list(message.iter_parts()) if message.is_multipart() else []
        report = {
            "content_type": content_type,
            "terminated": bool(boundary) and body.endswith(f"--{boundary}--\r\n".encode()),
            "parts": len(parts),
        }
        if parts:
            part = parts[0]
            payload = part.get_payload(decode=True) or b""
            report.update(
                {
                    "field": part.get_param("name", header="content-disposition"),
                    "filename": part.get_filename(),
                    "size": len(payload),
                    "part_content_type": part.get_content_type(),
                }
            )
        return report

    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="module")
def http_server():
    """Threaded local HTTP server, yields its base URL"""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _TestHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"

    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


@pytest.fixture
def local_server(http_server, monkeypatch):
    """Base URL of the local server with proxies bypassed for loopback"""
    monkeypatch.setenv("NO_PROXY", "127.0.0.1,localhost")
    monkeypatch.setenv("no_proxy", "127.0.0.1,localhost")
    return http_server


@pytest.fixture
def sample_payload():
    """Sample JSON payload"""
    return {
        "touser": "OPENID",
        "msgtype": "text",
        "text": {"content": "Grüße from httphelper ✓"},
        "tags": [1, 2.5, None, True],
    }
