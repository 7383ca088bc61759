import json
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import httpx
import pytest


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def recorder():
    """MockTransport factory that records every request it serves."""
    requests = []

    def make(status_code=200, body=b"", exc=None):
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if exc is not None:
                raise exc
            content = body if isinstance(body, bytes) else json.dumps(body).encode()
            return httpx.Response(status_code, content=content)

        return httpx.MockTransport(handler)

    make.requests = requests
    return make


class _RPCHandler(BaseHTTPRequestHandler):
    """Small JSON-RPC endpoint with a few misbehaving routes."""

    def log_message(self, format, *args):
        pass

    def _send(self, status, body: bytes, headers=()):
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        for name, value in headers:
            self.send_header(name, value)
        self.end_headers()
        self.wfile.write(body)

    def do_POST(self):
        sent = self.rfile.read(int(self.headers.get("Content-Length", 0)))

        if self.path == "/echo":
            # http.server decodes header bytes as latin-1
            headers = {
                name.lower(): value.encode("latin-1").decode("utf-8", "replace")
                for name, value in self.headers.items()
            }
            result = {"headers": headers, "request": json.loads(sent)}
            self._send(200, json.dumps({"id": 1, "result": result}).encode())
        elif self.path == "/moved":
            self._send(307, b"", [("Location", "/echo")])
        elif self.path == "/loop":
            self._send(307, b"", [("Location", "/loop")])
        elif self.path == "/huge-number":
            self._send(200, b'{"id":1,"result":' + b"1" * 5000 + b"}")
        elif self.path == "/trickle":
            body = b'{"id":1,"result":1}'.ljust(20)
            self.send_response(200)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            try:
                for i in range(len(body)):
                    self.wfile.write(body[i:i + 1])
                    self.wfile.flush()
                    time.sleep(0.25)
            except (BrokenPipeError, ConnectionResetError):
                pass
        else:
            self._send(404, b"not found")


@pytest.fixture
def rpc_server():
    """Real HTTP server on localhost; yields its host:port."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _RPCHandler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield "127.0.0.1:%d" % server.server_address[1]
    finally:
        server.shutdown()
        server.server_close()
