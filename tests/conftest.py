"""
Shared pytest fixtures for kubecreate tests.

This module provides common fixtures including:
- ApiServerMocker: Fake API server on httpx.MockTransport with canned responses
- StreamServer: Real socket server replaying watch frames with idle gaps
- RecordingPrinter: Printer collaborator that records what it was asked to print
- Sample parameter maps for the built-in generators
"""

import json
import os
import sys
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Pattern, Tuple, Union

import httpx
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kubecreate.modules.client import RESTClient


# =============================================================================
# API Server Mocking Infrastructure
# =============================================================================

@dataclass
class ApiResponse:
    """Represents a mocked API server response."""
    status_code: int = 200
    json: Optional[Any] = None
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    def to_httpx(self, request: httpx.Request) -> httpx.Response:
        """Convert to an httpx.Response bound to the request."""
        if self.json is not None:
            return httpx.Response(self.status_code, json=self.json, headers=self.headers, request=request)
        return httpx.Response(self.status_code, content=self.content, headers=self.headers, request=request)


def status_response(code: int, message: str, reason: str = "") -> ApiResponse:
    """Build a Status failure response the way the API server sends one."""
    return ApiResponse(
        status_code=code,
        json={
            "kind": "Status",
            "apiVersion": "v1",
            "status": "Failure",
            "message": message,
            "reason": reason,
            "code": code,
        },
    )


def watch_stream(*events: Tuple[str, Dict[str, Any]]) -> ApiResponse:
    """Build a newline-delimited watch stream response."""
    lines = [json.dumps({"type": event_type, "object": obj}) for event_type, obj in events]
    return ApiResponse(content=("\n".join(lines) + "\n").encode("utf-8"))


@dataclass
class ApiCall:
    """Record of a request made against the mocked API server."""
    method: str
    path: str
    params: List[Tuple[str, str]]
    body: Optional[Any]
    headers: Dict[str, str]
    matched_pattern: Optional[str] = None
    timeout: Optional[Dict[str, Optional[float]]] = None


class ApiServerMocker:
    """
    Mock API server with (method, path)-matched responses.

    This allows testing the client and orchestrator without a real API
    server by routing an httpx.Client through httpx.MockTransport.

    Usage:
        def test_get(api_server, rest_client):
            api_server.register("GET", "/api/v1/namespaces/ns1/secrets/s1", ApiResponse(
                json={"kind": "Secret", "metadata": {"name": "s1"}}
            ))

            secret = CoreV1Client(rest_client).secrets("ns1").get("s1")

            assert api_server.was_called_with("GET", "/api/v1/namespaces/ns1/secrets/s1")
    """

    BASE_URL = "https://api.test"

    def __init__(self):
        self._responses: List[Tuple[str, Union[str, Pattern], ApiResponse, int]] = []
        self._call_history: List[ApiCall] = []
        self._default_response = status_response(404, "the server could not find the requested resource", "NotFound")

    def register(
        self,
        method: str,
        path: Union[str, Pattern],
        response: ApiResponse,
        priority: int = 0,
    ) -> "ApiServerMocker":
        """
        Register a response for requests matching method and path.

        Args:
            method: HTTP verb
            path: Exact path string or compiled regex (full match)
            response: ApiResponse to return when matched
            priority: Higher priority patterns are checked first

        Returns:
            self for chaining
        """
        self._responses.append((method.upper(), path, response, priority))
        self._responses.sort(key=lambda x: x[3], reverse=True)
        return self

    def set_default_response(self, response: ApiResponse) -> "ApiServerMocker":
        """Set the default response for unmatched requests."""
        self._default_response = response
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        """Transport handler used by httpx.MockTransport."""
        path = request.url.path
        matched_pattern = None
        response = self._default_response

        for method, pattern, resp, _ in self._responses:
            if method != request.method:
                continue
            if isinstance(pattern, str):
                if pattern == path:
                    matched_pattern = pattern
                    response = resp
                    break
            elif pattern.fullmatch(path):
                matched_pattern = pattern.pattern
                response = resp
                break

        body = json.loads(request.content) if request.content else None
        self._call_history.append(
            ApiCall(
                method=request.method,
                path=path,
                params=list(request.url.params.multi_items()),
                body=body,
                headers=dict(request.headers),
                matched_pattern=matched_pattern,
                timeout=request.extensions.get("timeout"),
            )
        )
        return response.to_httpx(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def http_client(self) -> httpx.Client:
        return httpx.Client(base_url=self.BASE_URL, transport=self.transport)

    @property
    def calls(self) -> List[ApiCall]:
        """Get all requests made during the test."""
        return self._call_history

    @property
    def call_count(self) -> int:
        return len(self._call_history)

    @property
    def last_call(self) -> ApiCall:
        return self._call_history[-1]

    def was_called_with(self, method: str, path: str) -> bool:
        """Check if any request used the given method and path."""
        return any(c.method == method and c.path == path for c in self._call_history)

    def get_calls(self, method: str) -> List[ApiCall]:
        return [c for c in self._call_history if c.method == method]

    def reset(self):
        """Clear call history (but keep registered responses)."""
        self._call_history = []


@pytest.fixture
def api_server():
    """Fixture that provides an ApiServerMocker with default 404 responses."""
    return ApiServerMocker()


@pytest.fixture
def rest_client(api_server):
    """RESTClient routed through the mocked API server."""
    client = RESTClient(api_server.http_client())
    yield client
    client.close()


# =============================================================================
# Real Streaming Server
# =============================================================================

class StreamServer:
    """
    Local HTTP server streaming scripted watch frames over a real socket.

    Each script entry is (delay_seconds, frame). The handler waits the delay
    before writing the frame, so idle gaps behave like a quiet watch. The
    body is delimited by connection close.

    Usage:
        def test_watch(stream_server):
            stream_server.script = [(0, watch_frame("ADDED", obj))]
            client = httpx.Client(base_url=stream_server.url)
    """

    def __init__(self):
        self.script: List[Tuple[float, bytes]] = []
        self.paths: List[str] = []
        self.release = threading.Event()
        server = self

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                server.paths.append(self.path)
                self.send_response(200)
                self.send_header("Content-Type", "application/json")
                self.send_header("Connection", "close")
                self.end_headers()
                try:
                    self.wfile.flush()
                    for delay, frame in server.script:
                        if server.release.wait(delay):
                            return
                        self.wfile.write(frame)
                        self.wfile.flush()
                except OSError:
                    # Client went away
                    return

            def log_message(self, format, *args):
                pass

        self._httpd = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        self._httpd.daemon_threads = True
        self._thread = threading.Thread(target=self._httpd.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        host, port = self._httpd.server_address[:2]
        return f"http://{host}:{port}"

    def start(self) -> "StreamServer":
        self._thread.start()
        return self

    def stop(self):
        self.release.set()
        self._httpd.shutdown()
        self._httpd.server_close()


def watch_frame(event_type: str, obj: Dict[str, Any]) -> bytes:
    """One newline-terminated watch frame."""
    return (json.dumps({"type": event_type, "object": obj}) + "\n").encode("utf-8")


@pytest.fixture
def stream_server():
    """Running StreamServer, shut down after the test."""
    server = StreamServer().start()
    yield server
    server.stop()


# =============================================================================
# Printer Recording
# =============================================================================

class RecordingPrinter:
    """Printer collaborator that records every call."""

    def __init__(self):
        self.objects: List[Tuple[Any, Any, str]] = []
        self.successes: List[Tuple[Any, bool, str, str, str]] = []

    def print_object(self, obj, mapping, output_format):
        self.objects.append((obj, mapping, output_format))

    def print_success(self, mapping, dry_run, resource, name, verb):
        self.successes.append((mapping, dry_run, resource, name, verb))


@pytest.fixture
def recording_printer():
    return RecordingPrinter()


# =============================================================================
# Sample Data
# =============================================================================

@pytest.fixture
def docker_registry_params():
    """Complete parameter map for the docker-registry secret generator."""
    return {
        "name": "n",
        "docker-username": "u",
        "docker-password": "p",
        "docker-email": "e@x.com",
        "docker-server": "s",
    }

