"""
Pytest configuration and fixtures for toolgate tests.
"""

import asyncio
import base64
import io
import json
import sys
from pathlib import Path

import httpx
import pytest

# Add the repository root to path for imports
# This allows `from toolgate.tools import ...` to work
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from toolgate.config import AdapterName, load_settings  # noqa: E402
from toolgate.integrations.base import IntegrationConfig  # noqa: E402
from toolgate.transports import StdioTransport  # noqa: E402


class FakeBackend:
    """
    Scripted backing service for httpx.MockTransport.

    Routes are matched on (method, path); every request is recorded so
    tests can assert on what was (or was not) sent.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[tuple[int, dict]]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status_code: int = 200, **response_kwargs) -> None:
        """Queue a response; the last queued response for a route repeats."""
        self.routes.setdefault((method, path), []).append((status_code, response_kwargs))

    def add_json(self, method: str, path: str, payload, status_code: int = 200, headers=None) -> None:
        self.add(method, path, status_code, json=payload, headers=headers)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queued = self.routes.get((request.method, request.url.raw_path.decode().split("?")[0]))
        if not queued:
            return httpx.Response(404, json={"message": "Not Found"})
        status_code, response_kwargs = queued.pop(0) if len(queued) > 1 else queued[0]
        return httpx.Response(status_code, **response_kwargs)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def backend():
    """Scripted HTTP backend."""
    return FakeBackend()


@pytest.fixture
def integration_config():
    """Generic integration config pointing at a fake host."""
    return IntegrationConfig(access_token="test-token", base_url="https://api.example.test")


@pytest.fixture
def search_settings():
    return load_settings(AdapterName.SEARCH, {"BRAVE_API_KEY": "brave-test-key"})


@pytest.fixture
def github_settings():
    return load_settings(AdapterName.GITHUB, {"GITHUB_TOKEN": "ghp_test"})


@pytest.fixture
def gitlab_settings():
    return load_settings(
        AdapterName.GITLAB,
        {"GITLAB_TOKEN": "glpat-test", "GITLAB_URL": "https://gitlab.example.test"},
    )


@pytest.fixture
def b64():
    """Encode text the way the GitHub contents API does (with line breaks)."""

    def encode(text: str) -> str:
        raw = base64.b64encode(text.encode("utf-8")).decode("ascii")
        return "\n".join(raw[i : i + 60] for i in range(0, len(raw), 60)) + "\n"

    return encode


@pytest.fixture
def stdio_pair():
    """
    Build a StdioTransport over in-memory streams.

    Returns a factory taking the request frames (dicts or raw strings);
    the factory returns (transport_factory, output_buffer).
    """

    def build(*frames):
        output = io.StringIO()

        async def factory():
            reader = asyncio.StreamReader()
            for frame in frames:
                line = frame if isinstance(frame, str) else json.dumps(frame)
                reader.feed_data((line + "\n").encode("utf-8"))
            reader.feed_eof()
            return StdioTransport(reader, output)

        return factory, output

    return build


def read_frames(output: io.StringIO) -> list[dict]:
    """Decode every frame written to an output buffer."""
    return [json.loads(line) for line in output.getvalue().splitlines() if line.strip()]


@pytest.fixture
def frames():
    return read_frames
