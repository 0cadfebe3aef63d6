"""Shared pytest fixtures for testing."""

import io
import json
from typing import Any, Dict, Iterator

import httpx
import pytest
import respx

from elevenlabs_client import ElevenLabs

BASE_URL = "https://api.elevenlabs.io"
API_KEY = "test-api-key"


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def client() -> Iterator[ElevenLabs]:
    """Create a client with a fixed API key."""
    with ElevenLabs(api_key=API_KEY) as c:
        yield c


@pytest.fixture
def api_mock() -> Iterator[respx.MockRouter]:
    """Mock the ElevenLabs API at the transport level."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials out of the tests."""
    monkeypatch.delenv("ELEVENLABS_API_KEY", raising=False)
    monkeypatch.delenv("ELEVENLABS_BASE_URL", raising=False)


# =============================================================================
# Test Data Fixtures
# =============================================================================


@pytest.fixture
def audio_bytes() -> bytes:
    """Sample audio payload (MP3 frame header followed by silence)."""
    return b"\xff\xfb\x90\x64" + bytes(256)


@pytest.fixture
def audio_file(audio_bytes: bytes) -> io.BytesIO:
    """File-like object holding sample audio."""
    return io.BytesIO(audio_bytes)


# =============================================================================
# Request Helpers
# =============================================================================


def last_request(route: respx.Route) -> httpx.Request:
    """Return the last request a route received."""
    assert route.called
    return route.calls.last.request


def json_body(request: httpx.Request) -> Dict[str, Any]:
    """Decode the JSON body of a captured request."""
    return json.loads(request.read())


def multipart_body(request: httpx.Request) -> bytes:
    """Return the raw multipart body of a captured request."""
    assert request.headers["content-type"].startswith("multipart/form-data")
    return request.read()


def has_field(body: bytes, name: str, value: str) -> bool:
    """Check a multipart body for a form field with the given value."""
    marker = f'; name="{name}"'.encode()
    if marker not in body:
        return False
    section = body.split(marker, 1)[1].split(b"--", 1)[0]
    return value.encode() in section
