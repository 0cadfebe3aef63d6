"""
Unit Tests for WebSocket Text to Speech Streaming

The websocket connection is replaced with an in-memory fake so the
session protocol can be checked without a server.
"""

import base64
import json
from typing import Any, Dict, List, Optional

import pytest
from websockets.exceptions import ConnectionClosedError, ConnectionClosedOK
from websockets.frames import Close

from elevenlabs_client import WebSocketError
from elevenlabs_client import streaming
from elevenlabs_client.streaming import (
    MultiStreamInputSession,
    StreamInputSession,
    TextToSpeechWebSocket,
)


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode()


class FakeWebSocket:
    """In-memory stand-in for a websockets client connection."""

    def __init__(self, incoming: Optional[List[Any]] = None, error: Optional[Exception] = None):
        self.incoming = [m if isinstance(m, str) else json.dumps(m) for m in incoming or []]
        self.error = error
        self.sent: List[Dict[str, Any]] = []
        self.closed = False
        self.send_error: Optional[Exception] = None

    async def send(self, message: str) -> None:
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(json.loads(message))

    async def close(self) -> None:
        self.closed = True

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for message in self.incoming:
            yield message
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_connect(monkeypatch):
    """Replace websocket_connect and record how it was called."""
    calls: Dict[str, Any] = {}

    def install(websocket: FakeWebSocket) -> Dict[str, Any]:
        async def connect(url, additional_headers=None):
            calls["url"] = url
            calls["headers"] = additional_headers
            return websocket

        monkeypatch.setattr(streaming, "websocket_connect", connect)
        return calls

    return install


@pytest.fixture
def ws() -> TextToSpeechWebSocket:
    """WebSocket helper bound to a test key."""
    return TextToSpeechWebSocket(api_key="test-api-key")


# =============================================================================
# URL Building Tests
# =============================================================================


class TestURLs:
    """Tests for websocket URL construction."""

    def test_https_becomes_wss(self, ws):
        """Test the secure scheme conversion."""
        assert ws.stream_input_url("v1") == "wss://api.elevenlabs.io/v1/text-to-speech/v1/stream-input"

    def test_http_becomes_ws(self):
        """Test the plain scheme conversion."""
        ws = TextToSpeechWebSocket(api_key="k", base_url="http://localhost:8080/")

        assert ws.multi_stream_input_url("v1") == "ws://localhost:8080/v1/text-to-speech/v1/multi-stream-input"

    def test_query_options(self, ws):
        """Test that options are encoded in a stable order."""
        url = ws.stream_input_url(
            "v1", auto_mode=True, model_id="eleven_flash_v2_5", inactivity_timeout=60, language_code=None
        )

        assert url == (
            "wss://api.elevenlabs.io/v1/text-to-speech/v1/stream-input"
            "?model_id=eleven_flash_v2_5&inactivity_timeout=60&auto_mode=true"
        )

    def test_false_is_lower_case(self, ws):
        """Test boolean encoding."""
        assert ws.multi_stream_input_url("v1", enable_logging=False).endswith("?enable_logging=false")

    def test_unknown_option(self, ws):
        """Test that unknown options are rejected."""
        with pytest.raises(TypeError, match="stability"):
            ws.stream_input_url("v1", stability=0.5)


# =============================================================================
# Single-Context Session Tests
# =============================================================================


class TestStreamInputSession:
    """Tests for StreamInputSession."""

    @pytest.mark.asyncio
    async def test_connect_sends_key_header(self, ws, fake_connect):
        """Test that connecting authenticates and closes on exit."""
        socket = FakeWebSocket()
        calls = fake_connect(socket)

        async with ws.connect("v1", model_id="eleven_flash_v2_5") as session:
            assert isinstance(session, StreamInputSession)
            assert not socket.closed

        assert socket.closed
        assert calls["headers"] == {"xi-api-key": "test-api-key"}
        assert calls["url"].endswith("/v1/text-to-speech/v1/stream-input?model_id=eleven_flash_v2_5")

    @pytest.mark.asyncio
    async def test_messages(self, ws, fake_connect):
        """Test the initialize, text and close messages."""
        socket = FakeWebSocket()
        fake_connect(socket)

        async with ws.connect("v1") as session:
            await session.initialize(voice_settings={"stability": 0.5})
            await session.send_text("Hello there. ")
            await session.send_text("Bye.", try_trigger_generation=True, voice_settings={"speed": 1.1})
            await session.close()

        assert socket.sent == [
            {"text": " ", "voice_settings": {"stability": 0.5}, "xi_api_key": "test-api-key"},
            {"text": "Hello there. "},
            {"text": "Bye.", "try_trigger_generation": True, "voice_settings": {"speed": 1.1}},
            {"text": ""},
        ]

    @pytest.mark.asyncio
    async def test_receive_skips_non_json(self, ws, fake_connect):
        """Test that undecodable messages are skipped."""
        socket = FakeWebSocket([{"audio": b64(b"abc")}, "not json", {"isFinal": True}])
        fake_connect(socket)

        async with ws.connect("v1") as session:
            messages = [message async for message in session.receive()]

        assert messages == [{"audio": b64(b"abc")}, {"isFinal": True}]

    @pytest.mark.asyncio
    async def test_receive_skips_non_objects(self, ws, fake_connect):
        """Test that JSON arrays and scalars are skipped."""
        socket = FakeWebSocket([[1, 2], 42, '"x"', {"audio": b64(b"abc")}])
        fake_connect(socket)

        async with ws.connect("v1") as session:
            messages = [message async for message in session.receive()]

        assert messages == [{"audio": b64(b"abc")}]

    @pytest.mark.asyncio
    async def test_receive_abnormal_close(self, ws, fake_connect):
        """Test that an abnormal close raises WebSocketError with its code."""
        error = ConnectionClosedError(Close(1008, "Invalid API key"), None)
        socket = FakeWebSocket([{"audio": b64(b"abc")}], error=error)
        fake_connect(socket)

        received = []
        with pytest.raises(WebSocketError) as exc_info:
            async with ws.connect("v1") as session:
                async for message in session.receive():
                    received.append(message)

        assert received == [{"audio": b64(b"abc")}]
        assert exc_info.value.close_code == 1008
        assert "Close code: 1008" in str(exc_info.value)
        assert socket.closed

    @pytest.mark.asyncio
    async def test_send_after_close(self, ws, fake_connect):
        """Test that sending on a closed socket raises WebSocketError."""
        socket = FakeWebSocket()
        socket.send_error = ConnectionClosedOK(Close(1000, ""), Close(1000, ""), True)
        fake_connect(socket)

        with pytest.raises(WebSocketError) as exc_info:
            async with ws.connect("v1") as session:
                await session.send_text("Hello ")

        assert exc_info.value.close_code == 1000

    @pytest.mark.asyncio
    async def test_connect_failure(self, ws, monkeypatch):
        """Test that connection failures raise WebSocketError."""
        async def refuse(url, additional_headers=None):
            raise OSError("Connection refused")

        monkeypatch.setattr(streaming, "websocket_connect", refuse)

        with pytest.raises(WebSocketError, match="Failed to connect"):
            async with ws.connect("v1"):
                pass


# =============================================================================
# Multi-Context Session Tests
# =============================================================================


class TestMultiStreamInputSession:
    """Tests for MultiStreamInputSession."""

    @pytest.mark.asyncio
    async def test_context_messages(self, ws, fake_connect):
        """Test the messages of every context operation."""
        socket = FakeWebSocket()
        calls = fake_connect(socket)

        async with ws.connect_multi("v1", output_format="pcm_16000") as session:
            assert isinstance(session, MultiStreamInputSession)
            await session.initialize("ctx1")
            await session.initialize_context("ctx2", model_id="eleven_flash_v2_5")
            await session.send_text("ctx1", "Hello ", flush=True)
            await session.send_text("ctx2", "Hi ")
            await session.flush_context("ctx2")
            await session.keep_context_alive("ctx1")
            await session.close_context("ctx1")
            await session.close_socket()

        assert "multi-stream-input?output_format=pcm_16000" in calls["url"]
        assert socket.sent == [
            {"text": " ", "voice_settings": {}, "context_id": "ctx1"},
            {"context_id": "ctx2", "voice_settings": {}, "model_id": "eleven_flash_v2_5"},
            {"text": "Hello ", "context_id": "ctx1", "flush": True},
            {"text": "Hi ", "context_id": "ctx2"},
            {"context_id": "ctx2", "flush": True},
            {"context_id": "ctx1", "keep_context_alive": True},
            {"context_id": "ctx1", "close_context": True},
            {"close_socket": True},
        ]


# =============================================================================
# One-Shot Streaming Tests
# =============================================================================


class TestStream:
    """Tests for TextToSpeechWebSocket.stream."""

    @pytest.mark.asyncio
    async def test_stream(self, ws, fake_connect):
        """Test streaming text chunks and collecting audio."""
        socket = FakeWebSocket([
            {"audio": b64(b"abc"), "isFinal": False},
            {"audio": None, "alignment": None},
            {"audio": b64(b"def")},
            {"isFinal": True},
            {"audio": b64(b"late")},
        ])
        calls = fake_connect(socket)
        audio = []

        await ws.stream(
            "v1",
            iter(["Hello ", "world. "]),
            lambda data, message: audio.append(data),
            voice_settings={"stability": 0.4},
            auto_mode=True,
        )

        assert audio == [b"abc", b"def"]
        assert calls["url"].endswith("?auto_mode=true")
        assert socket.sent == [
            {"text": " ", "voice_settings": {"stability": 0.4}, "xi_api_key": "test-api-key"},
            {"text": "Hello ", "try_trigger_generation": False},
            {"text": "world. ", "try_trigger_generation": True},
            {"text": ""},
        ]
        assert socket.closed

    @pytest.mark.asyncio
    async def test_stream_ignores_non_object_messages(self, ws, fake_connect):
        """Test that a JSON array from the server does not break the stream."""
        socket = FakeWebSocket([["unexpected"], {"audio": b64(b"abc")}, {"isFinal": True}])
        fake_connect(socket)
        audio = []

        await ws.stream("v1", ["Hi. "], lambda data, message: audio.append(data))

        assert audio == [b"abc"]
