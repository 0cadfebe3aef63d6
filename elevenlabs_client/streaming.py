"""
ElevenLabs Python Client - WebSocket Streaming

This module provides input streaming for text to speech: text is sent over
a WebSocket as it becomes available and audio comes back as it is generated.
"""

from __future__ import annotations

import base64
import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Dict, Iterable, Optional
from urllib.parse import urlencode

from websockets.asyncio.client import ClientConnection, connect as websocket_connect
from websockets.exceptions import ConnectionClosed, ConnectionClosedError, WebSocketException

from elevenlabs_client.config import DEFAULT_BASE_URL, Endpoints
from elevenlabs_client.exceptions import WebSocketError

logger = logging.getLogger("elevenlabs_client.streaming")


# Type alias for audio handlers: receives decoded audio and the raw message
AudioHandler = Callable[[bytes, Dict[str, Any]], None]


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class _Session:
    """Shared send/receive plumbing of the stream-input sessions."""

    def __init__(self, websocket: ClientConnection, api_key: str) -> None:
        self._websocket = websocket
        self._api_key = api_key

    @property
    def websocket(self) -> ClientConnection:
        return self._websocket

    async def send(self, message: Dict[str, Any]) -> None:
        """
        Send a JSON message.

        Raises:
            WebSocketError: If the connection is closed
        """
        try:
            await self._websocket.send(json.dumps(message))
        except ConnectionClosed as e:
            raise WebSocketError(f"Connection closed: {e}", close_code=_close_code(e)) from e
        logger.debug(f"Sent message: {sorted(message)}")

    async def receive(self) -> AsyncIterator[Dict[str, Any]]:
        """
        Iterate over decoded messages until the server closes the socket.

        Messages that are not JSON objects are skipped.

        Raises:
            WebSocketError: If the connection closes abnormally
        """
        try:
            async for message in self._websocket:
                try:
                    data = json.loads(message)
                except ValueError:
                    logger.warning(f"Skipping non-JSON message ({len(message)} bytes)")
                    continue
                if not isinstance(data, dict):
                    logger.warning(f"Skipping non-object message: {type(data).__name__}")
                    continue
                yield data
        except ConnectionClosedError as e:
            logger.error(f"WebSocket closed with error: {e}")
            raise WebSocketError(f"Connection closed: {e}", close_code=_close_code(e)) from e


def _close_code(error: ConnectionClosed) -> Optional[int]:
    return error.rcvd.code if error.rcvd is not None else None


class StreamInputSession(_Session):
    """
    A single-context text to speech stream.

    Example:
        >>> async with client.websocket().connect("voice_id") as session:
        ...     await session.initialize()
        ...     await session.send_text("Hello there. ")
        ...     await session.send_text("How are you?", try_trigger_generation=True)
        ...     await session.close()
        ...     async for message in session.receive():
        ...         if message.get("audio"):
        ...             play(base64.b64decode(message["audio"]))
    """

    async def initialize(
        self,
        text: str = " ",
        voice_settings: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Open the stream. Must be the first message sent.

        Args:
            text: Initial text; a single space by convention
            voice_settings: Voice settings for the whole stream
        """
        await self.send({
            "text": text,
            "voice_settings": voice_settings or {},
            "xi_api_key": self._api_key,
        })

    async def send_text(
        self,
        text: str,
        try_trigger_generation: Optional[bool] = None,
        voice_settings: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Send a chunk of text.

        Args:
            text: Text to append; should end with a space
            try_trigger_generation: Ask the server to start generating now
            voice_settings: Voice settings for this chunk
        """
        message: Dict[str, Any] = {"text": text}
        if try_trigger_generation is not None:
            message["try_trigger_generation"] = try_trigger_generation
        if voice_settings:
            message["voice_settings"] = voice_settings
        await self.send(message)

    async def close(self) -> None:
        """Signal the end of input. The server flushes remaining audio and closes."""
        await self.send({"text": ""})


class MultiStreamInputSession(_Session):
    """
    A multi-context text to speech stream.

    Each context is an independent generation identified by ``context_id``,
    sharing one socket.
    """

    async def initialize(
        self,
        context_id: str,
        text: str = " ",
        voice_settings: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Open the socket with its first context."""
        await self.send({
            "text": text,
            "voice_settings": voice_settings or {},
            "context_id": context_id,
        })

    async def initialize_context(
        self,
        context_id: str,
        voice_settings: Optional[Dict[str, Any]] = None,
        model_id: Optional[str] = None,
        language_code: Optional[str] = None,
    ) -> None:
        """Open an additional context."""
        message: Dict[str, Any] = {
            "context_id": context_id,
            "voice_settings": voice_settings or {},
        }
        if model_id:
            message["model_id"] = model_id
        if language_code:
            message["language_code"] = language_code
        await self.send(message)

    async def send_text(self, context_id: str, text: str, flush: Optional[bool] = None) -> None:
        """Send text to a context, optionally flushing it."""
        message: Dict[str, Any] = {"text": text, "context_id": context_id}
        if flush is not None:
            message["flush"] = flush
        await self.send(message)

    async def flush_context(self, context_id: str) -> None:
        """Generate audio for everything buffered in a context."""
        await self.send({"context_id": context_id, "flush": True})

    async def close_context(self, context_id: str) -> None:
        """Close one context."""
        await self.send({"context_id": context_id, "close_context": True})

    async def keep_context_alive(self, context_id: str) -> None:
        """Reset the inactivity timeout of a context."""
        await self.send({"context_id": context_id, "keep_context_alive": True})

    async def close_socket(self) -> None:
        """Close every context and the socket."""
        await self.send({"close_socket": True})


class TextToSpeechWebSocket:
    """
    WebSocket helper for input-streaming text to speech.

    Usually obtained with ``client.websocket()``.

    Args:
        api_key: ElevenLabs API key
        base_url: HTTP base URL of the API; converted to ws:// or wss://
    """

    QUERY_OPTIONS = (
        "model_id",
        "language_code",
        "enable_logging",
        "enable_ssml_parsing",
        "output_format",
        "inactivity_timeout",
        "sync_alignment",
        "auto_mode",
        "apply_text_normalization",
        "seed",
    )

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/").replace("https://", "wss://", 1).replace("http://", "ws://", 1)

    @property
    def base_url(self) -> str:
        return self._base_url

    def stream_input_url(self, voice_id: str, **options: Any) -> str:
        """Build the URL of a single-context stream."""
        return self._url(Endpoints.TEXT_TO_SPEECH_STREAM_INPUT.format(voice_id=voice_id), options)

    def multi_stream_input_url(self, voice_id: str, **options: Any) -> str:
        """Build the URL of a multi-context stream."""
        return self._url(Endpoints.TEXT_TO_SPEECH_MULTI_STREAM_INPUT.format(voice_id=voice_id), options)

    def _url(self, path: str, options: Dict[str, Any]) -> str:
        unknown = set(options) - set(self.QUERY_OPTIONS)
        if unknown:
            raise TypeError(f"Unexpected options: {', '.join(sorted(unknown))}")

        query = [
            (key, _query_value(options[key]))
            for key in self.QUERY_OPTIONS
            if options.get(key) is not None
        ]
        url = f"{self._base_url}{path}"
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    async def _open(self, url: str) -> ClientConnection:
        try:
            websocket = await websocket_connect(url, additional_headers={"xi-api-key": self._api_key})
        except (OSError, WebSocketException) as e:
            logger.error(f"WebSocket connection failed: {e}")
            raise WebSocketError(f"Failed to connect: {e}") from e
        logger.info(f"Connected to WebSocket: {url.split('?')[0]}")
        return websocket

    @asynccontextmanager
    async def connect(self, voice_id: str, **options: Any) -> AsyncIterator[StreamInputSession]:
        """
        Open a single-context stream.

        Args:
            voice_id: Voice to synthesize with
            **options: Query options (model_id, output_format, auto_mode, ...)

        Yields:
            StreamInputSession bound to the open socket
        """
        websocket = await self._open(self.stream_input_url(voice_id, **options))
        try:
            yield StreamInputSession(websocket, self._api_key)
        finally:
            await websocket.close()
            logger.info("Disconnected from WebSocket")

    @asynccontextmanager
    async def connect_multi(self, voice_id: str, **options: Any) -> AsyncIterator[MultiStreamInputSession]:
        """
        Open a multi-context stream.

        Yields:
            MultiStreamInputSession bound to the open socket
        """
        websocket = await self._open(self.multi_stream_input_url(voice_id, **options))
        try:
            yield MultiStreamInputSession(websocket, self._api_key)
        finally:
            await websocket.close()
            logger.info("Disconnected from WebSocket")

    async def stream(
        self,
        voice_id: str,
        text_chunks: Iterable[str],
        on_audio: AudioHandler,
        voice_settings: Optional[Dict[str, Any]] = None,
        **options: Any,
    ) -> None:
        """
        Synthesize a sequence of text chunks over one stream.

        Sends initialize, every chunk (the last one triggers generation) and
        the end-of-input marker, then hands each audio message to ``on_audio``
        until the server closes the stream.

        Args:
            voice_id: Voice to synthesize with
            text_chunks: Text to speak, in order
            on_audio: Called with the decoded audio and the full message
            voice_settings: Voice settings for the stream
            **options: Query options (model_id, output_format, ...)

        Example:
            >>> chunks = []
            >>> await client.websocket().stream(
            ...     "voice_id", ["Hello ", "world. "], lambda audio, msg: chunks.append(audio)
            ... )
        """
        chunks = list(text_chunks)

        async with self.connect(voice_id, **options) as session:
            await session.initialize(voice_settings=voice_settings)
            for index, chunk in enumerate(chunks):
                await session.send_text(chunk, try_trigger_generation=index == len(chunks) - 1)
            await session.close()

            async for message in session.receive():
                if message.get("audio"):
                    on_audio(base64.b64decode(message["audio"]), message)
                if message.get("isFinal"):
                    break
