"""
ElevenLabs Python Client - Audio Isolation Resource
"""

from __future__ import annotations

from typing import BinaryIO, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, ChunkHandler


class AudioIsolationResource(BaseResource):
    """
    Resource for removing background noise from audio.

    Example:
        >>> with open("noisy.mp3", "rb") as f:
        ...     clean = client.audio_isolation.isolate(f, "noisy.mp3")
    """

    def isolate(
        self,
        audio_file: BinaryIO,
        filename: str,
        file_format: Optional[str] = None,
    ) -> bytes:
        """
        Isolate speech from background noise.

        Args:
            audio_file: Audio file object
            filename: Name of the uploaded file
            file_format: "pcm_s16le_16" or "other"

        Returns:
            Audio bytes
        """
        return self._post_multipart(
            Endpoints.AUDIO_ISOLATION,
            data=self._form({"file_format": file_format}),
            files={"audio": self._file(audio_file, filename)},
            binary=True,
        )

    def isolate_stream(
        self,
        audio_file: BinaryIO,
        filename: str,
        on_chunk: Optional[ChunkHandler] = None,
        file_format: Optional[str] = None,
    ) -> Optional[bytes]:
        """
        Isolate speech and stream the cleaned audio back.

        Args:
            audio_file: Audio file object
            filename: Name of the uploaded file
            on_chunk: Called with each audio chunk
            file_format: "pcm_s16le_16" or "other"

        Returns:
            None when ``on_chunk`` is given, otherwise the full audio
        """
        return self._stream(
            "POST",
            Endpoints.AUDIO_ISOLATION_STREAM,
            on_chunk,
            data=self._form({"file_format": file_format}),
            files={"audio": self._file(audio_file, filename)},
        )
