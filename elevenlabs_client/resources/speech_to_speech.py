"""
ElevenLabs Python Client - Speech to Speech Resource

This module provides the voice changer: it re-voices recorded speech with
another voice while keeping timing and emotion.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, ChunkHandler


class SpeechToSpeechResource(BaseResource):
    """
    Resource for speech to speech conversion.

    Example:
        >>> with open("me.mp3", "rb") as f:
        ...     audio = client.speech_to_speech.convert(
        ...         "21m00Tcm4TlvDq8ikWAM", f, "me.mp3",
        ...         model_id="eleven_multilingual_sts_v2",
        ...     )
    """

    def convert(
        self,
        voice_id: str,
        audio_file: BinaryIO,
        filename: str,
        enable_logging: Optional[bool] = None,
        optimize_streaming_latency: Optional[int] = None,
        output_format: Optional[str] = None,
        model_id: Optional[str] = None,
        voice_settings: Optional[Any] = None,
        seed: Optional[int] = None,
        remove_background_noise: Optional[bool] = None,
        file_format: Optional[str] = None,
    ) -> bytes:
        """
        Convert speech into another voice.

        Args:
            voice_id: Target voice
            audio_file: Source audio file object
            filename: Name of the uploaded file
            enable_logging: Set to False for zero-retention mode
            optimize_streaming_latency: Latency optimization level (0-4)
            output_format: Audio output format
            model_id: Model to use
            voice_settings: Voice settings, as a dict or JSON string
            seed: Seed for deterministic sampling
            remove_background_noise: Strip background noise before conversion
            file_format: "pcm_s16le_16" or "other"

        Returns:
            Audio bytes
        """
        path = Endpoints.SPEECH_TO_SPEECH.format(voice_id=voice_id)
        return self._post_multipart(
            path,
            params=self._query(enable_logging, optimize_streaming_latency, output_format),
            data=self._fields(model_id, voice_settings, seed, remove_background_noise, file_format),
            files={"audio": self._file(audio_file, filename)},
            binary=True,
        )

    def convert_stream(
        self,
        voice_id: str,
        audio_file: BinaryIO,
        filename: str,
        on_chunk: Optional[ChunkHandler] = None,
        enable_logging: Optional[bool] = None,
        optimize_streaming_latency: Optional[int] = None,
        output_format: Optional[str] = None,
        model_id: Optional[str] = None,
        voice_settings: Optional[Any] = None,
        seed: Optional[int] = None,
        remove_background_noise: Optional[bool] = None,
        file_format: Optional[str] = None,
    ) -> Optional[bytes]:
        """
        Convert speech into another voice and stream the result.

        Takes the same options as ``convert`` plus ``on_chunk``.

        Returns:
            None when ``on_chunk`` is given, otherwise the full audio
        """
        path = Endpoints.SPEECH_TO_SPEECH_STREAM.format(voice_id=voice_id)
        return self._stream(
            "POST",
            path,
            on_chunk,
            params=self._query(enable_logging, optimize_streaming_latency, output_format),
            data=self._fields(model_id, voice_settings, seed, remove_background_noise, file_format),
            files={"audio": self._file(audio_file, filename)},
        )

    def _query(
        self,
        enable_logging: Optional[bool],
        optimize_streaming_latency: Optional[int],
        output_format: Optional[str],
    ) -> Dict[str, Any]:
        return self._compact({
            "enable_logging": enable_logging,
            "optimize_streaming_latency": optimize_streaming_latency,
            "output_format": output_format,
        })

    def _fields(
        self,
        model_id: Optional[str],
        voice_settings: Optional[Any],
        seed: Optional[int],
        remove_background_noise: Optional[bool],
        file_format: Optional[str],
    ) -> Dict[str, Any]:
        return self._form({
            "model_id": model_id,
            "voice_settings": voice_settings,
            "seed": seed,
            "remove_background_noise": remove_background_noise,
            "file_format": file_format,
        })
