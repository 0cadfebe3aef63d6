"""
ElevenLabs Python Client - Text to Speech Resource

This module provides methods for turning text into speech, in one shot or
streamed as it is generated.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Defaults, Endpoints
from elevenlabs_client.resources.base import BaseResource, ChunkHandler, EventHandler


class TextToSpeechResource(BaseResource):
    """
    Resource for text to speech conversion.

    Example:
        >>> client = ElevenLabs(api_key="...")
        >>> audio = client.text_to_speech.convert(
        ...     "21m00Tcm4TlvDq8ikWAM",
        ...     "Hello from the other side",
        ...     model_id="eleven_multilingual_v2",
        ... )
    """

    def convert(
        self,
        voice_id: str,
        text: str,
        model_id: Optional[str] = None,
        voice_settings: Optional[Dict[str, Any]] = None,
        optimize_streaming: bool = False,
    ) -> bytes:
        """
        Convert text to speech.

        Args:
            voice_id: ID of the voice to use
            text: Text to convert
            model_id: Model to use for synthesis
            voice_settings: Voice settings overrides (stability, similarity_boost, ...)
            optimize_streaming: Request chunked MPEG audio

        Returns:
            Audio bytes
        """
        path = Endpoints.TEXT_TO_SPEECH.format(voice_id=voice_id)
        data: Dict[str, Any] = {"text": text}

        if model_id is not None:
            data["model_id"] = model_id
        if voice_settings:
            data["voice_settings"] = voice_settings

        if not optimize_streaming:
            return self._post_binary(path, json=data)

        # An iterator body makes httpx send Transfer-Encoding: chunked without Content-Length
        return self._post_binary(
            path,
            content=iter([json.dumps(data).encode("utf-8")]),
            headers={
                "Accept": Defaults.STREAM_ACCEPT,
                "Content-Type": "application/json",
            },
        )

    def convert_with_timestamps(
        self,
        voice_id: str,
        text: str,
        enable_logging: Optional[bool] = None,
        optimize_streaming_latency: Optional[int] = None,
        output_format: Optional[str] = None,
        model_id: Optional[str] = None,
        language_code: Optional[str] = None,
        voice_settings: Optional[Dict[str, Any]] = None,
        pronunciation_dictionary_locators: Optional[List[Dict[str, Any]]] = None,
        seed: Optional[int] = None,
        previous_text: Optional[str] = None,
        next_text: Optional[str] = None,
        previous_request_ids: Optional[List[str]] = None,
        next_request_ids: Optional[List[str]] = None,
        apply_text_normalization: Optional[str] = None,
        apply_language_text_normalization: Optional[bool] = None,
        use_pvc_as_ivc: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Convert text to speech and return character-level timing.

        Args:
            voice_id: ID of the voice to use
            text: Text to convert
            enable_logging: Set to False for zero-retention mode
            optimize_streaming_latency: Latency optimization level (0-4)
            output_format: Audio output format, e.g. "mp3_44100_128"
            model_id: Model to use for synthesis
            language_code: ISO 639-1 language code to enforce
            voice_settings: Voice settings overrides
            pronunciation_dictionary_locators: Dictionaries to apply
            seed: Seed for deterministic sampling
            previous_text: Text that came before this request
            next_text: Text that comes after this request
            previous_request_ids: IDs of preceding generations
            next_request_ids: IDs of following generations
            apply_text_normalization: "auto", "on" or "off"
            apply_language_text_normalization: Language-specific normalization
            use_pvc_as_ivc: Use the IVC version of a professional voice

        Returns:
            Dict with ``audio_base64``, ``alignment`` and ``normalized_alignment``
        """
        path = Endpoints.TEXT_TO_SPEECH_WITH_TIMESTAMPS.format(voice_id=voice_id)
        params = self._compact({
            "enable_logging": enable_logging,
            "optimize_streaming_latency": optimize_streaming_latency,
            "output_format": output_format,
        })
        data = self._timestamps_body(
            text,
            model_id=model_id,
            language_code=language_code,
            voice_settings=voice_settings,
            pronunciation_dictionary_locators=pronunciation_dictionary_locators,
            seed=seed,
            previous_text=previous_text,
            next_text=next_text,
            previous_request_ids=previous_request_ids,
            next_request_ids=next_request_ids,
            apply_text_normalization=apply_text_normalization,
            apply_language_text_normalization=apply_language_text_normalization,
            use_pvc_as_ivc=use_pvc_as_ivc,
        )
        return self._post(path, json=data, params=params)

    def stream(
        self,
        voice_id: str,
        text: str,
        on_chunk: Optional[ChunkHandler] = None,
        model_id: str = Defaults.TTS_MODEL_ID,
        output_format: str = Defaults.OUTPUT_FORMAT,
        voice_settings: Optional[Dict[str, Any]] = None,
    ) -> Optional[bytes]:
        """
        Stream speech as it is generated.

        Args:
            voice_id: ID of the voice to use
            text: Text to convert
            on_chunk: Called with each audio chunk as it arrives
            model_id: Model to use for synthesis
            output_format: Audio output format
            voice_settings: Voice settings overrides

        Returns:
            None when ``on_chunk`` is given, otherwise the full audio

        Example:
            >>> with open("out.mp3", "wb") as f:
            ...     client.text_to_speech.stream("voice_id", "Hello", on_chunk=f.write)
        """
        path = Endpoints.TEXT_TO_SPEECH_STREAM.format(voice_id=voice_id)
        data: Dict[str, Any] = {"text": text, "model_id": model_id}

        if voice_settings:
            data["voice_settings"] = voice_settings

        return self._stream(
            "POST",
            path,
            on_chunk,
            params={"output_format": output_format},
            json=data,
            headers={"Accept": Defaults.STREAM_ACCEPT},
        )

    def stream_with_timestamps(
        self,
        voice_id: str,
        text: str,
        on_event: Optional[EventHandler] = None,
        enable_logging: Optional[bool] = None,
        optimize_streaming_latency: Optional[int] = None,
        output_format: Optional[str] = None,
        **options: Any,
    ) -> Optional[List[Dict[str, Any]]]:
        """
        Stream speech with timing information.

        The response is newline-delimited JSON. Each event carries a base64
        audio chunk plus its alignment.

        Args:
            voice_id: ID of the voice to use
            text: Text to convert
            on_event: Called with each decoded event
            enable_logging: Set to False for zero-retention mode
            optimize_streaming_latency: Latency optimization level (0-4)
            output_format: Audio output format
            **options: Same body options as ``convert_with_timestamps``

        Returns:
            None when ``on_event`` is given, otherwise the list of events
        """
        path = Endpoints.TEXT_TO_SPEECH_STREAM_WITH_TIMESTAMPS.format(voice_id=voice_id)
        params = self._compact({
            "enable_logging": enable_logging,
            "optimize_streaming_latency": optimize_streaming_latency,
            "output_format": output_format,
        })
        data = self._timestamps_body(text, **options)
        return self._stream_json_lines("POST", path, on_event, params=params, json=data)

    _TIMESTAMP_OPTIONS = (
        "model_id",
        "language_code",
        "voice_settings",
        "pronunciation_dictionary_locators",
        "seed",
        "previous_text",
        "next_text",
        "previous_request_ids",
        "next_request_ids",
        "apply_text_normalization",
        "apply_language_text_normalization",
        "use_pvc_as_ivc",
    )

    def _timestamps_body(self, text: str, **options: Any) -> Dict[str, Any]:
        unknown = set(options) - set(self._TIMESTAMP_OPTIONS)
        if unknown:
            raise TypeError(f"Unexpected options: {', '.join(sorted(unknown))}")

        data: Dict[str, Any] = {"text": text}
        data.update(self._compact(options))
        return data
