"""
ElevenLabs Python Client - Text to Dialogue Resource

This module provides methods for generating multi-voice dialogue.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Defaults, Endpoints
from elevenlabs_client.resources.base import BaseResource, ChunkHandler


class TextToDialogueResource(BaseResource):
    """
    Resource for turning a list of speaker turns into one audio track.

    Example:
        >>> audio = client.text_to_dialogue.convert([
        ...     {"text": "Hi there!", "voice_id": "voice_a"},
        ...     {"text": "Hello, how are you?", "voice_id": "voice_b"},
        ... ])
    """

    def convert(
        self,
        inputs: List[Dict[str, Any]],
        model_id: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
        seed: Optional[int] = None,
    ) -> bytes:
        """
        Generate dialogue audio.

        Args:
            inputs: List of ``{"text": ..., "voice_id": ...}`` turns
            model_id: Model to use
            settings: Generation settings; omitted when empty
            seed: Seed for deterministic sampling

        Returns:
            Audio bytes
        """
        data: Dict[str, Any] = {"inputs": inputs}

        if model_id is not None:
            data["model_id"] = model_id
        if settings:
            data["settings"] = settings
        if seed is not None:
            data["seed"] = seed

        return self._post_binary(Endpoints.TEXT_TO_DIALOGUE, json=data)

    def stream(
        self,
        inputs: List[Dict[str, Any]],
        on_chunk: Optional[ChunkHandler] = None,
        output_format: str = Defaults.OUTPUT_FORMAT,
        model_id: Optional[str] = None,
        language_code: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
        pronunciation_dictionary_locators: Optional[List[Dict[str, Any]]] = None,
        seed: Optional[int] = None,
        apply_text_normalization: Optional[str] = None,
    ) -> Optional[bytes]:
        """
        Stream dialogue audio as it is generated.

        Args:
            inputs: List of ``{"text": ..., "voice_id": ...}`` turns
            on_chunk: Called with each audio chunk
            output_format: Audio output format
            model_id: Model to use
            language_code: ISO 639-1 language code to enforce
            settings: Generation settings
            pronunciation_dictionary_locators: Dictionaries to apply
            seed: Seed for deterministic sampling
            apply_text_normalization: "auto", "on" or "off"

        Returns:
            None when ``on_chunk`` is given, otherwise the full audio
        """
        data: Dict[str, Any] = {"inputs": inputs}
        data.update(self._compact({
            "model_id": model_id,
            "language_code": language_code,
            "settings": settings,
            "pronunciation_dictionary_locators": pronunciation_dictionary_locators,
            "seed": seed,
            "apply_text_normalization": apply_text_normalization,
        }))

        return self._stream(
            "POST",
            Endpoints.TEXT_TO_DIALOGUE_STREAM,
            on_chunk,
            params={"output_format": output_format},
            json=data,
        )
