"""
ElevenLabs Python Client - Music Resource

This module provides methods for composing music from a prompt or from a
structured composition plan.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Defaults, Endpoints
from elevenlabs_client.resources.base import BaseResource, ChunkHandler


class MusicResource(BaseResource):
    """
    Resource for music generation.

    Either a ``prompt`` or a ``composition_plan`` describes the piece.

    Example:
        >>> audio = client.music.compose(
        ...     prompt="Upbeat synthwave with a driving bassline",
        ...     music_length_ms=30000,
        ... )
    """

    def compose(
        self,
        prompt: Optional[str] = None,
        composition_plan: Optional[Dict[str, Any]] = None,
        music_length_ms: Optional[int] = None,
        model_id: str = Defaults.MUSIC_MODEL_ID,
        output_format: Optional[str] = None,
    ) -> bytes:
        """
        Compose a piece of music.

        Args:
            prompt: Text description of the music
            composition_plan: Detailed plan, as returned by ``create_plan``
            music_length_ms: Length of the piece in milliseconds
            model_id: Music model
            output_format: Audio output format, sent as a query parameter

        Returns:
            Audio bytes
        """
        return self._post_binary(
            Endpoints.MUSIC,
            json=self._music_body(prompt, composition_plan, music_length_ms, model_id),
            params=self._compact({"output_format": output_format}),
        )

    def compose_stream(
        self,
        prompt: Optional[str] = None,
        composition_plan: Optional[Dict[str, Any]] = None,
        music_length_ms: Optional[int] = None,
        model_id: str = Defaults.MUSIC_MODEL_ID,
        output_format: Optional[str] = None,
        on_chunk: Optional[ChunkHandler] = None,
    ) -> Optional[bytes]:
        """
        Compose music and stream the audio as it is generated.

        Returns:
            None when ``on_chunk`` is given, otherwise the full audio
        """
        return self._stream(
            "POST",
            Endpoints.MUSIC_STREAM,
            on_chunk,
            params=self._compact({"output_format": output_format}),
            json=self._music_body(prompt, composition_plan, music_length_ms, model_id),
        )

    def compose_detailed(
        self,
        prompt: Optional[str] = None,
        composition_plan: Optional[Dict[str, Any]] = None,
        music_length_ms: Optional[int] = None,
        model_id: str = Defaults.MUSIC_MODEL_ID,
        output_format: Optional[str] = None,
    ) -> bytes:
        """
        Compose music and return the audio together with its metadata.

        Returns:
            Raw multipart/mixed response body (JSON metadata part plus audio part)
        """
        return self._post_binary(
            Endpoints.MUSIC_DETAILED,
            json=self._music_body(prompt, composition_plan, music_length_ms, model_id),
            params=self._compact({"output_format": output_format}),
            headers={"Accept": "multipart/mixed"},
        )

    def create_plan(
        self,
        prompt: Optional[str] = None,
        music_length_ms: Optional[int] = None,
        source_composition_plan: Optional[Dict[str, Any]] = None,
        model_id: str = Defaults.MUSIC_MODEL_ID,
    ) -> Dict[str, Any]:
        """
        Create a composition plan from a prompt.

        Args:
            prompt: Text description of the music
            music_length_ms: Length of the piece in milliseconds
            source_composition_plan: Existing plan to refine
            model_id: Music model

        Returns:
            The composition plan
        """
        data = self._compact({
            "prompt": prompt,
            "music_length_ms": music_length_ms,
            "source_composition_plan": source_composition_plan,
            "model_id": model_id,
        })
        return self._post(Endpoints.MUSIC_PLAN, json=data)

    def _music_body(
        self,
        prompt: Optional[str],
        composition_plan: Optional[Dict[str, Any]],
        music_length_ms: Optional[int],
        model_id: str,
    ) -> Dict[str, Any]:
        return self._compact({
            "prompt": prompt,
            "composition_plan": composition_plan,
            "music_length_ms": music_length_ms,
            "model_id": model_id or Defaults.MUSIC_MODEL_ID,
        })
