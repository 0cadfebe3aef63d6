"""
ElevenLabs Python Client - Text to Voice Resource

This module provides methods for designing new voices from a text
description and saving the preview the caller liked.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource, ChunkHandler


class TextToVoiceResource(BaseResource):
    """
    Resource for voice design.

    Example:
        >>> previews = client.text_to_voice.design(
        ...     "A warm, elderly storyteller with a slight Irish accent",
        ...     auto_generate_text=True,
        ... )
        >>> generated_id = previews["previews"][0]["generated_voice_id"]
        >>> voice = client.text_to_voice.create("Storyteller", "Warm narrator", generated_id)
    """

    def design(
        self,
        voice_description: str,
        output_format: Optional[str] = None,
        model_id: Optional[str] = None,
        text: Optional[str] = None,
        auto_generate_text: Optional[bool] = None,
        loudness: Optional[float] = None,
        seed: Optional[int] = None,
        guidance_scale: Optional[float] = None,
        stream_previews: Optional[bool] = None,
        remixing_session_id: Optional[str] = None,
        remixing_session_iteration_id: Optional[str] = None,
        quality: Optional[float] = None,
        reference_audio_base64: Optional[str] = None,
        prompt_strength: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Generate voice previews from a description.

        Args:
            voice_description: Description of the voice (20-1000 characters)
            output_format: Audio format of the previews
            model_id: Voice design model
            text: Text the previews should speak
            auto_generate_text: Let the API write the preview text
            loudness: Loudness of the previews (-1 to 1)
            seed: Seed for deterministic sampling
            guidance_scale: How closely to follow the description
            stream_previews: Return generated IDs only and stream audio separately
            remixing_session_id: Remixing session to continue
            remixing_session_iteration_id: Iteration within the remixing session
            quality: Quality vs. variety trade-off
            reference_audio_base64: Reference audio for remixing
            prompt_strength: Weight of the prompt against the reference audio

        Returns:
            Dict with ``previews`` and the preview ``text``
        """
        data: Dict[str, Any] = {"voice_description": voice_description}
        data.update(self._compact({
            "output_format": output_format,
            "model_id": model_id,
            "text": text,
            "auto_generate_text": auto_generate_text,
            "loudness": loudness,
            "seed": seed,
            "guidance_scale": guidance_scale,
            "stream_previews": stream_previews,
            "remixing_session_id": remixing_session_id,
            "remixing_session_iteration_id": remixing_session_iteration_id,
            "quality": quality,
            "reference_audio_base64": reference_audio_base64,
            "prompt_strength": prompt_strength,
        }))
        return self._post(Endpoints.TEXT_TO_VOICE_DESIGN, json=data)

    def create(
        self,
        voice_name: str,
        voice_description: str,
        generated_voice_id: str,
        labels: Optional[Dict[str, str]] = None,
        played_not_selected_voice_ids: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """
        Save a generated preview as a voice.

        Args:
            voice_name: Name of the new voice
            voice_description: Description of the new voice
            generated_voice_id: ID of the chosen preview
            labels: Labels to attach
            played_not_selected_voice_ids: Previews that were heard but not chosen

        Returns:
            The created voice
        """
        data: Dict[str, Any] = {
            "voice_name": voice_name,
            "voice_description": voice_description,
            "generated_voice_id": generated_voice_id,
        }

        if labels:
            data["labels"] = labels
        if played_not_selected_voice_ids:
            data["played_not_selected_voice_ids"] = played_not_selected_voice_ids

        return self._post(Endpoints.TEXT_TO_VOICE, json=data)

    def stream_preview(
        self,
        generated_voice_id: str,
        on_chunk: Optional[ChunkHandler] = None,
    ) -> Optional[bytes]:
        """
        Stream the audio of a generated preview.

        Returns:
            None when ``on_chunk`` is given, otherwise the full audio
        """
        path = Endpoints.TEXT_TO_VOICE_STREAM.format(generated_voice_id=generated_voice_id)
        return self._stream("GET", path, on_chunk)

    def list_voices(self) -> Dict[str, Any]:
        """List the voices available to the account."""
        return self._get(Endpoints.VOICES)
