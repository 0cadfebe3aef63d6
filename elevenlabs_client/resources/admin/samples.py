"""
ElevenLabs Python Client - Samples Resource
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class SamplesResource(BaseResource):
    """Resource for the audio samples attached to a voice."""

    def delete(self, voice_id: str, sample_id: str) -> Dict[str, Any]:
        """
        Delete a sample from a voice.

        Args:
            voice_id: The voice the sample belongs to
            sample_id: The sample's unique identifier
        """
        return self._delete(Endpoints.VOICE_SAMPLE.format(voice_id=voice_id, sample_id=sample_id))
