"""
ElevenLabs Python Client - Sound Generation Resource
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class SoundGenerationResource(BaseResource):
    """Resource for generating sound effects from a text prompt."""

    def generate(
        self,
        text: str,
        loop: Optional[bool] = None,
        duration_seconds: Optional[float] = None,
        prompt_influence: Optional[float] = None,
        output_format: Optional[str] = None,
    ) -> bytes:
        """
        Generate a sound effect.

        Args:
            text: Description of the sound
            loop: Produce a seamlessly looping sound
            duration_seconds: Length of the sound (0.5-30)
            prompt_influence: How closely to follow the prompt (0-1)
            output_format: Audio output format, sent as a query parameter

        Returns:
            Audio bytes

        Example:
            >>> audio = client.sound_generation.generate(
            ...     "Ocean waves crashing on rocks",
            ...     duration_seconds=5.0,
            ... )
        """
        data: Dict[str, Any] = {"text": text}
        data.update(self._compact({
            "loop": loop,
            "duration_seconds": duration_seconds,
            "prompt_influence": prompt_influence,
        }))

        params = self._compact({"output_format": output_format})
        return self._post_binary(Endpoints.SOUND_GENERATION, json=data, params=params)
