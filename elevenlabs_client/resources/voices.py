"""
ElevenLabs Python Client - Voices Resource

This module provides methods for managing voices.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterable, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.exceptions import APIError
from elevenlabs_client.resources.base import BaseResource

logger = logging.getLogger("elevenlabs_client")


class VoicesResource(BaseResource):
    """
    Resource for managing voices.

    Example:
        >>> voices = client.voices.list()
        >>> for voice in voices["voices"]:
        ...     print(voice["voice_id"], voice["name"])
        >>> with open("sample.mp3", "rb") as f:
        ...     voice = client.voices.create("My Voice", [f], labels={"accent": "british"})
    """

    def get(self, voice_id: str) -> Dict[str, Any]:
        """
        Get a voice by ID.

        Args:
            voice_id: The voice's unique identifier

        Returns:
            Voice metadata and settings
        """
        return self._get(Endpoints.VOICE.format(voice_id=voice_id))

    def list(self) -> Dict[str, Any]:
        """List all voices available to the account."""
        return self._get(Endpoints.VOICES)

    def create(
        self,
        name: str,
        samples: Iterable[Any] = (),
        description: Optional[str] = None,
        labels: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Create a cloned voice from audio samples.

        Args:
            name: Name of the voice
            samples: Audio file objects, or ``(filename, fileobj)`` tuples
            description: Description of the voice
            labels: Labels such as accent or age

        Returns:
            Dict with the new ``voice_id``
        """
        fields: Dict[str, Any] = {"name": name, "description": description or ""}
        fields.update(self._label_fields(labels))

        return self._post_multipart(
            Endpoints.VOICE_ADD,
            data=fields,
            files=self._sample_parts(samples),
        )

    def edit(
        self,
        voice_id: str,
        samples: Iterable[Any] = (),
        name: Optional[str] = None,
        description: Optional[str] = None,
        labels: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Edit a voice.

        Args:
            voice_id: The voice's unique identifier
            samples: Extra audio samples to add
            name: New name
            description: New description
            labels: Labels to set

        Returns:
            Dict with ``status``
        """
        fields = self._compact({"name": name, "description": description})
        fields.update(self._label_fields(labels))

        return self._post_multipart(
            Endpoints.VOICE_EDIT.format(voice_id=voice_id),
            data=fields,
            files=self._sample_parts(samples),
        )

    def delete(self, voice_id: str) -> Dict[str, Any]:
        """Delete a voice."""
        return self._delete(Endpoints.VOICE.format(voice_id=voice_id))

    def is_banned(self, voice_id: str) -> bool:
        """
        Check whether a voice has been banned by safety control.

        Lookup failures are treated as "not banned".
        """
        try:
            voice = self.get(voice_id)
        except APIError as e:
            logger.debug(f"Voice lookup for {voice_id} failed: {e}")
            return False
        return voice.get("safety_control") == "BAN"

    def is_active(self, voice_id: str) -> bool:
        """
        Check whether a voice is in the account's voice list.

        Lookup failures are treated as "not active".
        """
        try:
            voices = self.list()
        except APIError as e:
            logger.debug(f"Voice list lookup failed: {e}")
            return False
        return voice_id in [voice.get("voice_id") for voice in voices.get("voices", [])]

    @staticmethod
    def _label_fields(labels: Optional[Dict[str, Any]]) -> Dict[str, str]:
        return {f"labels[{key}]": str(value) for key, value in (labels or {}).items()}

    def _sample_parts(self, samples: Iterable[Any]) -> List[tuple]:
        parts = []
        for sample in samples:
            if isinstance(sample, tuple):
                parts.append(("files", sample))
            else:
                filename = os.path.basename(getattr(sample, "name", "") or "sample.mp3")
                parts.append(("files", self._file(sample, filename)))
        return parts
