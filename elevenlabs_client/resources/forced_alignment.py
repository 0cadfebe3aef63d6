"""
ElevenLabs Python Client - Forced Alignment Resource
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class ForcedAlignmentResource(BaseResource):
    """Resource for aligning a transcript against its audio."""

    def create(
        self,
        audio_file: BinaryIO,
        filename: str,
        text: str,
        enabled_spooled_file: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Align text to audio.

        Args:
            audio_file: Audio file object
            filename: Name of the uploaded file
            text: Transcript to align
            enabled_spooled_file: Stream the upload in chunks on the server side

        Returns:
            Dict with ``characters``, ``words`` and ``loss``
        """
        return self._post_multipart(
            Endpoints.FORCED_ALIGNMENT,
            data=self._form({"text": text, "enabled_spooled_file": enabled_spooled_file}),
            files={"file": self._file(audio_file, filename)},
        )
