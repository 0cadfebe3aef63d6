"""
ElevenLabs Python Client - History Resource

This module provides methods for browsing and downloading previously
generated audio.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class HistoryResource(BaseResource):
    """
    Resource for generation history.

    Example:
        >>> page = client.history.list(page_size=10, voice_id="21m00Tcm4TlvDq8ikWAM")
        >>> for item in page["history"]:
        ...     audio = client.history.get_audio(item["history_item_id"])
    """

    def list(
        self,
        page_size: Optional[int] = None,
        start_after_history_item_id: Optional[str] = None,
        voice_id: Optional[str] = None,
        search: Optional[str] = None,
        source: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        List generated items, newest first.

        Args:
            page_size: Number of items to return (max 1000)
            start_after_history_item_id: Cursor for pagination
            voice_id: Only items generated with this voice
            search: Search term matched against the text
            source: "TTS" or "STS"

        Returns:
            Dict with ``history``, ``last_history_item_id`` and ``has_more``
        """
        params = {
            "page_size": page_size,
            "start_after_history_item_id": start_after_history_item_id,
            "voice_id": voice_id,
            "search": search,
            "source": source,
        }
        return self._get(Endpoints.HISTORY, params=params)

    def get(self, history_item_id: str) -> Dict[str, Any]:
        """Get a history item by ID."""
        return self._get(Endpoints.HISTORY_ITEM.format(history_item_id=history_item_id))

    def delete(self, history_item_id: str) -> Dict[str, Any]:
        """Delete a history item."""
        return self._delete(Endpoints.HISTORY_ITEM.format(history_item_id=history_item_id))

    def get_audio(self, history_item_id: str) -> bytes:
        """Download the audio of a history item."""
        return self._get_binary(Endpoints.HISTORY_ITEM_AUDIO.format(history_item_id=history_item_id))

    def download(
        self,
        history_item_ids: List[str],
        output_format: Optional[str] = None,
    ) -> bytes:
        """
        Download one or more history items.

        A single ID returns the audio file; several IDs return a zip archive.

        Args:
            history_item_ids: Items to download
            output_format: "wav" or "default"

        Returns:
            Audio or zip bytes
        """
        data: Dict[str, Any] = {"history_item_ids": history_item_ids}
        if output_format is not None:
            data["output_format"] = output_format
        return self._post_binary(Endpoints.HISTORY_DOWNLOAD, json=data)
