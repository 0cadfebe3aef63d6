"""
ElevenLabs Python Client - Widgets Resource
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class WidgetsResource(BaseResource):
    """Resource for the embeddable web widget of an agent."""

    def get(self, agent_id: str, **params: Any) -> Dict[str, Any]:
        """
        Get the widget configuration of an agent.

        Args:
            agent_id: The agent
            **params: Query options such as ``conversation_signature``
        """
        return self._get(Endpoints.AGENT_WIDGET.format(agent_id=agent_id), params=params)

    def create_avatar(self, agent_id: str, avatar_file: BinaryIO, filename: str) -> Dict[str, Any]:
        """
        Upload the avatar image shown in the widget.

        Args:
            agent_id: The agent
            avatar_file: Image file object
            filename: Name of the uploaded file

        Returns:
            Dict with ``avatar_url``
        """
        return self._post_multipart(
            Endpoints.AGENT_AVATAR.format(agent_id=agent_id),
            files={"avatar_file": self._file(avatar_file, filename)},
        )
