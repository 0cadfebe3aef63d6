"""
ElevenLabs Python Client - Conversations Resource
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class ConversationsResource(BaseResource):
    """
    Resource for agent conversations.

    Example:
        >>> page = client.conversations.list(agent_id="agent_123", page_size=20)
        >>> for conv in page["conversations"]:
        ...     details = client.conversations.get(conv["conversation_id"])
    """

    def list(self, **params: Any) -> Dict[str, Any]:
        """
        List conversations.

        Args:
            **params: Query filters (agent_id, cursor, page_size, call_successful, ...)
        """
        return self._get(Endpoints.CONVERSATIONS, params=params)

    def get(self, conversation_id: str) -> Dict[str, Any]:
        """Get a conversation with its transcript and analysis."""
        return self._get(Endpoints.CONVERSATION.format(conversation_id=conversation_id))

    def delete(self, conversation_id: str) -> Dict[str, Any]:
        """Delete a conversation."""
        return self._delete(Endpoints.CONVERSATION.format(conversation_id=conversation_id))

    def get_audio(self, conversation_id: str) -> bytes:
        """Download the recording of a conversation."""
        return self._get_binary(Endpoints.CONVERSATION_AUDIO.format(conversation_id=conversation_id))

    def get_signed_url(self, agent_id: str, **params: Any) -> Dict[str, Any]:
        """
        Get a signed WebSocket URL for starting a conversation with a private agent.

        Returns:
            Dict with ``signed_url``
        """
        query: Dict[str, Any] = {"agent_id": agent_id}
        query.update(params)
        return self._get(Endpoints.CONVERSATION_SIGNED_URL, params=query)

    def get_token(self, agent_id: str, **params: Any) -> Dict[str, Any]:
        """
        Get a WebRTC conversation token for an agent.

        Returns:
            Dict with ``token``
        """
        query: Dict[str, Any] = {"agent_id": agent_id}
        query.update(params)
        return self._get(Endpoints.CONVERSATION_TOKEN, params=query)

    def send_feedback(self, conversation_id: str, feedback: str) -> Dict[str, Any]:
        """
        Rate a conversation.

        Args:
            conversation_id: The conversation
            feedback: "like" or "dislike"
        """
        path = Endpoints.CONVERSATION_FEEDBACK.format(conversation_id=conversation_id)
        return self._post(path, json={"feedback": feedback})
