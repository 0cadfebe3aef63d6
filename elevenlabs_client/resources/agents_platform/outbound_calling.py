"""
ElevenLabs Python Client - Outbound Calling Resource
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class OutboundCallingResource(BaseResource):
    """
    Resource for placing a single outbound call through an agent.

    Example:
        >>> call = client.outbound_calling.twilio_call(
        ...     agent_id="agent_123",
        ...     agent_phone_number_id="phone_456",
        ...     to_number="+15551234567",
        ... )
    """

    def sip_trunk_call(
        self,
        agent_id: str,
        agent_phone_number_id: str,
        to_number: str,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Place a call through a SIP trunk.

        Args:
            agent_id: Agent that handles the call
            agent_phone_number_id: SIP trunk number to call from
            to_number: Number to call
            **options: Extra fields such as ``conversation_initiation_client_data``

        Returns:
            Dict with ``success``, ``conversation_id`` and ``sip_call_id``
        """
        data = self._call_body(agent_id, agent_phone_number_id, to_number, options)
        return self._post(Endpoints.SIP_TRUNK_OUTBOUND_CALL, json=data)

    def twilio_call(
        self,
        agent_id: str,
        agent_phone_number_id: str,
        to_number: str,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Place a call through Twilio.

        Returns:
            Dict with ``success``, ``conversation_id`` and ``callSid``
        """
        data = self._call_body(agent_id, agent_phone_number_id, to_number, options)
        return self._post(Endpoints.TWILIO_OUTBOUND_CALL, json=data)

    @staticmethod
    def _call_body(
        agent_id: str,
        agent_phone_number_id: str,
        to_number: str,
        options: Dict[str, Any],
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "agent_id": agent_id,
            "agent_phone_number_id": agent_phone_number_id,
            "to_number": to_number,
        }
        data.update(options)
        return data
