"""
ElevenLabs Python Client - Phone Numbers Resource
"""

from __future__ import annotations

from typing import Any, Dict, List

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class PhoneNumbersResource(BaseResource):
    """
    Resource for the phone numbers agents answer and call from.

    Example:
        >>> number = client.phone_numbers.import_number(
        ...     "+15551234567", "Support line",
        ...     sid="AC...", token="...",
        ... )
        >>> client.phone_numbers.update(number["phone_number_id"], agent_id="agent_123")
    """

    def import_number(self, phone_number: str, label: str, **options: Any) -> Dict[str, Any]:
        """
        Import a Twilio or SIP trunk number.

        Args:
            phone_number: Number in E.164 format
            label: Label shown in the dashboard
            **options: Provider fields (sid, token, provider_type, inbound_trunk_config, ...)

        Returns:
            Dict with ``phone_number_id``
        """
        data: Dict[str, Any] = {"phone_number": phone_number, "label": label}
        data.update(options)
        return self._post(Endpoints.PHONE_NUMBERS, json=data)

    def list(self) -> List[Dict[str, Any]]:
        """List the imported phone numbers."""
        return self._get(Endpoints.PHONE_NUMBERS)

    def get(self, phone_number_id: str) -> Dict[str, Any]:
        """Get a phone number."""
        return self._get(Endpoints.PHONE_NUMBER.format(phone_number_id=phone_number_id))

    def update(self, phone_number_id: str, **options: Any) -> Dict[str, Any]:
        """
        Update a phone number.

        Args:
            phone_number_id: The number
            **options: Fields to change (agent_id, label, ...)
        """
        return self._patch(Endpoints.PHONE_NUMBER.format(phone_number_id=phone_number_id), json=options)

    def delete(self, phone_number_id: str) -> Dict[str, Any]:
        """Delete a phone number."""
        return self._delete(Endpoints.PHONE_NUMBER.format(phone_number_id=phone_number_id))
