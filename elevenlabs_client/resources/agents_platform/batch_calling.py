"""
ElevenLabs Python Client - Batch Calling Resource

This module provides methods for scheduling batches of outbound calls.
"""

from __future__ import annotations

from typing import Any, Dict, List

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class BatchCallingResource(BaseResource):
    """
    Resource for batch outbound calling.

    Example:
        >>> batch = client.batch_calling.submit(
        ...     call_name="Appointment reminders",
        ...     agent_id="agent_123",
        ...     agent_phone_number_id="phone_456",
        ...     scheduled_time_unix=1735689600,
        ...     recipients=[{"phone_number": "+15551234567"}],
        ... )
    """

    def submit(
        self,
        call_name: str,
        agent_id: str,
        agent_phone_number_id: str,
        scheduled_time_unix: int,
        recipients: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Submit a batch of calls.

        Args:
            call_name: Name of the batch
            agent_id: Agent that places the calls
            agent_phone_number_id: Phone number to call from
            scheduled_time_unix: When to start, as a Unix timestamp
            recipients: Recipient dicts with ``phone_number`` and optional overrides

        Returns:
            The created batch
        """
        data = {
            "call_name": call_name,
            "agent_id": agent_id,
            "agent_phone_number_id": agent_phone_number_id,
            "scheduled_time_unix": scheduled_time_unix,
            "recipients": recipients,
        }
        return self._post(Endpoints.BATCH_CALLING_SUBMIT, json=data)

    def list(self, **params: Any) -> Dict[str, Any]:
        """List the batches of the workspace."""
        return self._get(Endpoints.BATCH_CALLING_WORKSPACE, params=params)

    def get(self, batch_id: str) -> Dict[str, Any]:
        """Get a batch with the status of each recipient."""
        return self._get(Endpoints.BATCH_CALL.format(batch_id=batch_id))

    def cancel(self, batch_id: str) -> Dict[str, Any]:
        """Cancel a running batch."""
        return self._post(Endpoints.BATCH_CALL_CANCEL.format(batch_id=batch_id), json={})

    def retry(self, batch_id: str) -> Dict[str, Any]:
        """Retry the failed calls of a batch."""
        return self._post(Endpoints.BATCH_CALL_RETRY.format(batch_id=batch_id), json={})
