"""
ElevenLabs Python Client - Secrets Resource
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.models import SecretType
from elevenlabs_client.resources.base import BaseResource


class SecretsResource(BaseResource):
    """Resource for workspace secrets that agent tools can reference."""

    def list(self) -> Dict[str, Any]:
        """List the secrets of the workspace (values are never returned)."""
        return self._get(Endpoints.SECRETS)

    def create(self, name: str, value: str, type: str = SecretType.NEW.value) -> Dict[str, Any]:
        """
        Create a secret.

        Args:
            name: Secret name
            value: Secret value
            type: Operation type

        Returns:
            Dict with ``secret_id``
        """
        return self._post(Endpoints.SECRETS, json={"type": type, "name": name, "value": value})

    def delete(self, secret_id: str) -> Dict[str, Any]:
        """Delete a secret."""
        return self._delete(Endpoints.SECRET.format(secret_id=secret_id))
