"""
ElevenLabs Python Client - Service Accounts Resources

This module provides methods for workspace service accounts and their
API keys.
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class ServiceAccountsResource(BaseResource):
    """Resource for listing workspace service accounts."""

    def list(self) -> Dict[str, Any]:
        """List the service accounts of the workspace."""
        return self._get(Endpoints.SERVICE_ACCOUNTS)


class ServiceAccountAPIKeysResource(BaseResource):
    """
    Resource for managing the API keys of a service account.

    Example:
        >>> key = client.service_account_api_keys.create(
        ...     "sa_user_id", "CI key", ["text_to_speech", "voices_read"]
        ... )
        >>> print(key["xi-api-key"])
    """

    def list(self, service_account_user_id: str) -> Dict[str, Any]:
        """List the API keys of a service account."""
        path = Endpoints.SERVICE_ACCOUNT_API_KEYS.format(service_account_user_id=service_account_user_id)
        return self._get(path)

    def create(
        self,
        service_account_user_id: str,
        name: str,
        permissions: Any,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Create an API key for a service account.

        Args:
            service_account_user_id: The service account
            name: Key name
            permissions: List of permission names, or "all"
            **options: Extra fields such as ``character_limit``

        Returns:
            Dict with the new ``xi-api-key``
        """
        path = Endpoints.SERVICE_ACCOUNT_API_KEYS.format(service_account_user_id=service_account_user_id)
        data: Dict[str, Any] = {"name": name, "permissions": permissions}
        data.update(options)
        return self._post(path, json=data)

    def update(
        self,
        service_account_user_id: str,
        api_key_id: str,
        is_enabled: bool,
        name: str,
        permissions: Any,
        **options: Any,
    ) -> Dict[str, Any]:
        """Update an API key of a service account."""
        path = Endpoints.SERVICE_ACCOUNT_API_KEY.format(
            service_account_user_id=service_account_user_id, api_key_id=api_key_id
        )
        data: Dict[str, Any] = {"is_enabled": is_enabled, "name": name, "permissions": permissions}
        data.update(options)
        return self._patch(path, json=data)

    def delete(self, service_account_user_id: str, api_key_id: str) -> Dict[str, Any]:
        """Delete an API key of a service account."""
        path = Endpoints.SERVICE_ACCOUNT_API_KEY.format(
            service_account_user_id=service_account_user_id, api_key_id=api_key_id
        )
        return self._delete(path)
