"""
ElevenLabs Python Client - Agents Platform Workspace Resource

This module provides methods for the workspace-wide settings of the
agents platform: conversation settings, secrets and dashboard charts.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.models import SecretType
from elevenlabs_client.resources.base import BaseResource


class ConvaiWorkspaceResource(BaseResource):
    """Resource for agents platform workspace settings."""

    def get_settings(self) -> Dict[str, Any]:
        """Get the workspace settings."""
        return self._get(Endpoints.CONVAI_SETTINGS)

    def update_settings(self, **options: Any) -> Dict[str, Any]:
        """
        Update the workspace settings.

        Args:
            **options: Fields to change (conversation_initiation_client_data_webhook,
                webhooks, rag_retention_period_days, ...). None values are dropped.
        """
        return self._patch(Endpoints.CONVAI_SETTINGS, json=self._compact(options))

    # =========================================================================
    # Secrets
    # =========================================================================

    def get_secrets(self) -> Dict[str, Any]:
        """List the workspace secrets."""
        return self._get(Endpoints.SECRETS)

    def create_secret(self, name: str, value: str, type: str = SecretType.NEW.value) -> Dict[str, Any]:
        """
        Create a workspace secret.

        Raises:
            ValueError: If name or value is missing
        """
        self._require("name", name)
        self._require("value", value)
        return self._post(Endpoints.SECRETS, json={"type": type, "name": name, "value": value})

    def update_secret(
        self,
        secret_id: str,
        name: str,
        value: str,
        type: str = SecretType.UPDATE.value,
    ) -> Dict[str, Any]:
        """
        Update a workspace secret.

        Raises:
            ValueError: If secret_id, name or value is missing
        """
        self._require("secret_id", secret_id)
        self._require("name", name)
        self._require("value", value)
        path = Endpoints.SECRET.format(secret_id=secret_id)
        return self._patch(path, json={"type": type, "name": name, "value": value})

    def delete_secret(self, secret_id: str) -> Dict[str, Any]:
        """Delete a workspace secret."""
        self._require("secret_id", secret_id)
        return self._delete(Endpoints.SECRET.format(secret_id=secret_id))

    # =========================================================================
    # Dashboard
    # =========================================================================

    def get_dashboard_settings(self) -> Dict[str, Any]:
        """Get the dashboard chart configuration."""
        return self._get(Endpoints.CONVAI_DASHBOARD_SETTINGS)

    def update_dashboard_settings(self, charts: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
        """
        Update the dashboard charts.

        Args:
            charts: Chart definitions; omitted when None
        """
        data: Dict[str, Any] = {}
        if charts:
            data["charts"] = charts
        return self._patch(Endpoints.CONVAI_DASHBOARD_SETTINGS, json=data)
