"""
ElevenLabs Python Client - Webhooks Resources
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class WebhooksResource(BaseResource):
    """Resource for listing workspace webhooks."""

    def list(self, include_usages: Optional[bool] = None) -> Dict[str, Any]:
        """
        List the webhooks of the workspace.

        Args:
            include_usages: Include which features use each webhook

        Returns:
            Dict with ``webhooks``
        """
        return self._get(Endpoints.WORKSPACE_WEBHOOKS, params={"include_usages": include_usages})


class WorkspaceWebhooksResource(BaseResource):
    """Resource for listing workspace webhooks with arbitrary query filters."""

    def list(self, **params: Any) -> Dict[str, Any]:
        """List the webhooks of the workspace, passing ``params`` through as the query."""
        return self._get(Endpoints.WORKSPACE_WEBHOOKS, params=params)
