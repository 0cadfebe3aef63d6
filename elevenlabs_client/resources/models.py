"""
ElevenLabs Python Client - Models Resource
"""

from __future__ import annotations

from typing import Any, Dict, List

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class ModelsResource(BaseResource):
    """Resource for listing the available synthesis models."""

    def list(self) -> List[Dict[str, Any]]:
        """
        List all models.

        Returns:
            List of models with their capabilities and supported languages
        """
        return self._get(Endpoints.MODELS)
