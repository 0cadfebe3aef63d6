"""
ElevenLabs Python Client - Tools Resource
"""

from __future__ import annotations

from typing import Any, Dict

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class ToolsResource(BaseResource):
    """
    Resource for the workspace tools agents can call.

    Example:
        >>> tool = client.tools.create({
        ...     "type": "webhook",
        ...     "name": "get_weather",
        ...     "description": "Look up the weather for a city",
        ...     "api_schema": {"url": "https://api.example.com/weather", "method": "GET"},
        ... })
    """

    def list(self) -> Dict[str, Any]:
        """List tools."""
        return self._get(Endpoints.TOOLS)

    def get(self, tool_id: str) -> Dict[str, Any]:
        """Get a tool."""
        return self._get(Endpoints.TOOL.format(tool_id=tool_id))

    def create(self, tool_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a tool.

        Args:
            tool_config: Tool definition (type, name, description, api_schema, ...)
        """
        return self._post(Endpoints.TOOLS, json={"tool_config": tool_config})

    def update(self, tool_id: str, tool_config: Dict[str, Any]) -> Dict[str, Any]:
        """Replace the definition of a tool."""
        return self._patch(Endpoints.TOOL.format(tool_id=tool_id), json={"tool_config": tool_config})

    def delete(self, tool_id: str) -> Dict[str, Any]:
        """Delete a tool."""
        return self._delete(Endpoints.TOOL.format(tool_id=tool_id))

    def get_dependent_agents(self, tool_id: str, **params: Any) -> Dict[str, Any]:
        """List the agents that use a tool."""
        return self._get(Endpoints.TOOL_DEPENDENT_AGENTS.format(tool_id=tool_id), params=params)
