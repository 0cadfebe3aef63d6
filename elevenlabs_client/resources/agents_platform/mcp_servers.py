"""
ElevenLabs Python Client - MCP Servers Resource

This module provides methods for registering Model Context Protocol
servers and controlling which of their tools agents may call.
"""

from __future__ import annotations

from typing import Any, Dict, Union

from elevenlabs_client.config import Endpoints
from elevenlabs_client.models import McpApprovalPolicy
from elevenlabs_client.resources.base import BaseResource


class MCPServersResource(BaseResource):
    """
    Resource for MCP servers.

    Example:
        >>> server = client.mcp_servers.create({
        ...     "url": "https://mcp.example.com/sse",
        ...     "name": "Internal tools",
        ... })
        >>> client.mcp_servers.update_approval_policy(
        ...     server["id"], McpApprovalPolicy.REQUIRE_APPROVAL_PER_TOOL
        ... )
    """

    def create(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Register an MCP server.

        Args:
            config: Server configuration (url, name, secret_token, ...)

        Raises:
            ValueError: If config is missing or empty
        """
        self._require("config", config)
        return self._post(Endpoints.MCP_SERVERS, json={"config": config})

    def list(self) -> Dict[str, Any]:
        """List the MCP servers of the workspace."""
        return self._get(Endpoints.MCP_SERVERS)

    def get(self, mcp_server_id: str) -> Dict[str, Any]:
        """Get an MCP server."""
        self._require("mcp_server_id", mcp_server_id)
        return self._get(Endpoints.MCP_SERVER.format(mcp_server_id=mcp_server_id))

    def update_approval_policy(
        self,
        mcp_server_id: str,
        approval_policy: Union[McpApprovalPolicy, str],
    ) -> Dict[str, Any]:
        """
        Change how tool calls on a server are approved.

        Args:
            mcp_server_id: The server
            approval_policy: One of "auto_approve_all", "require_approval_all"
                or "require_approval_per_tool"

        Raises:
            ValueError: If the policy is missing or not a known value
        """
        self._require("mcp_server_id", mcp_server_id)
        self._require("approval_policy", approval_policy)
        try:
            policy = McpApprovalPolicy(approval_policy)
        except ValueError:
            valid = ", ".join(p.value for p in McpApprovalPolicy)
            raise ValueError(f"approval_policy must be one of: {valid}") from None

        path = Endpoints.MCP_SERVER_APPROVAL_POLICY.format(mcp_server_id=mcp_server_id)
        return self._patch(path, json={"approval_policy": policy.value})

    def create_tool_approval(
        self,
        mcp_server_id: str,
        tool_name: str,
        tool_description: str,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Pre-approve one tool of a server.

        Args:
            mcp_server_id: The server
            tool_name: Name of the tool
            tool_description: Description of the tool
            **options: Extra fields such as ``input_schema`` or ``approval_policy``
        """
        self._require("mcp_server_id", mcp_server_id)
        self._require("tool_name", tool_name)
        self._require("tool_description", tool_description)

        data: Dict[str, Any] = {"tool_name": tool_name, "tool_description": tool_description}
        data.update(self._compact(options))

        path = Endpoints.MCP_SERVER_TOOL_APPROVALS.format(mcp_server_id=mcp_server_id)
        return self._post(path, json=data)

    def delete_tool_approval(self, mcp_server_id: str, tool_name: str) -> Dict[str, Any]:
        """Remove the approval of a tool."""
        self._require("mcp_server_id", mcp_server_id)
        self._require("tool_name", tool_name)
        path = Endpoints.MCP_SERVER_TOOL_APPROVAL.format(mcp_server_id=mcp_server_id, tool_name=tool_name)
        return self._delete(path)
