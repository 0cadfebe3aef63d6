"""
ElevenLabs Python Client - Models

This module contains the enumerations shared by the API wrappers.
"""

from enum import Enum


class McpApprovalPolicy(str, Enum):
    """Tool approval policy of an MCP server."""
    AUTO_APPROVE_ALL = "auto_approve_all"
    REQUIRE_APPROVAL_ALL = "require_approval_all"
    REQUIRE_APPROVAL_PER_TOOL = "require_approval_per_tool"


class SecretType(str, Enum):
    """Operation type sent with an agents platform secret."""
    NEW = "new"
    UPDATE = "update"
