"""
ElevenLabs Python Client - Agents Platform Resources

Conversational agents and everything around them: conversations, phone
numbers, knowledge base, tools, tests and workspace settings.
"""

from elevenlabs_client.resources.agents_platform.agents import AgentsResource
from elevenlabs_client.resources.agents_platform.agent_testing import (
    AgentTestInvocationsResource,
    AgentTestsResource,
)
from elevenlabs_client.resources.agents_platform.batch_calling import BatchCallingResource
from elevenlabs_client.resources.agents_platform.conversations import ConversationsResource
from elevenlabs_client.resources.agents_platform.knowledge_base import KnowledgeBaseResource
from elevenlabs_client.resources.agents_platform.llm_usage import LLMUsageResource
from elevenlabs_client.resources.agents_platform.mcp_servers import MCPServersResource
from elevenlabs_client.resources.agents_platform.outbound_calling import OutboundCallingResource
from elevenlabs_client.resources.agents_platform.phone_numbers import PhoneNumbersResource
from elevenlabs_client.resources.agents_platform.secrets import SecretsResource
from elevenlabs_client.resources.agents_platform.tools import ToolsResource
from elevenlabs_client.resources.agents_platform.widgets import WidgetsResource
from elevenlabs_client.resources.agents_platform.workspace import ConvaiWorkspaceResource

__all__ = [
    "AgentsResource",
    "AgentTestsResource",
    "AgentTestInvocationsResource",
    "BatchCallingResource",
    "ConversationsResource",
    "KnowledgeBaseResource",
    "LLMUsageResource",
    "MCPServersResource",
    "OutboundCallingResource",
    "PhoneNumbersResource",
    "SecretsResource",
    "ToolsResource",
    "WidgetsResource",
    "ConvaiWorkspaceResource",
]
