"""
ElevenLabs Python Client - Configuration

This module contains configuration classes, defaults and endpoint paths.
"""

from dataclasses import dataclass
from typing import Any, Dict

from elevenlabs_client._version import __version__


DEFAULT_BASE_URL = "https://api.elevenlabs.io"
DEFAULT_API_KEY_ENV = "ELEVENLABS_API_KEY"
DEFAULT_BASE_URL_ENV = "ELEVENLABS_BASE_URL"

USER_AGENT = f"elevenlabs-client-python/{__version__}"


@dataclass
class ClientConfig:
    """
    Configuration for the ElevenLabs client.

    Attributes:
        base_url: Base URL for the API
        timeout: Read/write timeout in seconds
        connect_timeout: Connection timeout in seconds
        max_retries: Connection retry attempts made by the transport
        user_agent: Value of the User-Agent header
        debug: Enable debug logging
    """
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    connect_timeout: float = 10.0
    max_retries: int = 0
    user_agent: str = USER_AGENT
    debug: bool = False

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If any value is out of range
        """
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL: {self.base_url}")
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ValueError("Timeout must be a positive number")
        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int) or self.max_retries < 0:
            raise ValueError("Retry count must be a non-negative integer")

    def to_dict(self) -> Dict[str, Any]:
        """Return a loggable view of the configuration."""
        return {
            "base_url": self.base_url,
            "timeout": self.timeout,
            "connect_timeout": self.connect_timeout,
            "max_retries": self.max_retries,
            "user_agent": self.user_agent,
            "debug": self.debug,
        }


# Default configuration
DEFAULT_CONFIG = ClientConfig()


class Defaults:
    """Default request values used by the API wrappers."""

    OUTPUT_FORMAT = "mp3_44100_128"
    TTS_MODEL_ID = "eleven_multilingual_v2"
    MUSIC_MODEL_ID = "music_v1"
    STREAM_ACCEPT = "audio/mpeg"


# Endpoints
class Endpoints:
    """API endpoint paths."""

    # Text to speech
    TEXT_TO_SPEECH = "/v1/text-to-speech/{voice_id}"
    TEXT_TO_SPEECH_WITH_TIMESTAMPS = "/v1/text-to-speech/{voice_id}/with-timestamps"
    TEXT_TO_SPEECH_STREAM = "/v1/text-to-speech/{voice_id}/stream"
    TEXT_TO_SPEECH_STREAM_WITH_TIMESTAMPS = "/v1/text-to-speech/{voice_id}/stream/with-timestamps"
    TEXT_TO_SPEECH_STREAM_INPUT = "/v1/text-to-speech/{voice_id}/stream-input"
    TEXT_TO_SPEECH_MULTI_STREAM_INPUT = "/v1/text-to-speech/{voice_id}/multi-stream-input"

    # Text to dialogue
    TEXT_TO_DIALOGUE = "/v1/text-to-dialogue"
    TEXT_TO_DIALOGUE_STREAM = "/v1/text-to-dialogue/stream"

    # Audio
    SOUND_GENERATION = "/v1/sound-generation"
    AUDIO_ISOLATION = "/v1/audio-isolation"
    AUDIO_ISOLATION_STREAM = "/v1/audio-isolation/stream"
    SPEECH_TO_SPEECH = "/v1/speech-to-speech/{voice_id}"
    SPEECH_TO_SPEECH_STREAM = "/v1/speech-to-speech/{voice_id}/stream"
    SPEECH_TO_TEXT = "/v1/speech-to-text"
    SPEECH_TO_TEXT_TRANSCRIPT = "/v1/speech-to-text/transcripts/{transcription_id}"
    FORCED_ALIGNMENT = "/v1/forced-alignment"

    # Text to voice
    TEXT_TO_VOICE = "/v1/text-to-voice"
    TEXT_TO_VOICE_DESIGN = "/v1/text-to-voice/design"
    TEXT_TO_VOICE_STREAM = "/v1/text-to-voice/{generated_voice_id}/stream"

    # Music
    MUSIC = "/v1/music"
    MUSIC_STREAM = "/v1/music/stream"
    MUSIC_DETAILED = "/v1/music/detailed"
    MUSIC_PLAN = "/v1/music/plan"

    # Audio native
    AUDIO_NATIVE = "/v1/audio-native"
    AUDIO_NATIVE_CONTENT = "/v1/audio-native/{project_id}/content"
    AUDIO_NATIVE_SETTINGS = "/v1/audio-native/{project_id}/settings"

    # Dubbing
    DUBBING = "/v1/dubbing"
    DUB = "/v1/dubbing/{dubbing_id}"
    DUB_RESOURCES = "/v1/dubbing/{dubbing_id}/resources"
    DUB_AUDIO = "/v1/dubbing/{dubbing_id}/audio/{language_code}"
    DUB_TRANSCRIPT = "/v1/dubbing/{dubbing_id}/transcript/{language_code}"
    DUB_RESOURCE = "/v1/dubbing/resource/{dubbing_id}"
    DUB_SPEAKER = "/v1/dubbing/resource/{dubbing_id}/speaker/{speaker_id}"
    DUB_SPEAKER_SEGMENT = "/v1/dubbing/resource/{dubbing_id}/speaker/{speaker_id}/segment"
    DUB_SIMILAR_VOICES = "/v1/dubbing/resource/{dubbing_id}/speaker/{speaker_id}/similar-voices"
    DUB_SEGMENT = "/v1/dubbing/resource/{dubbing_id}/segment/{segment_id}"
    DUB_SEGMENT_LANGUAGE = "/v1/dubbing/resource/{dubbing_id}/segment/{segment_id}/{language}"
    DUB_TRANSCRIBE = "/v1/dubbing/resource/{dubbing_id}/transcribe"
    DUB_TRANSLATE = "/v1/dubbing/resource/{dubbing_id}/translate"
    DUB_DUB = "/v1/dubbing/resource/{dubbing_id}/dub"
    DUB_RENDER = "/v1/dubbing/resource/{dubbing_id}/render/{language}"

    # Voices
    VOICES = "/v1/voices"
    VOICE = "/v1/voices/{voice_id}"
    VOICE_ADD = "/v1/voices/add"
    VOICE_EDIT = "/v1/voices/{voice_id}/edit"
    VOICE_SAMPLE = "/v1/voices/{voice_id}/samples/{sample_id}"
    VOICE_ADD_SHARED = "/v1/voices/add/{public_user_id}/{voice_id}"
    SHARED_VOICES = "/v1/shared-voices"

    # Models
    MODELS = "/v1/models"

    # History
    HISTORY = "/v1/history"
    HISTORY_ITEM = "/v1/history/{history_item_id}"
    HISTORY_ITEM_AUDIO = "/v1/history/{history_item_id}/audio"
    HISTORY_DOWNLOAD = "/v1/history/download"

    # Pronunciation dictionaries
    PRONUNCIATION_DICTIONARIES = "/v1/pronunciation-dictionaries"
    PRONUNCIATION_DICTIONARY = "/v1/pronunciation-dictionaries/{dictionary_id}"
    PRONUNCIATION_DICTIONARY_FROM_FILE = "/v1/pronunciation-dictionaries/add-from-file"
    PRONUNCIATION_DICTIONARY_FROM_RULES = "/v1/pronunciation-dictionaries/add-from-rules"
    PRONUNCIATION_DICTIONARY_DOWNLOAD = "/v1/pronunciation-dictionaries/{dictionary_id}/{version_id}/download"

    # Service accounts
    SERVICE_ACCOUNTS = "/v1/service-accounts"
    SERVICE_ACCOUNT_API_KEYS = "/v1/service-accounts/{service_account_user_id}/api-keys"
    SERVICE_ACCOUNT_API_KEY = "/v1/service-accounts/{service_account_user_id}/api-keys/{api_key_id}"

    # Usage and user
    USAGE_CHARACTER_STATS = "/v1/usage/character-stats"
    USER = "/v1/user"

    # Workspace
    WORKSPACE_WEBHOOKS = "/v1/workspace/webhooks"
    WORKSPACE_GROUPS_SEARCH = "/v1/workspace/groups/search"
    WORKSPACE_GROUP_MEMBERS = "/v1/workspace/groups/{group_id}/members"
    WORKSPACE_GROUP_MEMBERS_REMOVE = "/v1/workspace/groups/{group_id}/members/remove"
    WORKSPACE_INVITES = "/v1/workspace/invites"
    WORKSPACE_INVITES_ADD = "/v1/workspace/invites/add"
    WORKSPACE_INVITES_ADD_BULK = "/v1/workspace/invites/add-bulk"
    WORKSPACE_MEMBERS = "/v1/workspace/members"
    WORKSPACE_RESOURCE = "/v1/workspace/resources/{resource_id}"
    WORKSPACE_RESOURCE_SHARE = "/v1/workspace/resources/{resource_id}/share"
    WORKSPACE_RESOURCE_UNSHARE = "/v1/workspace/resources/{resource_id}/unshare"

    # Agents platform
    AGENTS = "/v1/convai/agents"
    AGENT = "/v1/convai/agents/{agent_id}"
    AGENT_CREATE = "/v1/convai/agents/create"
    AGENT_DUPLICATE = "/v1/convai/agents/{agent_id}/duplicate"
    AGENT_LINK = "/v1/convai/agents/{agent_id}/link"
    AGENT_SIMULATE = "/v1/convai/agents/{agent_id}/simulate-conversation"
    AGENT_SIMULATE_STREAM = "/v1/convai/agents/{agent_id}/simulate-conversation/stream"
    AGENT_LLM_USAGE = "/v1/convai/agent/{agent_id}/llm-usage/calculate"
    AGENT_KNOWLEDGE_BASE_SIZE = "/v1/convai/agent/{agent_id}/knowledge-base/size"
    AGENT_WIDGET = "/v1/convai/agents/{agent_id}/widget"
    AGENT_AVATAR = "/v1/convai/agents/{agent_id}/avatar"
    AGENT_RUN_TESTS = "/v1/convai/agents/{agent_id}/run-tests"

    CONVERSATIONS = "/v1/convai/conversations"
    CONVERSATION = "/v1/convai/conversations/{conversation_id}"
    CONVERSATION_AUDIO = "/v1/convai/conversations/{conversation_id}/audio"
    CONVERSATION_FEEDBACK = "/v1/convai/conversations/{conversation_id}/feedback"
    CONVERSATION_SIGNED_URL = "/v1/convai/conversation/get-signed-url"
    CONVERSATION_TOKEN = "/v1/convai/conversation/token"

    BATCH_CALLING_SUBMIT = "/v1/convai/batch-calling/submit"
    BATCH_CALLING_WORKSPACE = "/v1/convai/batch-calling/workspace"
    BATCH_CALL = "/v1/convai/batch-calling/{batch_id}"
    BATCH_CALL_CANCEL = "/v1/convai/batch-calling/{batch_id}/cancel"
    BATCH_CALL_RETRY = "/v1/convai/batch-calling/{batch_id}/retry"

    KNOWLEDGE_BASE = "/v1/convai/knowledge-base"
    KNOWLEDGE_BASE_DOCUMENT = "/v1/convai/knowledge-base/{document_id}"
    KNOWLEDGE_BASE_URL = "/v1/convai/knowledge-base/url"
    KNOWLEDGE_BASE_TEXT = "/v1/convai/knowledge-base/text"
    KNOWLEDGE_BASE_FILE = "/v1/convai/knowledge-base/file"
    KNOWLEDGE_BASE_RAG_INDEX = "/v1/convai/knowledge-base/{document_id}/rag-index"
    KNOWLEDGE_BASE_RAG_INDEX_ITEM = "/v1/convai/knowledge-base/{document_id}/rag-index/{rag_index_id}"
    KNOWLEDGE_BASE_RAG_OVERVIEW = "/v1/convai/knowledge-base/rag-index"
    KNOWLEDGE_BASE_DEPENDENT_AGENTS = "/v1/convai/knowledge-base/{document_id}/dependent-agents"
    KNOWLEDGE_BASE_CONTENT = "/v1/convai/knowledge-base/{document_id}/content"
    KNOWLEDGE_BASE_CHUNK = "/v1/convai/knowledge-base/{document_id}/chunk/{chunk_id}"

    LLM_USAGE_CALCULATE = "/v1/convai/llm-usage/calculate"

    MCP_SERVERS = "/v1/convai/mcp-servers"
    MCP_SERVER = "/v1/convai/mcp-servers/{mcp_server_id}"
    MCP_SERVER_APPROVAL_POLICY = "/v1/convai/mcp-servers/{mcp_server_id}/approval-policy"
    MCP_SERVER_TOOL_APPROVALS = "/v1/convai/mcp-servers/{mcp_server_id}/tool-approvals"
    MCP_SERVER_TOOL_APPROVAL = "/v1/convai/mcp-servers/{mcp_server_id}/tool-approvals/{tool_name}"

    SIP_TRUNK_OUTBOUND_CALL = "/v1/convai/sip-trunk/outbound-call"
    TWILIO_OUTBOUND_CALL = "/v1/convai/twilio/outbound-call"

    PHONE_NUMBERS = "/v1/convai/phone-numbers"
    PHONE_NUMBER = "/v1/convai/phone-numbers/{phone_number_id}"

    SECRETS = "/v1/convai/secrets"
    SECRET = "/v1/convai/secrets/{secret_id}"

    AGENT_TESTS = "/v1/convai/agent-testing"
    AGENT_TEST = "/v1/convai/agent-testing/{test_id}"
    AGENT_TEST_CREATE = "/v1/convai/agent-testing/create"
    AGENT_TEST_SUMMARIES = "/v1/convai/agent-testing/summaries"

    TEST_INVOCATION = "/v1/convai/test-invocations/{test_invocation_id}"
    TEST_INVOCATION_RESUBMIT = "/v1/convai/test-invocations/{test_invocation_id}/resubmit"

    TOOLS = "/v1/convai/tools"
    TOOL = "/v1/convai/tools/{tool_id}"
    TOOL_DEPENDENT_AGENTS = "/v1/convai/tools/{tool_id}/dependent-agents"

    CONVAI_SETTINGS = "/v1/convai/settings"
    CONVAI_DASHBOARD_SETTINGS = "/v1/convai/settings/dashboard"


# Request limits
class Limits:
    """API limits and constraints."""

    # Truncation applied to raw (non-JSON) error bodies
    MAX_ERROR_BODY_CHARS = 200
