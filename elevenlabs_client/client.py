"""
ElevenLabs Python Client - Main Client

This module provides the main ElevenLabs client class that serves as
the entry point for all API interactions.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Callable, Dict, List, Optional

import httpx

from elevenlabs_client.config import (
    ClientConfig,
    DEFAULT_API_KEY_ENV,
    DEFAULT_BASE_URL_ENV,
    DEFAULT_CONFIG,
)
from elevenlabs_client.exceptions import (
    AuthenticationError,
    ConnectionError,
    TimeoutError,
    error_for_status,
)
from elevenlabs_client.resources.text_to_speech import TextToSpeechResource
from elevenlabs_client.resources.text_to_dialogue import TextToDialogueResource
from elevenlabs_client.resources.sound_generation import SoundGenerationResource
from elevenlabs_client.resources.audio_isolation import AudioIsolationResource
from elevenlabs_client.resources.speech_to_speech import SpeechToSpeechResource
from elevenlabs_client.resources.speech_to_text import SpeechToTextResource
from elevenlabs_client.resources.forced_alignment import ForcedAlignmentResource
from elevenlabs_client.resources.text_to_voice import TextToVoiceResource
from elevenlabs_client.resources.music import MusicResource
from elevenlabs_client.resources.audio_native import AudioNativeResource
from elevenlabs_client.resources.dubbing import DubbingResource
from elevenlabs_client.resources.voices import VoicesResource
from elevenlabs_client.resources.models import ModelsResource
from elevenlabs_client.resources.admin.history import HistoryResource
from elevenlabs_client.resources.admin.pronunciation_dictionaries import (
    PronunciationDictionariesResource,
)
from elevenlabs_client.resources.admin.samples import SamplesResource
from elevenlabs_client.resources.admin.service_accounts import (
    ServiceAccountAPIKeysResource,
    ServiceAccountsResource,
)
from elevenlabs_client.resources.admin.usage import UsageResource
from elevenlabs_client.resources.admin.user import UserResource
from elevenlabs_client.resources.admin.voice_library import VoiceLibraryResource
from elevenlabs_client.resources.admin.webhooks import (
    WebhooksResource,
    WorkspaceWebhooksResource,
)
from elevenlabs_client.resources.admin.workspace import (
    WorkspaceGroupsResource,
    WorkspaceInvitesResource,
    WorkspaceMembersResource,
    WorkspaceResourcesResource,
)
from elevenlabs_client.resources.agents_platform.agents import AgentsResource
from elevenlabs_client.resources.agents_platform.conversations import ConversationsResource
from elevenlabs_client.resources.agents_platform.batch_calling import BatchCallingResource
from elevenlabs_client.resources.agents_platform.knowledge_base import KnowledgeBaseResource
from elevenlabs_client.resources.agents_platform.llm_usage import LLMUsageResource
from elevenlabs_client.resources.agents_platform.mcp_servers import MCPServersResource
from elevenlabs_client.resources.agents_platform.outbound_calling import OutboundCallingResource
from elevenlabs_client.resources.agents_platform.phone_numbers import PhoneNumbersResource
from elevenlabs_client.resources.agents_platform.secrets import SecretsResource
from elevenlabs_client.resources.agents_platform.agent_testing import (
    AgentTestInvocationsResource,
    AgentTestsResource,
)
from elevenlabs_client.resources.agents_platform.tools import ToolsResource
from elevenlabs_client.resources.agents_platform.widgets import WidgetsResource
from elevenlabs_client.resources.agents_platform.workspace import ConvaiWorkspaceResource
from elevenlabs_client.streaming import TextToSpeechWebSocket

logger = logging.getLogger("elevenlabs_client")


class ElevenLabs:
    """
    Main client for interacting with the ElevenLabs API.

    The client owns one HTTP connection pool and the authentication header.
    Every endpoint group is exposed as an attribute that delegates to it.

    Args:
        api_key: Your ElevenLabs API key. If not provided, it is read from
            the environment variable named by ``api_key_env``.
        base_url: The base URL for the API. If not provided, it is read from
            the environment variable named by ``base_url_env``, falling back
            to https://api.elevenlabs.io
        timeout: Read/write timeout in seconds. Defaults to 30.
        connect_timeout: Connection timeout in seconds. Defaults to 10.
        max_retries: Connection retries made by the transport. Defaults to 0.
        debug: Enable debug logging. Defaults to False.
        api_key_env: Environment variable holding the API key.
        base_url_env: Environment variable holding the base URL.

    Example:
        >>> client = ElevenLabs(api_key="your-api-key")
        >>> audio = client.text_to_speech.convert("21m00Tcm4TlvDq8ikWAM", "Hello!")
        >>> with open("hello.mp3", "wb") as f:
        ...     f.write(audio)

    Attributes:
        text_to_speech: Text to speech, with and without timestamps
        text_to_dialogue: Multi-voice dialogue synthesis
        sound_generation: Sound effects from text prompts
        audio_isolation: Background noise removal
        speech_to_speech: Voice changer
        speech_to_text: Transcription
        forced_alignment: Audio/text alignment
        text_to_voice: Voice design from descriptions
        music: Music composition
        audio_native: Audio Native projects
        dubbing: Dubbing projects and their editable resources
        voices: Voice management
        models: Available models
        history: Generated audio history
        pronunciation_dictionaries: Pronunciation dictionaries
        samples: Voice samples
        service_accounts: Workspace service accounts
        service_account_api_keys: API keys of service accounts
        usage: Character usage statistics
        user: Current user
        voice_library: Shared voice library
        webhooks: Workspace webhooks
        workspace_webhooks: Workspace webhooks (raw query passthrough)
        workspace_groups: Workspace groups
        workspace_invites: Workspace invites
        workspace_members: Workspace members
        workspace_resources: Workspace resource sharing
        agents: Conversational agents
        conversations: Agent conversations
        batch_calling: Batch outbound calls
        knowledge_base: Agent knowledge base documents
        llm_usage: LLM cost estimates
        mcp_servers: MCP servers
        outbound_calling: Single outbound calls
        phone_numbers: Agent phone numbers
        secrets: Agent workspace secrets
        agent_tests: Agent tests
        test_invocations: Agent test invocations
        tools: Agent tools
        widgets: Agent widgets
        convai_workspace: Agents platform workspace settings
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        connect_timeout: float = 10.0,
        max_retries: int = 0,
        debug: bool = False,
        api_key_env: str = DEFAULT_API_KEY_ENV,
        base_url_env: str = DEFAULT_BASE_URL_ENV,
    ) -> None:
        # Get API key from parameter or environment
        self._api_key = api_key or os.environ.get(api_key_env)
        if not self._api_key:
            raise AuthenticationError(
                f"API key is required. Provide it as a parameter or set "
                f"the {api_key_env} environment variable."
            )

        # Configuration
        self._config = ClientConfig(
            base_url=base_url or os.environ.get(base_url_env, DEFAULT_CONFIG.base_url),
            timeout=timeout,
            connect_timeout=connect_timeout,
            max_retries=max_retries,
            debug=debug,
        )
        self._config.validate()

        # Setup logging
        if debug:
            logging.basicConfig(level=logging.DEBUG)
            logger.setLevel(logging.DEBUG)

        # Create HTTP client
        self._http_client = self._create_http_client()

        # Initialize resources
        self._init_resources()

        logger.debug(f"ElevenLabs client initialized with base URL: {self._config.base_url}")

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _create_http_client(self) -> httpx.Client:
        """Create and configure the HTTP client."""
        headers = {
            "xi-api-key": self._api_key,
            "User-Agent": self._config.user_agent,
        }

        transport = httpx.HTTPTransport(retries=self._config.max_retries)

        return httpx.Client(
            base_url=self._config.base_url,
            headers=headers,
            timeout=httpx.Timeout(self._config.timeout, connect=self._config.connect_timeout),
            transport=transport,
            follow_redirects=True,
        )

    def _init_resources(self) -> None:
        """Initialize all API resources."""
        # Speech and audio
        self.text_to_speech = TextToSpeechResource(self)
        self.text_to_dialogue = TextToDialogueResource(self)
        self.sound_generation = SoundGenerationResource(self)
        self.audio_isolation = AudioIsolationResource(self)
        self.speech_to_speech = SpeechToSpeechResource(self)
        self.speech_to_text = SpeechToTextResource(self)
        self.forced_alignment = ForcedAlignmentResource(self)
        self.text_to_voice = TextToVoiceResource(self)
        self.music = MusicResource(self)
        self.audio_native = AudioNativeResource(self)
        self.dubbing = DubbingResource(self)
        self.voices = VoicesResource(self)
        self.models = ModelsResource(self)

        # Admin
        self.history = HistoryResource(self)
        self.pronunciation_dictionaries = PronunciationDictionariesResource(self)
        self.samples = SamplesResource(self)
        self.service_accounts = ServiceAccountsResource(self)
        self.service_account_api_keys = ServiceAccountAPIKeysResource(self)
        self.usage = UsageResource(self)
        self.user = UserResource(self)
        self.voice_library = VoiceLibraryResource(self)
        self.webhooks = WebhooksResource(self)
        self.workspace_webhooks = WorkspaceWebhooksResource(self)
        self.workspace_groups = WorkspaceGroupsResource(self)
        self.workspace_invites = WorkspaceInvitesResource(self)
        self.workspace_members = WorkspaceMembersResource(self)
        self.workspace_resources = WorkspaceResourcesResource(self)

        # Agents platform
        self.agents = AgentsResource(self)
        self.conversations = ConversationsResource(self)
        self.batch_calling = BatchCallingResource(self)
        self.knowledge_base = KnowledgeBaseResource(self)
        self.llm_usage = LLMUsageResource(self)
        self.mcp_servers = MCPServersResource(self)
        self.outbound_calling = OutboundCallingResource(self)
        self.phone_numbers = PhoneNumbersResource(self)
        self.secrets = SecretsResource(self)
        self.agent_tests = AgentTestsResource(self)
        self.test_invocations = AgentTestInvocationsResource(self)
        self.tools = ToolsResource(self)
        self.widgets = WidgetsResource(self)
        self.convai_workspace = ConvaiWorkspaceResource(self)

    @staticmethod
    def _clean_params(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if not params:
            return None
        return {k: v for k, v in params.items() if v is not None}

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Any] = None,
        content: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
        binary: bool = False,
    ) -> Any:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: API endpoint path
            params: Query parameters (None values are dropped)
            json: JSON body data
            data: Form data
            files: Files to upload
            content: Raw body, bytes or an iterator of byte chunks
            headers: Additional headers
            binary: Return the raw response bytes instead of parsing them

        Returns:
            Parsed JSON, response text, or bytes when ``binary`` is set

        Raises:
            AuthenticationError: If authentication fails
            RateLimitError: If rate limit is exceeded
            NotFoundError: If resource is not found
            ValidationError: If the request was rejected (4xx)
            APIError: For other API errors
            TimeoutError: If the request timed out
            ConnectionError: If the API could not be reached
        """
        logger.debug(f"Making {method} request to {path}")
        logger.debug(f"Params: {params}")

        try:
            response = self._http_client.request(
                method=method,
                url=path,
                params=self._clean_params(params),
                json=json,
                data=data,
                files=files,
                content=content,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Request timed out: {e}") from e
        except httpx.RequestError as e:
            raise ConnectionError(f"Request failed: {e}") from e

        return self._handle_response(response, binary=binary)

    def _handle_response(self, response: httpx.Response, binary: bool = False) -> Any:
        """Handle API response and raise appropriate exceptions."""
        logger.debug(f"Response status: {response.status_code}")

        if not response.is_success:
            raise error_for_status(response.status_code, response.text, response.headers)

        if binary:
            return response.content

        # No content
        if response.status_code == 204 or not response.content:
            return {}

        if "json" in response.headers.get("content-type", ""):
            return response.json()
        return response.text

    def _raise_for_stream_status(self, response: httpx.Response) -> None:
        logger.debug(f"Stream response status: {response.status_code}")
        if not response.is_success:
            response.read()
            raise error_for_status(response.status_code, response.text, response.headers)

    def stream(
        self,
        method: str,
        path: str,
        on_chunk: Optional[Callable[[bytes], None]] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Optional[bytes]:
        """
        Make a streaming request and hand each chunk to a callback.

        Chunks are passed to ``on_chunk`` as they arrive over the connection.
        When no callback is given the chunks are joined and returned.

        Args:
            method: HTTP method
            path: API endpoint path
            on_chunk: Called with each raw chunk of the response body
            params: Query parameters
            json: JSON body data
            data: Form data
            files: Files to upload
            headers: Additional headers

        Returns:
            None when ``on_chunk`` is given, otherwise the full body

        Raises:
            APIError: (or a subclass) if the response status is not 2xx
        """
        logger.debug(f"Opening {method} stream to {path}")
        chunks: List[bytes] = []

        try:
            with self._http_client.stream(
                method,
                path,
                params=self._clean_params(params),
                json=json,
                data=data,
                files=files,
                headers=headers,
            ) as response:
                self._raise_for_stream_status(response)
                for chunk in response.iter_bytes():
                    if on_chunk is not None:
                        on_chunk(chunk)
                    else:
                        chunks.append(chunk)
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Stream timed out: {e}") from e
        except httpx.RequestError as e:
            raise ConnectionError(f"Stream failed: {e}") from e

        if on_chunk is not None:
            return None
        return b"".join(chunks)

    def stream_json_lines(
        self,
        method: str,
        path: str,
        on_event: Optional[Callable[[Dict[str, Any]], None]] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Optional[List[Dict[str, Any]]]:
        """
        Make a streaming request whose body is newline-delimited JSON.

        Each complete line is decoded and passed to ``on_event``. Blank and
        malformed lines are skipped.

        Returns:
            None when ``on_event`` is given, otherwise the decoded events
        """
        logger.debug(f"Opening {method} JSON-lines stream to {path}")
        events: List[Dict[str, Any]] = []

        try:
            with self._http_client.stream(
                method,
                path,
                params=self._clean_params(params),
                json=json,
                headers=headers,
            ) as response:
                self._raise_for_stream_status(response)
                for line in response.iter_lines():
                    event = self._decode_line(line)
                    if event is None:
                        continue
                    if on_event is not None:
                        on_event(event)
                    else:
                        events.append(event)
        except httpx.TimeoutException as e:
            raise TimeoutError(f"Stream timed out: {e}") from e
        except httpx.RequestError as e:
            raise ConnectionError(f"Stream failed: {e}") from e

        if on_event is not None:
            return None
        return events

    @staticmethod
    def _decode_line(line: str) -> Optional[Dict[str, Any]]:
        line = line.strip()
        if not line:
            return None
        try:
            event = json.loads(line)
        except ValueError:
            logger.debug(f"Skipping malformed stream line: {line[:80]}")
            return None
        if not isinstance(event, dict):
            logger.debug(f"Skipping non-object stream line: {line[:80]}")
            return None
        return event

    def websocket(self) -> TextToSpeechWebSocket:
        """
        Get a WebSocket helper for input-streaming text to speech.

        Returns:
            TextToSpeechWebSocket bound to this client's key and base URL

        Example:
            >>> ws = client.websocket()
            >>> async with ws.connect("voice_id") as session:
            ...     await session.initialize()
            ...     await session.send_text("Hello there. ")
            ...     await session.close()
            ...     async for message in session.receive():
            ...         print(message.keys())
        """
        return TextToSpeechWebSocket(api_key=self._api_key, base_url=self._config.base_url)

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._http_client.close()
        logger.debug("ElevenLabs client closed")

    def __enter__(self) -> "ElevenLabs":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"ElevenLabs(base_url='{self._config.base_url}')"
