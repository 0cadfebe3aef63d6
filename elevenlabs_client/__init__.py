"""
ElevenLabs Python Client

A Python client for the ElevenLabs API: text to speech, voices, dubbing,
transcription, workspace administration and conversational agents.

Example:
    >>> from elevenlabs_client import ElevenLabs
    >>> client = ElevenLabs(api_key="your-api-key")
    >>> audio = client.text_to_speech.convert("21m00Tcm4TlvDq8ikWAM", "Hello world")
    >>> voices = client.voices.list()
"""

from elevenlabs_client._version import __version__

__license__ = "MIT"

from elevenlabs_client.client import ElevenLabs
from elevenlabs_client.config import ClientConfig
from elevenlabs_client.models import McpApprovalPolicy, SecretType
from elevenlabs_client.exceptions import (
    ElevenLabsError,
    APIError,
    ValidationError,
    BadRequestError,
    UnprocessableEntityError,
    AuthenticationError,
    PaymentRequiredError,
    ForbiddenError,
    NotFoundError,
    TimeoutError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    ConnectionError,
    WebSocketError,
)
from elevenlabs_client.streaming import (
    TextToSpeechWebSocket,
    StreamInputSession,
    MultiStreamInputSession,
)

__all__ = [
    # Main client
    "ElevenLabs",
    "ClientConfig",

    # Models
    "McpApprovalPolicy",
    "SecretType",

    # Exceptions
    "ElevenLabsError",
    "APIError",
    "ValidationError",
    "BadRequestError",
    "UnprocessableEntityError",
    "AuthenticationError",
    "PaymentRequiredError",
    "ForbiddenError",
    "NotFoundError",
    "TimeoutError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "ConnectionError",
    "WebSocketError",

    # Streaming
    "TextToSpeechWebSocket",
    "StreamInputSession",
    "MultiStreamInputSession",
]
