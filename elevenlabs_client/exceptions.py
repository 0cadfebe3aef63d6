"""
ElevenLabs Python Client - Exceptions

This module contains all custom exceptions used by the client, and the
static table mapping HTTP status codes to exception classes.
"""

import json
from typing import Any, Dict, Optional, Type

from elevenlabs_client.config import Limits


class ElevenLabsError(Exception):
    """
    Base exception for all ElevenLabs client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code, if the error came from a response
        code: Short error code
        body: Raw response body, if available
    """

    code: str = "ELEVENLABS_ERROR"

    def __init__(
        self,
        message: str = "",
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )


class APIError(ElevenLabsError):
    """Raised when the API returns an error that has no more specific class."""

    code = "API_ERROR"


class ValidationError(APIError):
    """Raised for client errors (4xx) without a dedicated class."""

    code = "VALIDATION_ERROR"


class BadRequestError(ValidationError):
    """Raised on HTTP 400: the request parameters were rejected."""

    code = "BAD_REQUEST"


class UnprocessableEntityError(ValidationError):
    """Raised on HTTP 422: the request body failed server-side validation."""

    code = "UNPROCESSABLE_ENTITY"


class AuthenticationError(APIError):
    """
    Raised when authentication fails.

    This can occur when:
    - API key is missing, invalid or revoked
    - The key was not configured before the client was created
    """

    code = "AUTHENTICATION_ERROR"


class PaymentRequiredError(APIError):
    """Raised on HTTP 402: the account has run out of credits or needs an upgrade."""

    code = "PAYMENT_REQUIRED"


class ForbiddenError(APIError):
    """Raised on HTTP 403: the key lacks permission for this resource."""

    code = "FORBIDDEN"


class NotFoundError(APIError):
    """Raised on HTTP 404."""

    code = "NOT_FOUND"


class TimeoutError(APIError):
    """
    Raised when a request times out.

    Covers both an HTTP 408 from the server and a transport timeout.
    """

    code = "TIMEOUT"


class RateLimitError(APIError):
    """
    Raised when the API rate limit is exceeded.

    Attributes:
        retry_after: Number of seconds to wait before retrying
    """

    code = "RATE_LIMIT_ERROR"

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        status_code: Optional[int] = 429,
        body: Optional[str] = None,
        retry_after: Optional[str] = None,
    ) -> None:
        super().__init__(message, status_code=status_code, body=body)
        self.retry_after = int(retry_after) if retry_after and retry_after.isdigit() else None

    def __str__(self) -> str:
        base = super().__str__()
        if self.retry_after:
            return f"{base}. Retry after {self.retry_after} seconds."
        return base


class ServerError(APIError):
    """Raised when the API server fails (5xx)."""

    code = "SERVER_ERROR"


class ServiceUnavailableError(ServerError):
    """Raised on HTTP 503."""

    code = "SERVICE_UNAVAILABLE"


class ConnectionError(ElevenLabsError):
    """Raised when the request never reached the API (DNS, TLS, refused connection)."""

    code = "CONNECTION_ERROR"


class WebSocketError(ElevenLabsError):
    """
    Raised when a WebSocket error occurs.

    Attributes:
        close_code: WebSocket close code, if the server closed the socket
    """

    code = "WEBSOCKET_ERROR"

    def __init__(
        self,
        message: str = "WebSocket error",
        close_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.close_code = close_code

    def __str__(self) -> str:
        base = super().__str__()
        if self.close_code:
            return f"{base} (Close code: {self.close_code})"
        return base


STATUS_ERRORS: Dict[int, Type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    402: PaymentRequiredError,
    403: ForbiddenError,
    404: NotFoundError,
    408: TimeoutError,
    422: UnprocessableEntityError,
    429: RateLimitError,
    503: ServiceUnavailableError,
}

DEFAULT_MESSAGES: Dict[int, str] = {
    400: "Bad request - invalid parameters",
    401: "Invalid API key or authentication failed",
    402: "Payment required",
    403: "Access forbidden",
    404: "Resource not found",
    408: "Request timeout",
    422: "Unprocessable entity - invalid data",
    429: "Rate limit exceeded",
    503: "Service unavailable",
}


def error_class_for_status(status_code: int) -> Type[APIError]:
    """Look up the exception class for an HTTP error status."""
    if status_code in STATUS_ERRORS:
        return STATUS_ERRORS[status_code]
    if 400 <= status_code < 500:
        return ValidationError
    return APIError


def extract_error_message(body: Optional[str]) -> str:
    """
    Pull a human-readable message out of an error response body.

    JSON bodies are searched for ``detail``, ``message``, ``error`` and
    ``errors`` in that order. Nested objects yield their own ``message``;
    lists yield their first element. Anything that is not JSON is returned
    as-is, truncated.
    """
    if not body:
        return ""

    try:
        error_info: Any = json.loads(body)
    except (ValueError, TypeError):
        limit = Limits.MAX_ERROR_BODY_CHARS
        return f"{body[:limit]}..." if len(body) > limit else body

    if not isinstance(error_info, dict):
        return str(error_info)

    message: Any = None
    for key in ("detail", "message", "error", "errors"):
        if error_info.get(key):
            message = error_info[key]
            break

    if isinstance(message, dict):
        message = message.get("message") or str(message)
    elif isinstance(message, list):
        message = str(message[0]) if message else ""

    return "" if message is None else str(message)


def error_for_status(
    status_code: int,
    body: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> APIError:
    """
    Build the exception for an error response.

    Args:
        status_code: HTTP status of the response
        body: Decoded response body
        headers: Response headers (used for Retry-After)

    Returns:
        An APIError subclass instance, ready to raise
    """
    error_class = error_class_for_status(status_code)
    message = extract_error_message(body)
    if not message:
        if status_code in DEFAULT_MESSAGES:
            message = DEFAULT_MESSAGES[status_code]
        elif 400 <= status_code < 500:
            message = f"Client error occurred with status {status_code}"
        else:
            message = f"API request failed with status {status_code}"

    if error_class is RateLimitError:
        retry_after = (headers or {}).get("retry-after")
        return RateLimitError(message, status_code=status_code, body=body, retry_after=retry_after)

    return error_class(message, status_code=status_code, body=body)
