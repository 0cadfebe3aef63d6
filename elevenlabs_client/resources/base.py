"""
ElevenLabs Python Client - Base Resource

This module contains the base class for all API resources.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional

if TYPE_CHECKING:
    from elevenlabs_client.client import ElevenLabs


ChunkHandler = Callable[[bytes], None]
EventHandler = Callable[[Dict[str, Any]], None]


class BaseResource:
    """
    Base class for all API resources.

    Provides the request primitives every endpoint wrapper delegates to,
    plus small helpers for building query strings and request bodies.
    """

    def __init__(self, client: "ElevenLabs") -> None:
        """
        Initialize the resource.

        Args:
            client: The ElevenLabs client instance
        """
        self._client = client

    def _get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a GET request."""
        return self._client.request("GET", path, params=params)

    def _get_binary(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> bytes:
        """Make a GET request and return the raw response body."""
        return self._client.request("GET", path, params=params, binary=True)

    def _post(
        self,
        path: str,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make a POST request with a JSON body."""
        return self._client.request("POST", path, params=params, json=json, headers=headers)

    def _post_binary(
        self,
        path: str,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        content: Optional[Any] = None,
    ) -> bytes:
        """Make a POST request and return the raw response body."""
        return self._client.request(
            "POST", path, params=params, json=json, content=content, headers=headers, binary=True
        )

    def _post_multipart(
        self,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        binary: bool = False,
    ) -> Any:
        """
        Make a multipart/form-data POST request.

        httpx only switches to multipart when files are present, so a body
        without any file is sent as filename-less file parts instead.
        """
        if not files and data:
            files = self._form_parts(data)
            data = None
        return self._client.request(
            "POST", path, params=params, data=data, files=files, binary=binary
        )

    def _patch(
        self,
        path: str,
        json: Optional[Any] = None,
    ) -> Any:
        """Make a PATCH request."""
        return self._client.request("PATCH", path, json=json)

    def _delete(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """Make a DELETE request, optionally carrying a JSON body."""
        return self._client.request("DELETE", path, params=params, json=json)

    def _stream(
        self,
        method: str,
        path: str,
        on_chunk: Optional[ChunkHandler] = None,
        **kwargs: Any,
    ) -> Optional[bytes]:
        """Make a streaming request, handing raw chunks to ``on_chunk``."""
        return self._client.stream(method, path, on_chunk=on_chunk, **kwargs)

    def _stream_json_lines(
        self,
        method: str,
        path: str,
        on_event: Optional[EventHandler] = None,
        **kwargs: Any,
    ) -> Optional[List[Dict[str, Any]]]:
        """Make a streaming request whose body is newline-delimited JSON."""
        return self._client.stream_json_lines(method, path, on_event=on_event, **kwargs)

    @staticmethod
    def _compact(values: Mapping[str, Any]) -> Dict[str, Any]:
        """Drop keys whose value is None."""
        return {k: v for k, v in values.items() if v is not None}

    @staticmethod
    def _require(name: str, value: Any) -> None:
        """
        Check that a required argument is present.

        Raises:
            ValueError: If the value is None, a blank string or an empty collection
        """
        if value is None:
            raise ValueError(f"{name} is required")
        if isinstance(value, str) and not value.strip():
            raise ValueError(f"{name} is required")
        if isinstance(value, (list, tuple, dict, set)) and not value:
            raise ValueError(f"{name} is required")

    @staticmethod
    def _form(values: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Build multipart form fields.

        None values are dropped. Dicts and lists of dicts are sent as JSON
        strings, since form fields cannot carry nested structures.
        """
        form: Dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, dict) or (
                isinstance(value, (list, tuple)) and any(isinstance(v, dict) for v in value)
            ):
                form[key] = json.dumps(value)
            else:
                form[key] = value
        return form

    @staticmethod
    def _form_parts(data: Mapping[str, Any]) -> List[tuple]:
        """Turn form fields into multipart parts that carry no filename."""
        parts: List[tuple] = []
        for key, value in data.items():
            values = value if isinstance(value, (list, tuple)) else [value]
            for item in values:
                if isinstance(item, bool):
                    item = "true" if item else "false"
                parts.append((key, (None, str(item))))
        return parts

    @staticmethod
    def _file(file: Any, filename: str) -> tuple:
        """Pair an uploaded file object with its filename."""
        return (filename, file)
