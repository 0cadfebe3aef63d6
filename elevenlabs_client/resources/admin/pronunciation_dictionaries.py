"""
ElevenLabs Python Client - Pronunciation Dictionaries Resource
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class PronunciationDictionariesResource(BaseResource):
    """
    Resource for pronunciation dictionaries.

    Example:
        >>> dictionary = client.pronunciation_dictionaries.add_from_rules(
        ...     "Acronyms",
        ...     [{"type": "alias", "string_to_replace": "API", "alias": "A P I"}],
        ... )
    """

    def add_from_file(
        self,
        name: str,
        file: Optional[BinaryIO] = None,
        filename: Optional[str] = None,
        description: Optional[str] = None,
        workspace_access: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a dictionary from a PLS lexicon file.

        Args:
            name: Dictionary name
            file: PLS file object
            filename: Name of the uploaded file
            description: Dictionary description
            workspace_access: "admin", "editor" or "viewer"

        Returns:
            The created dictionary with its ``version_id``

        Raises:
            ValueError: If name is missing
        """
        self._require("name", name)

        files = None
        if file is not None and filename:
            files = {"file": self._file(file, filename)}

        fields = self._form({
            "name": name,
            "description": description,
            "workspace_access": workspace_access,
        })
        return self._post_multipart(Endpoints.PRONUNCIATION_DICTIONARY_FROM_FILE, data=fields, files=files)

    def add_from_rules(
        self,
        name: str,
        rules: List[Dict[str, Any]],
        description: Optional[str] = None,
        workspace_access: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a dictionary from alias or phoneme rules.

        Args:
            name: Dictionary name
            rules: Rule dicts (``type``, ``string_to_replace``, ``alias`` or ``phoneme``)
            description: Dictionary description
            workspace_access: "admin", "editor" or "viewer"

        Raises:
            ValueError: If name is missing or rules is not a non-empty list
        """
        self._require("name", name)
        if not isinstance(rules, list) or not rules:
            raise ValueError("rules must be a non-empty list")

        data: Dict[str, Any] = {"name": name, "rules": rules}
        if description:
            data["description"] = description
        if workspace_access:
            data["workspace_access"] = workspace_access

        return self._post(Endpoints.PRONUNCIATION_DICTIONARY_FROM_RULES, json=data)

    def get(self, dictionary_id: str) -> Dict[str, Any]:
        """Get a dictionary's metadata."""
        self._require("dictionary_id", dictionary_id)
        return self._get(Endpoints.PRONUNCIATION_DICTIONARY.format(dictionary_id=dictionary_id))

    def update(self, dictionary_id: str, **attributes: Any) -> Dict[str, Any]:
        """
        Update a dictionary.

        Args:
            dictionary_id: The dictionary's unique identifier
            **attributes: Fields to change (name, description, archived, ...)
        """
        self._require("dictionary_id", dictionary_id)
        path = Endpoints.PRONUNCIATION_DICTIONARY.format(dictionary_id=dictionary_id)
        return self._patch(path, json=attributes)

    def download_version(self, dictionary_id: str, version_id: str) -> bytes:
        """Download a dictionary version as a PLS file."""
        self._require("dictionary_id", dictionary_id)
        self._require("version_id", version_id)
        path = Endpoints.PRONUNCIATION_DICTIONARY_DOWNLOAD.format(
            dictionary_id=dictionary_id, version_id=version_id
        )
        return self._get_binary(path)

    def list(
        self,
        cursor: Optional[str] = None,
        page_size: Optional[int] = None,
        sort: Optional[str] = None,
        sort_direction: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        List dictionaries.

        Args:
            cursor: Pagination cursor
            page_size: Number of items to return
            sort: "creation_time_unix" or "name"
            sort_direction: "ascending" or "descending"
        """
        params = {
            "cursor": cursor,
            "page_size": page_size,
            "sort": sort,
            "sort_direction": sort_direction,
        }
        return self._get(Endpoints.PRONUNCIATION_DICTIONARIES, params=params)
