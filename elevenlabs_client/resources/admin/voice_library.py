"""
ElevenLabs Python Client - Voice Library Resource

This module provides methods for browsing the shared voice library and
adding shared voices to the account.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class VoiceLibraryResource(BaseResource):
    """
    Resource for the shared voice library.

    Example:
        >>> voices = client.voice_library.get_shared_voices(gender="female", language="en")
        >>> shared = voices["voices"][0]
        >>> client.voice_library.add_shared_voice(
        ...     shared["public_owner_id"], shared["voice_id"], "Narrator"
        ... )
    """

    def get_shared_voices(
        self,
        page_size: Optional[int] = None,
        category: Optional[str] = None,
        gender: Optional[str] = None,
        age: Optional[str] = None,
        accent: Optional[str] = None,
        language: Optional[str] = None,
        locale: Optional[str] = None,
        search: Optional[str] = None,
        use_cases: Optional[List[str]] = None,
        descriptives: Optional[List[str]] = None,
        featured: Optional[bool] = None,
        min_notice_period_days: Optional[int] = None,
        include_custom_rates: Optional[bool] = None,
        include_live_moderated: Optional[bool] = None,
        reader_app_enabled: Optional[bool] = None,
        owner_id: Optional[str] = None,
        sort: Optional[str] = None,
        page: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Search the shared voice library.

        List filters (``use_cases``, ``descriptives``) repeat the query key.

        Returns:
            Dict with ``voices``, ``has_more`` and ``last_sort_id``
        """
        params = {
            "page_size": page_size,
            "category": category,
            "gender": gender,
            "age": age,
            "accent": accent,
            "language": language,
            "locale": locale,
            "search": search,
            "use_cases": use_cases,
            "descriptives": descriptives,
            "featured": featured,
            "min_notice_period_days": min_notice_period_days,
            "include_custom_rates": include_custom_rates,
            "include_live_moderated": include_live_moderated,
            "reader_app_enabled": reader_app_enabled,
            "owner_id": owner_id,
            "sort": sort,
            "page": page,
        }
        return self._get(Endpoints.SHARED_VOICES, params=params)

    def add_shared_voice(self, public_user_id: str, voice_id: str, new_name: str) -> Dict[str, Any]:
        """
        Add a shared voice to the account.

        Args:
            public_user_id: Public ID of the voice owner
            voice_id: The shared voice
            new_name: Name to give the voice in this account

        Returns:
            Dict with the new ``voice_id``
        """
        path = Endpoints.VOICE_ADD_SHARED.format(public_user_id=public_user_id, voice_id=voice_id)
        return self._post(path, json={"new_name": new_name})
