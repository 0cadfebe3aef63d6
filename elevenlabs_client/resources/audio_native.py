"""
ElevenLabs Python Client - Audio Native Resource

This module provides methods for managing Audio Native projects, the
embeddable players that narrate articles.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class AudioNativeResource(BaseResource):
    """Resource for Audio Native projects."""

    def create(
        self,
        name: str,
        file: Optional[BinaryIO] = None,
        filename: Optional[str] = None,
        image: Optional[str] = None,
        author: Optional[str] = None,
        title: Optional[str] = None,
        small: Optional[bool] = None,
        text_color: Optional[str] = None,
        background_color: Optional[str] = None,
        sessionization: Optional[int] = None,
        voice_id: Optional[str] = None,
        model_id: Optional[str] = None,
        auto_convert: Optional[bool] = None,
        apply_text_normalization: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create an Audio Native project.

        Args:
            name: Project name
            file: Text or HTML file with the content to narrate
            filename: Name of the uploaded file
            image: Image URL shown in the player
            author: Author shown in the player
            title: Title shown in the player
            small: Use the small player
            text_color: Player text color
            background_color: Player background color
            sessionization: Minutes to persist the session
            voice_id: Narration voice
            model_id: Narration model
            auto_convert: Convert the content to audio immediately
            apply_text_normalization: "auto", "on", "off" or "apply_english"

        Returns:
            Dict with ``project_id``, ``converting`` and ``html_snippet``

        Example:
            >>> with open("article.html", "rb") as f:
            ...     project = client.audio_native.create(
            ...         "My Article", file=f, filename="article.html", auto_convert=True
            ...     )
        """
        fields = self._form({
            "name": name,
            "image": image,
            "author": author,
            "title": title,
            "small": small,
            "text_color": text_color,
            "background_color": background_color,
            "sessionization": sessionization,
            "voice_id": voice_id,
            "model_id": model_id,
            "auto_convert": auto_convert,
            "apply_text_normalization": apply_text_normalization,
        })
        return self._post_multipart(
            Endpoints.AUDIO_NATIVE,
            data=fields,
            files=self._optional_file(file, filename),
        )

    def update_content(
        self,
        project_id: str,
        file: Optional[BinaryIO] = None,
        filename: Optional[str] = None,
        auto_convert: Optional[bool] = None,
        auto_publish: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Replace the content of a project.

        Args:
            project_id: The project's unique identifier
            file: Text or HTML file with the new content
            filename: Name of the uploaded file
            auto_convert: Convert the new content immediately
            auto_publish: Publish once converted

        Returns:
            Dict with the project status
        """
        path = Endpoints.AUDIO_NATIVE_CONTENT.format(project_id=project_id)
        fields = self._form({"auto_convert": auto_convert, "auto_publish": auto_publish})
        return self._post_multipart(path, data=fields, files=self._optional_file(file, filename))

    def get_settings(self, project_id: str) -> Dict[str, Any]:
        """Get the player settings of a project."""
        path = Endpoints.AUDIO_NATIVE_SETTINGS.format(project_id=project_id)
        return self._get(path)

    def _optional_file(self, file: Optional[BinaryIO], filename: Optional[str]) -> Optional[Dict[str, Any]]:
        if file is not None and filename:
            return {"file": self._file(file, filename)}
        return None
