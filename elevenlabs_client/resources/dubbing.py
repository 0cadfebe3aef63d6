"""
ElevenLabs Python Client - Dubbing Resource

This module provides methods for dubbing projects and for editing the
speakers and segments of a dubbing resource.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class DubbingResource(BaseResource):
    """
    Resource for dubbing audio and video into other languages.

    Example:
        >>> with open("video.mp4", "rb") as f:
        ...     dub = client.dubbing.create(f, "video.mp4", ["es", "fr"], name="Launch video")
        >>> status = client.dubbing.get(dub["dubbing_id"])
    """

    def create(
        self,
        file: BinaryIO,
        filename: str,
        target_languages: List[str],
        name: Optional[str] = None,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Create a dubbing project.

        Args:
            file: Source audio or video file object
            filename: Name of the uploaded file
            target_languages: Target languages; the first one is dubbed
            name: Project name
            **options: Extra form fields (source_lang, watermark, ...). These
                override the defaults mode="automatic" and num_speakers=1.

        Returns:
            Dict with ``dubbing_id`` and ``expected_duration_sec``
        """
        self._require("target_languages", target_languages)

        fields: Dict[str, Any] = {
            "mode": "automatic",
            "name": name,
            "target_lang": target_languages[0],
            "num_speakers": 1,
        }
        fields.update(options)

        return self._post_multipart(
            Endpoints.DUBBING,
            data=self._form(fields),
            files={"file": self._file(file, filename)},
        )

    def get(self, dubbing_id: str) -> Dict[str, Any]:
        """Get the metadata and status of a dubbing project."""
        return self._get(Endpoints.DUB.format(dubbing_id=dubbing_id))

    def list(self, **params: Any) -> Dict[str, Any]:
        """
        List dubbing projects.

        Args:
            **params: Query filters (cursor, page_size, dubbing_status, ...)
        """
        return self._get(Endpoints.DUBBING, params=params)

    def delete(self, dubbing_id: str) -> Dict[str, Any]:
        """Delete a dubbing project."""
        return self._delete(Endpoints.DUB.format(dubbing_id=dubbing_id))

    def resources(self, dubbing_id: str) -> Dict[str, Any]:
        """Get the resources attached to a dubbing project."""
        return self._get(Endpoints.DUB_RESOURCES.format(dubbing_id=dubbing_id))

    def get_resource(self, dubbing_id: str) -> Dict[str, Any]:
        """Get the editable dubbing resource (speakers, segments, renders)."""
        return self._get(Endpoints.DUB_RESOURCE.format(dubbing_id=dubbing_id))

    # =========================================================================
    # Segments
    # =========================================================================

    def create_segment(
        self,
        dubbing_id: str,
        speaker_id: str,
        start_time: float,
        end_time: float,
        text: Optional[str] = None,
        translations: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Add a segment to a speaker.

        Args:
            dubbing_id: The dubbing project
            speaker_id: Speaker the segment belongs to
            start_time: Segment start in seconds
            end_time: Segment end in seconds
            text: Source transcript of the segment
            translations: Translations keyed by language code

        Returns:
            Dict with the new ``new_segment`` ID
        """
        path = Endpoints.DUB_SPEAKER_SEGMENT.format(dubbing_id=dubbing_id, speaker_id=speaker_id)
        data = self._compact({
            "start_time": start_time,
            "end_time": end_time,
            "text": text,
            "translations": translations,
        })
        return self._post(path, json=data)

    def delete_segment(self, dubbing_id: str, segment_id: str) -> Dict[str, Any]:
        """Delete a segment."""
        path = Endpoints.DUB_SEGMENT.format(dubbing_id=dubbing_id, segment_id=segment_id)
        return self._delete(path)

    def update_segment(
        self,
        dubbing_id: str,
        segment_id: str,
        language: str,
        start_time: Optional[float] = None,
        end_time: Optional[float] = None,
        text: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Update the timing or text of a segment for one language."""
        path = Endpoints.DUB_SEGMENT_LANGUAGE.format(
            dubbing_id=dubbing_id, segment_id=segment_id, language=language
        )
        data = self._compact({"start_time": start_time, "end_time": end_time, "text": text})
        return self._patch(path, json=data)

    def transcribe_segment(self, dubbing_id: str, segments: List[str]) -> Dict[str, Any]:
        """Regenerate the transcript of the given segments."""
        path = Endpoints.DUB_TRANSCRIBE.format(dubbing_id=dubbing_id)
        return self._post(path, json={"segments": segments})

    def translate_segment(
        self,
        dubbing_id: str,
        segments: List[str],
        languages: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Regenerate the translations of the given segments."""
        path = Endpoints.DUB_TRANSLATE.format(dubbing_id=dubbing_id)
        return self._post(path, json=self._compact({"segments": segments, "languages": languages}))

    def dub_segment(
        self,
        dubbing_id: str,
        segments: List[str],
        languages: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Regenerate the dubbed audio of the given segments."""
        path = Endpoints.DUB_DUB.format(dubbing_id=dubbing_id)
        return self._post(path, json=self._compact({"segments": segments, "languages": languages}))

    def render_project(
        self,
        dubbing_id: str,
        language: str,
        render_type: str,
        normalize_volume: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Render the dubbed output for a language.

        Args:
            dubbing_id: The dubbing project
            language: Language to render
            render_type: "mp4", "aac", "mp3", "wav", "aaf", "tracks_zip" or "clips_zip"
            normalize_volume: Normalize the output volume

        Returns:
            Dict with ``version`` and ``render_id``
        """
        path = Endpoints.DUB_RENDER.format(dubbing_id=dubbing_id, language=language)
        data = self._compact({"render_type": render_type, "normalize_volume": normalize_volume})
        return self._post(path, json=data)

    # =========================================================================
    # Speakers
    # =========================================================================

    def update_speaker(
        self,
        dubbing_id: str,
        speaker_id: str,
        voice_id: Optional[str] = None,
        languages: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Change the voice used for a speaker."""
        path = Endpoints.DUB_SPEAKER.format(dubbing_id=dubbing_id, speaker_id=speaker_id)
        return self._patch(path, json=self._compact({"voice_id": voice_id, "languages": languages}))

    def get_similar_voices(self, dubbing_id: str, speaker_id: str) -> Dict[str, Any]:
        """List library voices similar to a speaker."""
        path = Endpoints.DUB_SIMILAR_VOICES.format(dubbing_id=dubbing_id, speaker_id=speaker_id)
        return self._get(path)

    # =========================================================================
    # Output
    # =========================================================================

    def get_dubbed_audio(self, dubbing_id: str, language_code: str) -> bytes:
        """Download the dubbed audio or video for a language."""
        path = Endpoints.DUB_AUDIO.format(dubbing_id=dubbing_id, language_code=language_code)
        return self._get_binary(path)

    def get_dubbed_transcript(
        self,
        dubbing_id: str,
        language_code: str,
        format_type: Optional[str] = None,
    ) -> Any:
        """
        Download the transcript for a language.

        Args:
            dubbing_id: The dubbing project
            language_code: Language of the transcript
            format_type: "srt" or "webvtt"

        Returns:
            The transcript text
        """
        path = Endpoints.DUB_TRANSCRIPT.format(dubbing_id=dubbing_id, language_code=language_code)
        return self._get(path, params=self._compact({"format_type": format_type}))
