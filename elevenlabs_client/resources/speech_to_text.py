"""
ElevenLabs Python Client - Speech to Text Resource

This module provides methods for transcribing audio and video.
"""

from __future__ import annotations

import json
from typing import Any, BinaryIO, Dict, List, Optional

from elevenlabs_client.config import Endpoints
from elevenlabs_client.resources.base import BaseResource


class SpeechToTextResource(BaseResource):
    """
    Resource for speech to text transcription.

    Example:
        >>> with open("meeting.mp3", "rb") as f:
        ...     result = client.speech_to_text.create(
        ...         "scribe_v1", file=f, filename="meeting.mp3", diarize=True
        ...     )
        >>> print(result["text"])
    """

    def create(
        self,
        model_id: str,
        file: Optional[BinaryIO] = None,
        filename: Optional[str] = None,
        cloud_storage_url: Optional[str] = None,
        enable_logging: Optional[bool] = None,
        language_code: Optional[str] = None,
        tag_audio_events: Optional[bool] = None,
        num_speakers: Optional[int] = None,
        timestamps_granularity: Optional[str] = None,
        diarize: Optional[bool] = None,
        diarization_threshold: Optional[float] = None,
        additional_formats: Optional[List[Dict[str, Any]]] = None,
        file_format: Optional[str] = None,
        webhook: Optional[bool] = None,
        webhook_id: Optional[str] = None,
        temperature: Optional[float] = None,
        seed: Optional[int] = None,
        use_multi_channel: Optional[bool] = None,
        webhook_metadata: Optional[Any] = None,
    ) -> Dict[str, Any]:
        """
        Transcribe an audio or video file.

        Either ``file`` with ``filename`` or ``cloud_storage_url`` must be given.

        Args:
            model_id: Transcription model, e.g. "scribe_v1"
            file: Audio/video file object
            filename: Name of the uploaded file
            cloud_storage_url: HTTPS URL of a file to transcribe instead
            enable_logging: Set to False for zero-retention mode
            language_code: ISO 639-1 or ISO 639-3 language code
            tag_audio_events: Tag events such as (laughter)
            num_speakers: Maximum number of speakers
            timestamps_granularity: "none", "word" or "character"
            diarize: Annotate which speaker is talking
            diarization_threshold: Diarization sensitivity
            additional_formats: Extra export formats
            file_format: "pcm_s16le_16" or "other"
            webhook: Deliver the result through a webhook
            webhook_id: Webhook to deliver to
            temperature: Sampling temperature
            seed: Seed for deterministic sampling
            use_multi_channel: Transcribe each channel separately
            webhook_metadata: Metadata echoed back to the webhook (dict or JSON string)

        Returns:
            Transcription result

        Raises:
            ValueError: If neither a file nor a cloud storage URL is given
        """
        files = None
        fields: Dict[str, Any] = {"model_id": model_id}

        if file is not None and filename:
            files = {"file": self._file(file, filename)}
        elif cloud_storage_url:
            fields["cloud_storage_url"] = cloud_storage_url
        else:
            raise ValueError("Either file with filename or cloud_storage_url must be provided")

        if isinstance(webhook_metadata, dict):
            webhook_metadata = json.dumps(webhook_metadata)

        fields.update({
            "language_code": language_code,
            "tag_audio_events": tag_audio_events,
            "num_speakers": num_speakers,
            "timestamps_granularity": timestamps_granularity,
            "diarize": diarize,
            "diarization_threshold": diarization_threshold,
            "additional_formats": additional_formats,
            "file_format": file_format,
            "webhook": webhook,
            "webhook_id": webhook_id,
            "temperature": temperature,
            "seed": seed,
            "use_multi_channel": use_multi_channel,
            "webhook_metadata": webhook_metadata,
        })

        return self._post_multipart(
            Endpoints.SPEECH_TO_TEXT,
            params=self._compact({"enable_logging": enable_logging}),
            data=self._form(fields),
            files=files,
        )

    def get_transcript(self, transcription_id: str) -> Dict[str, Any]:
        """
        Get a previously created transcript.

        Args:
            transcription_id: The transcript's unique identifier

        Returns:
            Transcription result
        """
        path = Endpoints.SPEECH_TO_TEXT_TRANSCRIPT.format(transcription_id=transcription_id)
        return self._get(path)
