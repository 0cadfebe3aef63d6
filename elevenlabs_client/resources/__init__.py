"""
ElevenLabs Python Client - Resources

This module contains the speech and audio resource classes. Admin and
agents platform resources live in the ``admin`` and ``agents_platform``
subpackages.
"""

from elevenlabs_client.resources.base import BaseResource
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

__all__ = [
    "BaseResource",
    "TextToSpeechResource",
    "TextToDialogueResource",
    "SoundGenerationResource",
    "AudioIsolationResource",
    "SpeechToSpeechResource",
    "SpeechToTextResource",
    "ForcedAlignmentResource",
    "TextToVoiceResource",
    "MusicResource",
    "AudioNativeResource",
    "DubbingResource",
    "VoicesResource",
    "ModelsResource",
]
