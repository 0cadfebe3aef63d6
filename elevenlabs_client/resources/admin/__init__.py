"""
ElevenLabs Python Client - Admin Resources

Account, usage and workspace administration.
"""

from elevenlabs_client.resources.admin.history import HistoryResource
from elevenlabs_client.resources.admin.pronunciation_dictionaries import PronunciationDictionariesResource
from elevenlabs_client.resources.admin.samples import SamplesResource
from elevenlabs_client.resources.admin.service_accounts import (
    ServiceAccountAPIKeysResource,
    ServiceAccountsResource,
)
from elevenlabs_client.resources.admin.usage import UsageResource
from elevenlabs_client.resources.admin.user import UserResource
from elevenlabs_client.resources.admin.voice_library import VoiceLibraryResource
from elevenlabs_client.resources.admin.webhooks import WebhooksResource, WorkspaceWebhooksResource
from elevenlabs_client.resources.admin.workspace import (
    WorkspaceGroupsResource,
    WorkspaceInvitesResource,
    WorkspaceMembersResource,
    WorkspaceResourcesResource,
)

__all__ = [
    "HistoryResource",
    "PronunciationDictionariesResource",
    "SamplesResource",
    "ServiceAccountsResource",
    "ServiceAccountAPIKeysResource",
    "UsageResource",
    "UserResource",
    "VoiceLibraryResource",
    "WebhooksResource",
    "WorkspaceWebhooksResource",
    "WorkspaceGroupsResource",
    "WorkspaceInvitesResource",
    "WorkspaceMembersResource",
    "WorkspaceResourcesResource",
]
